"""Configuration loader for runtime game tuning."""

import json
import logging
import os
from dataclasses import dataclass, asdict, fields
from typing import Optional, Tuple

from config import (
    LEVEL_PATH, GAME_CONFIG_PATH,
    MONKEY_RAGE_DELAY, MONKEY_THROW_INTERVAL, MONKEY_RAGE_THRESHOLD,
)

logger = logging.getLogger(__name__)


@dataclass
class GameTuning:
    """Runtime toggles and boss tuning read from game_config.json."""
    level_path: str = LEVEL_PATH
    fixed_timestep: bool = False
    seed: Optional[int] = None
    # Charge wind-up is monkey_rage_delay * remaining health
    monkey_rage_delay: float = MONKEY_RAGE_DELAY
    monkey_throw_interval: Tuple[float, float] = MONKEY_THROW_INTERVAL
    monkey_rage_threshold: Tuple[int, int] = MONKEY_RAGE_THRESHOLD


def _coerce(data: dict) -> dict:
    out = {}
    if 'level_path' in data:
        out['level_path'] = str(data['level_path'])
    if 'fixed_timestep' in data:
        out['fixed_timestep'] = bool(data['fixed_timestep'])
    if 'seed' in data:
        out['seed'] = None if data['seed'] is None else int(data['seed'])
    if 'monkey_rage_delay' in data:
        out['monkey_rage_delay'] = float(data['monkey_rage_delay'])
    if 'monkey_throw_interval' in data:
        lo, hi = data['monkey_throw_interval']
        out['monkey_throw_interval'] = (float(lo), float(hi))
    if 'monkey_rage_threshold' in data:
        lo, hi = data['monkey_rage_threshold']
        if int(hi) <= int(lo):
            raise ValueError("monkey_rage_threshold must be an increasing [lo, hi) range")
        out['monkey_rage_threshold'] = (int(lo), int(hi))
    return out


def load_game_config(config_path: str = GAME_CONFIG_PATH) -> GameTuning:
    """
    Load game tuning from a JSON file.

    Args:
        config_path: Path to the configuration file

    Returns:
        GameTuning: Loaded configuration, or defaults if the file is missing
        or malformed
    """
    if not os.path.exists(config_path):
        logger.warning("Config file not found: %s, using defaults", config_path)
        return GameTuning()

    try:
        with open(config_path, 'r') as f:
            data = json.load(f)

        config_data = data.get('game_config', {})
        # Filter only fields that GameTuning accepts
        allowed_keys = {f.name for f in fields(GameTuning)}
        filtered = {k: v for k, v in config_data.items() if k in allowed_keys}
        return GameTuning(**_coerce(filtered))

    except (OSError, ValueError, TypeError, AttributeError) as e:
        logger.warning("Error loading config: %s, using defaults", e)
        return GameTuning()


def save_game_config(tuning: GameTuning, config_path: str = GAME_CONFIG_PATH) -> None:
    """
    Save game tuning to a JSON file.

    Args:
        tuning: Configuration to save
        config_path: Path to save the configuration file
    """
    directory = os.path.dirname(config_path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    data = {"game_config": asdict(tuning)}
    with open(config_path, 'w') as f:
        json.dump(data, f, indent=2)
