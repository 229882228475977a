"""Level loader: turns an ASCII level file into tiles, spawns and bounds.

Loading is all or nothing. Either a complete LevelData comes back or
LevelLoadError is raised; there is no partially built level.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import List, Optional

import pygame

from config import LEVEL_PATH, TILE_SIDE, PLAYER_SIDES, ENEMY_SIDES, MONKEY_SIDES, CAMERA_WIDTH
from ..tiles.tile_data import Tile
from ..tiles.tile_parser import TileParser
from ..tiles.tile_types import TileType

logger = logging.getLogger(__name__)


class LevelLoadError(Exception):
    """Raised when a level source is missing or malformed."""


@dataclass
class LevelData:
    """Everything the simulation needs from a level source."""
    tiles: List[Tile]
    player_spawn: pygame.Vector2
    monkey_spawn: pygame.Vector2
    min_bounds: pygame.Vector2
    max_bounds: pygame.Vector2
    trap_x: float
    enemy_spawns: List[pygame.Vector2] = field(default_factory=list)
    source: Optional[str] = None


def _spawn_offset(world_pos: pygame.Vector2, side_y: float) -> pygame.Vector2:
    # Lift the centre so the entity's feet sit on the cell's floor
    return world_pos + pygame.Vector2(0.0, (side_y - TILE_SIDE) / 2)


def parse_level(text: str, source: Optional[str] = None) -> LevelData:
    """Build LevelData from the contents of a level file."""
    lines = text.splitlines()
    grid, entities = TileParser().parse_ascii_level(lines)
    if not grid or not grid[0]:
        raise LevelLoadError(f"Level {source or '<string>'} is empty")

    bounds = pygame.Vector2(len(grid[0]), len(grid)) * TILE_SIDE
    offset = bounds / 2
    tile_offset = pygame.Vector2(TILE_SIDE / 2, -TILE_SIDE / 2)

    def to_world(x: int, y: int) -> pygame.Vector2:
        return pygame.Vector2(x * TILE_SIDE - offset.x, -y * TILE_SIDE + offset.y) + tile_offset

    tiles = [
        Tile(to_world(x, y), tile_type=TileType(value))
        for y, row in enumerate(grid)
        for x, value in enumerate(row)
        if TileType(value).has_collision
    ]
    if not tiles:
        raise LevelLoadError(f"Level {source or '<string>'} has no tiles")

    def single(kind: str) -> pygame.Vector2:
        positions = entities.get(kind, [])
        if not positions:
            raise LevelLoadError(f"Level {source or '<string>'} has no {kind} marker")
        if len(positions) > 1:
            logger.warning("Level %s has %d %s markers, using the first", source, len(positions), kind)
        return to_world(*positions[0])

    player_spawn = _spawn_offset(single('spawn'), PLAYER_SIDES[1])
    monkey_spawn = _spawn_offset(single('monkey'), MONKEY_SIDES[1])
    enemy_spawns = [_spawn_offset(to_world(x, y), ENEMY_SIDES[1]) for x, y in entities.get('enemy', [])]

    min_bounds, max_bounds = -offset, pygame.Vector2(offset)
    if entities.get('trap'):
        trap_x = to_world(*entities['trap'][0]).x
    else:
        trap_x = max(min_bounds.x, max_bounds.x - CAMERA_WIDTH)

    return LevelData(
        tiles=tiles,
        player_spawn=player_spawn,
        monkey_spawn=monkey_spawn,
        min_bounds=min_bounds,
        max_bounds=max_bounds,
        trap_x=trap_x,
        enemy_spawns=enemy_spawns,
        source=source,
    )


class LevelLoader:
    """Loads a level file from disk."""

    def __init__(self, levels_file: str = LEVEL_PATH):
        """
        Args:
            levels_file: Path to the ASCII level file
        """
        self.levels_file = levels_file

    def load(self) -> LevelData:
        """
        Read and parse the level file.

        Raises:
            LevelLoadError: the file is missing, unreadable or malformed
        """
        if not os.path.exists(self.levels_file):
            raise LevelLoadError(f"Level file not found: {self.levels_file}")
        try:
            with open(self.levels_file, 'r', encoding='utf-8') as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise LevelLoadError(f"Could not read level file {self.levels_file}: {e}") from e

        data = parse_level(text, source=self.levels_file)
        logger.info("Loaded level %s: %d tiles, %d enemies", self.levels_file,
                    len(data.tiles), len(data.enemy_spawns))
        return data
