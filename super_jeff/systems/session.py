"""
Session control surface.

The only way the outside world changes the game: `start()` arms the timer and
lets frames run, `reset()` throws the level away and rebuilds it from the
loader, `update()` advances one frame. Everything else is read-only.
"""

import logging
import random
from enum import Enum
from typing import AbstractSet, Iterable, List, Optional

from config import TIME_BONUS, TIME_BONUS_DECAY
from ..core.constants import Key, SoundEffect
from ..level.config_loader import GameTuning
from ..level.level import Level, WorldSnapshot
from ..level.level_loader import LevelLoader

logger = logging.getLogger(__name__)


class SessionState(Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    PLAYER_DEAD = "player_dead"
    COMPLETED = "completed"


class Session:
    def __init__(self, loader: LevelLoader, tuning: Optional[GameTuning] = None,
                 rng: Optional[random.Random] = None):
        """
        Args:
            loader: Level source; called again on every reset
            tuning: Runtime tuning, defaults when omitted
            rng: Random source for the AI. Pass a seeded generator for replays.

        Raises:
            LevelLoadError: the initial level could not be loaded
        """
        self.loader = loader
        self.tuning = tuning or GameTuning()
        self.rng = rng if rng is not None else random.Random(self.tuning.seed)
        self.level: Level = self._build_level()
        self._clear_session()

    def _build_level(self) -> Level:
        return Level(self.loader.load(), rng=self.rng, tuning=self.tuning)

    def _clear_session(self) -> None:
        self.state = SessionState.NOT_STARTED
        self.elapsed = 0.0
        self.final_time: Optional[float] = None
        self.sounds: List[SoundEffect] = []

    @property
    def started(self) -> bool:
        return self.state is not SessionState.NOT_STARTED

    @property
    def score(self) -> int:
        return self.level.score

    def start(self) -> None:
        if self.state is SessionState.NOT_STARTED:
            self.state = SessionState.RUNNING
            logger.info("Session started")

    def reset(self) -> None:
        """Rebuild the level from the loader.

        The current level is kept if loading fails; the error propagates.
        """
        level = self._build_level()
        self.level = level
        self._clear_session()
        logger.info("Level reset")

    def update(self, elapsed: float, keys: Iterable[Key]) -> List[SoundEffect]:
        """Advance one frame and return the sound cues it produced.

        Negative elapsed time is treated as zero. Frames outside RUNNING are
        no-ops.
        """
        self.sounds = []
        if self.state is not SessionState.RUNNING:
            return self.sounds

        elapsed = max(0.0, elapsed)
        held: AbstractSet[Key] = frozenset(k for k in keys if isinstance(k, Key))
        self.elapsed += elapsed
        self.sounds = self.level.update(elapsed, held)

        if self.level.player.dead:
            self.state = SessionState.PLAYER_DEAD
            logger.info("Player died after %.1fs with score %d", self.elapsed, self.score)
        elif self.level.monkey.dead:
            self.state = SessionState.COMPLETED
            self.final_time = self.elapsed
            logger.info("Level completed in %.1fs, total score %d", self.final_time, self.final_score())
        return self.sounds

    def time_bonus(self) -> int:
        if self.final_time is None:
            return 0
        return max(0, TIME_BONUS - TIME_BONUS_DECAY * int(self.final_time))

    def final_score(self) -> int:
        return self.score + self.time_bonus()

    def snapshot(self) -> WorldSnapshot:
        return self.level.snapshot()
