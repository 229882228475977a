"""
Level orchestrator.

Owns every entity and tile of a loaded level and advances them one frame at a
time in a fixed order:

1. player
2. monkey (reads the player's fresh position)
3. trap line latch
4. enemies
5. fall death
6. combat: monkey, bananas, enemies
7. scoring
8. banana pruning

The level is rebuilt from LevelData on every reset; nothing carries over.
"""

import logging
import random
from dataclasses import dataclass
from typing import AbstractSet, List, Optional, Tuple

from config import FALL_MARGIN, SCORE_ENEMY, SCORE_BOSS
from ..core.constants import Key, SoundEffect
from ..entities.entities import Player, Enemy, Monkey, DamageResult
from ..entities.components.combat_component import stomp, body_contact
from ..tiles.tile_data import Tile
from .config_loader import GameTuning
from .level_loader import LevelData

logger = logging.getLogger(__name__)

Vec = Tuple[float, float]


@dataclass(frozen=True)
class EntityView:
    """Read-only view of one body for the renderer."""
    position: Vec
    sides: Vec
    dead: bool = False
    enraged: bool = False
    grounded: bool = False
    crouched: bool = False
    facing_left: bool = False


@dataclass(frozen=True)
class WorldSnapshot:
    player: EntityView
    monkey: EntityView
    enemies: Tuple[EntityView, ...]
    bananas: Tuple[EntityView, ...]
    tiles: Tuple[EntityView, ...]
    min_bounds: Vec
    max_bounds: Vec
    trap_x: float
    trapped: bool
    score: int


def _xy(v) -> Vec:
    return (v.x, v.y)


class Level:
    def __init__(self, data: LevelData, rng: Optional[random.Random] = None,
                 tuning: Optional[GameTuning] = None):
        tuning = tuning or GameTuning()
        self.rng = rng if rng is not None else random.Random(tuning.seed)

        self.tiles: Tuple[Tile, ...] = tuple(data.tiles)
        self.min_bounds = data.min_bounds.copy()
        self.max_bounds = data.max_bounds.copy()
        self.trap_x = data.trap_x

        self.player = Player(data.player_spawn)
        self.enemies: List[Enemy] = [Enemy(p) for p in data.enemy_spawns]
        self.monkey = Monkey(
            data.monkey_spawn,
            rage_delay=tuning.monkey_rage_delay,
            throw_interval=tuning.monkey_throw_interval,
            rage_threshold=tuning.monkey_rage_threshold,
            rng=self.rng,
        )

        self.trapped = False
        self.score = 0
        self.boss_scored = False

    def fall_limit(self) -> float:
        return self.min_bounds.y - FALL_MARGIN * self.player.full_sides.y

    def update(self, elapsed: float, keys: AbstractSet[Key]) -> List[SoundEffect]:
        """Advance the world one frame. Returns the frame's sound cues."""
        events: List[SoundEffect] = []
        if self.player.dead:
            return events

        events += self.player.update(elapsed, keys, self.tiles)
        events += self.monkey.update(elapsed, self.player.position, self.tiles, self.rng)

        if not self.trapped and self.player.position.x > self.trap_x:
            self.trapped = True
            logger.debug("Trap line crossed at x=%.2f", self.trap_x)
        if self.trapped:
            self.player.block_retreat(self.trap_x)

        for enemy in self.enemies:
            enemy.update(elapsed, self.tiles)

        if self.player.position.y < self.fall_limit():
            if self.player.die():
                events.append(SoundEffect.FALL)

        if not self.player.dead:
            self._resolve_combat(events)

        self.monkey.prune_bananas(self.min_bounds.y)
        return events

    def _resolve_combat(self, events: List[SoundEffect]) -> None:
        player, monkey = self.player, self.monkey

        if not monkey.dead:
            result = stomp(player, monkey)
            if result is None:
                if body_contact(player, monkey):
                    self._kill_player(events)
                    return
            elif result is DamageResult.IGNORED:
                events.append(SoundEffect.CLICK)
            elif result is DamageResult.HIT:
                events += [SoundEffect.HIT, SoundEffect.RAGE]
            else:
                events.append(SoundEffect.HIT)
                if not self.boss_scored:
                    self.boss_scored = True
                    self.score += SCORE_BOSS
                    logger.info("Monkey defeated, score %d", self.score)

        for banana in monkey.bananas:
            if body_contact(player, banana):
                self._kill_player(events)
                return

        for enemy in self.enemies:
            if enemy.dead:
                continue
            result = stomp(player, enemy)
            if result is DamageResult.KILLED:
                events.append(SoundEffect.HIT)
                self.score += SCORE_ENEMY
            elif result is None and body_contact(player, enemy):
                self._kill_player(events)
                return

    def _kill_player(self, events: List[SoundEffect]) -> None:
        if self.player.die():
            events.append(SoundEffect.DEAD)

    def snapshot(self) -> WorldSnapshot:
        player, monkey = self.player, self.monkey
        body_center, body_sides = player.body()
        return WorldSnapshot(
            player=EntityView(_xy(body_center), _xy(body_sides), dead=player.dead,
                              grounded=player.grounded, crouched=player.crouched,
                              facing_left=player.facing_left()),
            monkey=EntityView(_xy(monkey.position), _xy(monkey.sides), dead=monkey.dead,
                              enraged=monkey.enraged, facing_left=monkey.facing_left()),
            enemies=tuple(EntityView(_xy(e.position), _xy(e.sides), dead=e.dead,
                                     facing_left=e.facing_left()) for e in self.enemies),
            bananas=tuple(EntityView(_xy(b.position), _xy(b.sides)) for b in monkey.bananas),
            tiles=tuple(EntityView(_xy(t.position), _xy(t.sides)) for t in self.tiles),
            min_bounds=_xy(self.min_bounds),
            max_bounds=_xy(self.max_bounds),
            trap_x=self.trap_x,
            trapped=self.trapped,
            score=self.score,
        )
