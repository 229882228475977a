from __future__ import annotations

import logging
import random
from enum import Enum
from typing import List, Optional, Sequence, Tuple

import pygame

from config import (
    GRAVITY, ENEMY_SIDES, ENEMY_SPEED, ENEMY_HEALTH,
    MONKEY_SIDES, MONKEY_HEALTH, MONKEY_RAGE_SPEED, MONKEY_RAGE_SPEED_INCREMENT,
    MONKEY_RAGE_DELAY, MONKEY_THROW_INTERVAL, MONKEY_RAGE_THRESHOLD,
    BANANA_SIDES, BANANA_MAX_DISTANCE, BANANA_THROW_JITTER, BANANA_MIN_VY,
)
from ..core.constants import SoundEffect
from ..tiles.tile_data import Tile
from ..ai.enemy_movement import MovementStrategyFactory
from .entity_common import KinematicBody, DamageResult, vec
from .components.physics_component import PhysicsComponent, PatrolProbe
from .components.combat_component import CombatComponent

logger = logging.getLogger(__name__)


class Enemy(KinematicBody):
    """Ground patroller. Walks at a fixed speed and turns at walls and ledges.

    Dies in one hit and stays behind as an inert corpse until the level is
    reloaded.
    """

    def __init__(self, position, speed: float = ENEMY_SPEED):
        super().__init__(position, ENEMY_SIDES, velocity=(-speed, 0.0))
        self.physics = PhysicsComponent(self)
        self.combat = CombatComponent(self, ENEMY_HEALTH)
        self.movement_strategy = MovementStrategyFactory.create_strategy('ground_patrol')

    @property
    def health(self) -> int:
        return self.combat.hp

    @property
    def dead(self) -> bool:
        return not self.combat.alive

    def damage(self, amount: int) -> DamageResult:
        return self.combat.take_damage(amount)

    def update(self, elapsed: float, tiles: Sequence[Tile]) -> None:
        if self.dead:
            return
        self.movement_strategy.move(self, elapsed, tiles)


class Banana(KinematicBody):
    """Ballistic projectile. Ignores tiles; only gravity acts on it."""

    def __init__(self, position, velocity):
        super().__init__(position, BANANA_SIDES, velocity=velocity)

    def update(self, elapsed: float) -> None:
        self.velocity += vec(GRAVITY) * elapsed
        self.integrate(elapsed)

    def hitbox(self) -> Tuple[pygame.Vector2, pygame.Vector2]:
        return pygame.Vector2(self.position), pygame.Vector2(self.sides)


class MonkeyState(Enum):
    IDLE = "idle"
    THROWING = "throwing"
    CHARGING = "charging"
    DEAD = "dead"


class Monkey(KinematicBody):
    """The boss.

    IDLE counts towards the next throw. Every throw passes through THROWING
    for one frame. After enough throws, or on taking a hit, the monkey
    enters CHARGING: it winds up for `rage_delay * health` seconds, then runs
    at `rage_velocity` until a wall or ledge is one step ahead. It cannot be
    hurt while charging. Each hit makes the next charge faster.

    Bananas it has thrown are kept in `bananas` and keep flying after the
    monkey dies.
    """

    def __init__(self, position, rage_delay: float = MONKEY_RAGE_DELAY,
                 throw_interval: Tuple[float, float] = MONKEY_THROW_INTERVAL,
                 rage_threshold: Tuple[int, int] = MONKEY_RAGE_THRESHOLD,
                 rng: Optional[random.Random] = None):
        super().__init__(position, MONKEY_SIDES)
        self.physics = PhysicsComponent(self)
        self.combat = CombatComponent(self, MONKEY_HEALTH)
        self.movement_strategy = MovementStrategyFactory.create_strategy('charge')

        self.rage_delay = rage_delay
        self.throw_interval = throw_interval
        self.rage_threshold_range = rage_threshold

        rng = rng or random.Random()
        self.state = MonkeyState.IDLE
        self.rage_velocity = pygame.Vector2(-MONKEY_RAGE_SPEED, 0.0)
        self.timer = 0.0
        self.next_throw = self._roll_throw_interval(rng)
        self.bananas_thrown = 0
        self.rage_threshold = self._roll_rage_threshold(rng)
        self.bananas: List[Banana] = []

    # --- state queries -------------------------------------------------

    @property
    def health(self) -> int:
        return self.combat.hp

    @property
    def dead(self) -> bool:
        return self.state is MonkeyState.DEAD

    @property
    def enraged(self) -> bool:
        return self.state is MonkeyState.CHARGING

    def is_invulnerable(self) -> bool:
        return self.enraged

    def facing_left(self) -> bool:
        return self.rage_velocity.x < 0

    def charge_delay(self) -> float:
        return self.rage_delay * self.health

    # --- transitions ---------------------------------------------------

    def _roll_throw_interval(self, rng: random.Random) -> float:
        return rng.uniform(*self.throw_interval)

    def _roll_rage_threshold(self, rng: random.Random) -> int:
        return rng.randrange(*self.rage_threshold_range)

    def _transition(self, state: MonkeyState) -> None:
        if state is not self.state:
            logger.debug("Monkey %s -> %s", self.state.value, state.value)
        self.state = state

    def rage(self) -> None:
        self._transition(MonkeyState.CHARGING)
        self.bananas_thrown = 0
        self.timer = 0.0
        self.velocity.update(0.0, 0.0)

    def damage(self, amount: int) -> DamageResult:
        """Ignored while charging. A surviving hit triggers an immediate rage."""
        if self.dead:
            return DamageResult.IGNORED
        result = self.combat.take_damage(amount)
        if result is DamageResult.IGNORED:
            return result

        direction = -1 if self.rage_velocity.x < 0 else 1
        self.rage_velocity.x += direction * MONKEY_RAGE_SPEED_INCREMENT
        if result is DamageResult.KILLED:
            self._transition(MonkeyState.DEAD)
            self.velocity.update(0.0, 0.0)
        else:
            self.rage()
        return result

    # --- behaviour -----------------------------------------------------

    def throw_banana(self, target, rng: random.Random) -> Optional[Banana]:
        """Lob a banana whose arc lands at the target's horizontal offset.

        Out of range targets are skipped. The launch speed grows with the
        distance; its random part shrinks as the monkey loses health.
        """
        dx = target[0] - self.position.x
        if abs(dx) > BANANA_MAX_DISTANCE:
            return None
        jitter = rng.random() * BANANA_THROW_JITTER * self.health / MONKEY_HEALTH
        vy = max(BANANA_MIN_VY, jitter + abs(dx) / 2)
        # Range of a projectile returning to launch height: dx = 2 * vx * vy / g
        vx = (dx * -GRAVITY[1] / vy) / 2
        banana = Banana(self.position, (vx, vy))
        self.bananas.append(banana)
        self.bananas_thrown += 1
        return banana

    def update(self, elapsed: float, target, tiles: Sequence[Tile],
               rng: random.Random) -> List[SoundEffect]:
        """Advance the AI and every banana in flight. Returns sound cues."""
        events: List[SoundEffect] = []

        if self.state is MonkeyState.THROWING:
            self._transition(MonkeyState.IDLE)
            self.timer += elapsed
        elif self.state is MonkeyState.IDLE:
            self.timer += elapsed
            if self.bananas_thrown >= self.rage_threshold:
                self.rage()
                events.append(SoundEffect.RAGE)
            elif self.timer >= self.next_throw:
                self._transition(MonkeyState.THROWING)
                self.timer = 0.0
                self.next_throw = self._roll_throw_interval(rng)
                if self.throw_banana(target, rng) is not None:
                    events.append(SoundEffect.BANANA)
        elif self.state is MonkeyState.CHARGING:
            self.timer += elapsed
            if self.timer >= self.charge_delay():
                probe = self.movement_strategy.move(self, elapsed, tiles)
                if probe is not PatrolProbe.CLEAR:
                    self._transition(MonkeyState.IDLE)
                    self.timer = 0.0
                    self.rage_threshold = self._roll_rage_threshold(rng)

        for banana in self.bananas:
            banana.update(elapsed)
        return events

    def prune_bananas(self, min_y: float) -> int:
        """Drop bananas that fell below min_y. Returns how many were removed."""
        before = len(self.bananas)
        self.bananas = [b for b in self.bananas if b.position.y >= min_y]
        return before - len(self.bananas)
