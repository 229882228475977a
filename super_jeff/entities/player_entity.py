from __future__ import annotations

import logging
from typing import AbstractSet, List, Sequence, Tuple

import pygame

from config import (
    GRAVITY, DRAG, DRAG_SNAP, PLAYER_SIDES, PLAYER_SPEED, PLAYER_AIR_CONTROL,
    PLAYER_JUMP_SPEED, PLAYER_JUMP_CUT, PLAYER_MAX_VELOCITY, PLAYER_CROUCH_SCALE,
    FOOT_OFFSET, FOOT_SIDES,
)
from ..core.constants import Key, SoundEffect
from ..core.utils import clamp_vector
from ..tiles.tile_collision import collides_any
from ..tiles.tile_data import Tile
from .entity_common import KinematicBody, vec
from .components.physics_component import PhysicsComponent

logger = logging.getLogger(__name__)


class Player(KinematicBody):
    """Input driven player body.

    Per frame: drag, input, gravity, then per-axis tile resolution. `grounded`
    and `crouched` are recomputed every frame and never carried over on their
    own.
    """

    def __init__(self, spawn):
        super().__init__(spawn, PLAYER_SIDES)
        self.full_sides = vec(PLAYER_SIDES)
        self.grounded = False
        self.crouched = False
        self.dead = False
        self.physics = PhysicsComponent(self)

    def speed(self) -> float:
        if self.grounded:
            return PLAYER_SPEED
        return PLAYER_SPEED * PLAYER_AIR_CONTROL

    def accelerate(self, accel, elapsed: float) -> None:
        self.velocity += vec(accel) * elapsed
        clamp_vector(self.velocity, PLAYER_MAX_VELOCITY)

    def apply_drag(self, elapsed: float) -> None:
        if not self.grounded:
            return
        self.velocity.x *= max(0.0, 1.0 - DRAG * elapsed)
        clamp_vector(self.velocity, PLAYER_MAX_VELOCITY)
        if abs(self.velocity.x) < DRAG_SNAP:
            self.velocity.x = 0.0

    def body(self) -> Tuple[pygame.Vector2, pygame.Vector2]:
        # Crouching shrinks the box from the top; feet stay where they are
        offset = (self.full_sides.y - self.sides.y) / 2
        return pygame.Vector2(self.position.x, self.position.y - offset), pygame.Vector2(self.sides)

    def bottom(self) -> float:
        return self.position.y - self.full_sides.y / 2

    def foot_rect(self) -> Tuple[pygame.Vector2, pygame.Vector2]:
        foot = pygame.Vector2(self.position.x, self.bottom() - FOOT_OFFSET)
        return foot, vec(FOOT_SIDES)

    def _set_crouch(self, crouch: bool, tiles: Sequence[Tile]) -> None:
        if not crouch and self.crouched:
            # Stay down under a low ceiling
            if collides_any(self.position, self.full_sides, tiles):
                return
        self.crouched = crouch
        scale = PLAYER_CROUCH_SCALE if crouch else 1.0
        self.sides.update(self.full_sides.x, self.full_sides.y * scale)

    def update(self, elapsed: float, keys: AbstractSet[Key], tiles: Sequence[Tile]) -> List[SoundEffect]:
        """Advance the player one frame. Returns the sound cues it triggered."""
        events: List[SoundEffect] = []
        if self.dead:
            return events

        self.apply_drag(elapsed)

        self._set_crouch(Key.DOWN in keys, tiles)
        if Key.LEFT in keys:
            self.accelerate((-self.speed(), 0.0), elapsed)
        if Key.RIGHT in keys:
            self.accelerate((self.speed(), 0.0), elapsed)
        if Key.JUMP in keys:
            if self.grounded:
                self.velocity.y = PLAYER_JUMP_SPEED
                events.append(SoundEffect.JUMP)
        elif self.velocity.y > PLAYER_JUMP_SPEED * PLAYER_JUMP_CUT:
            # Released early: cut the jump short
            self.velocity.y = PLAYER_JUMP_SPEED * PLAYER_JUMP_CUT

        self.accelerate(GRAVITY, elapsed)
        self.physics.move_and_collide(elapsed, tiles)
        return events

    def bounce(self) -> None:
        """Stomp rebound; lets stomps chain."""
        self.velocity.y = PLAYER_JUMP_SPEED
        self.grounded = False

    def block_retreat(self, x_limit: float) -> None:
        """Keep the player's left edge at or right of x_limit."""
        left = self.position.x - self.sides.x / 2
        if left < x_limit:
            self.position.x = x_limit + self.sides.x / 2
            self.velocity.x = max(0.0, self.velocity.x)

    def die(self) -> bool:
        """Kill the player. Returns False if the player was already dead."""
        if self.dead:
            return False
        self.dead = True
        self.velocity.update(0.0, 0.0)
        logger.debug("Player died at (%.2f, %.2f)", self.position.x, self.position.y)
        return True

    def respawn(self) -> None:
        self.position.update(self.spawn)
        self.velocity.update(0.0, 0.0)
        self.sides.update(self.full_sides)
        self.dead = False
        self.grounded = False
        self.crouched = False
