"""
Physics Component - Shared tile collision handling for all entities
One resolution routine, two policies:
- full stop per axis (player)
- probe ahead and reverse / stop on wall or ledge (enemies, charging monkey)
"""

from enum import Enum
from typing import Sequence

import pygame

from config import PATROL_PROBE_DISTANCE, LEDGE_PROBE_DEPTH
from ...core.utils import sign
from ...tiles.tile_collision import collides_any
from ...tiles.tile_data import Tile


class PatrolProbe(Enum):
    CLEAR = "clear"
    WALL = "wall"
    LEDGE = "ledge"


class PhysicsComponent:
    """Handles tile collision for a KinematicBody"""

    def __init__(self, entity):
        self.entity = entity

    def resolve_tiles(self, elapsed: float, tiles: Sequence[Tile]) -> pygame.Vector2:
        """Resolve this frame's displacement against tiles, one axis at a time.

        Each axis is tested on its own from the current position. Any overlap
        on an axis cancels that axis' displacement and velocity. A cancelled
        downward move marks the entity grounded. Returns the displacement to
        apply; position is not touched here.
        """
        entity = self.entity
        center, sides = entity.body()
        displacement = entity.velocity * elapsed
        grounded = False

        if collides_any(center + pygame.Vector2(displacement.x, 0.0), sides, tiles):
            displacement.x = 0.0
            entity.velocity.x = 0.0

        if collides_any(center + pygame.Vector2(0.0, displacement.y), sides, tiles):
            if entity.velocity.y < 0:
                grounded = True
            displacement.y = 0.0
            entity.velocity.y = 0.0

        entity.grounded = grounded
        return displacement

    def move_and_collide(self, elapsed: float, tiles: Sequence[Tile]) -> None:
        """Complete tile-resolved movement for one frame"""
        self.entity.position += self.resolve_tiles(elapsed, tiles)

    def probe_patrol(self, tiles: Sequence[Tile], direction=None, check_ledge: bool = True) -> PatrolProbe:
        """Look one step ahead in the direction of travel.

        WALL when the box shifted forward overlaps a tile. LEDGE when the same
        box, lowered slightly, finds no tile beneath the next step.
        """
        entity = self.entity
        center, sides = entity.body()
        if direction is None:
            direction = sign(entity.velocity.x)
        ahead = center + pygame.Vector2(direction * PATROL_PROBE_DISTANCE, 0.0)

        if collides_any(ahead, sides, tiles):
            return PatrolProbe.WALL
        if check_ledge and not collides_any(ahead + pygame.Vector2(0.0, -LEDGE_PROBE_DEPTH), sides, tiles):
            return PatrolProbe.LEDGE
        return PatrolProbe.CLEAR

    def patrol(self, elapsed: float, tiles: Sequence[Tile]) -> PatrolProbe:
        """Reverse on wall or ledge, then move. Returns the probe result."""
        probe = self.probe_patrol(tiles)
        if probe is not PatrolProbe.CLEAR:
            self.entity.velocity.x = -self.entity.velocity.x
        self.entity.integrate(elapsed)
        return probe
