from dataclasses import dataclass, field

import pygame

from config import TILE_SIDE
from .tile_types import TileType


@dataclass(frozen=True)
class Tile:
    """A static level tile. Tiles never move and never react to collisions."""
    position: pygame.Vector2
    sides: pygame.Vector2 = field(default_factory=lambda: pygame.Vector2(TILE_SIDE, TILE_SIDE))
    tile_type: TileType = TileType.WALL

    @classmethod
    def at(cls, x: float, y: float) -> "Tile":
        return cls(pygame.Vector2(x, y))
