"""Axis-aligned box overlap tests used by every collision check in the game.

Boxes are described by their centre and their full side lengths. Overlap is
strict: two boxes whose edges touch exactly do not collide, which lets an
entity rest flush against a tile without colliding with it every frame.
"""
from typing import Iterable, Optional, Sequence

from .tile_data import Tile


def collides(pos_a: Sequence[float], sides_a: Sequence[float],
             pos_b: Sequence[float], sides_b: Sequence[float]) -> bool:
    """Return True if the two centred boxes overlap."""
    return (abs(pos_a[0] - pos_b[0]) < (sides_a[0] + sides_b[0]) / 2
            and abs(pos_a[1] - pos_b[1]) < (sides_a[1] + sides_b[1]) / 2)


def first_collision(pos: Sequence[float], sides: Sequence[float],
                    tiles: Iterable[Tile]) -> Optional[Tile]:
    """Return the first tile overlapping the box, or None."""
    for tile in tiles:
        if collides(pos, sides, tile.position, tile.sides):
            return tile
    return None


def collides_any(pos: Sequence[float], sides: Sequence[float], tiles: Iterable[Tile]) -> bool:
    return first_collision(pos, sides, tiles) is not None
