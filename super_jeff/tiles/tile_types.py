from enum import IntEnum


class TileType(IntEnum):
    """Cell kinds a level grid can hold. Grids store the int values."""

    AIR = 0
    WALL = 1

    @property
    def has_collision(self) -> bool:
        """Only cells with collision become Tile objects."""
        return self != TileType.AIR
