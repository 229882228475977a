# super_jeff/core/constants.py
"""
Global constants for the game: level characters, logical keys and sound cues.

Coordinate System:
- Origin: centre of the level grid.
- X-axis: increases from left to right.
- Y-axis: increases from bottom to top (the first text row is the highest).
"""
from enum import Enum

from ..tiles.tile_types import TileType

# === Tile Character Definitions ===
# The canonical mapping of ASCII characters to tile types.
# Any character not listed here or in ENTITY_CHAR_MAP is air.
TILE_CHAR_MAP = {
    '#': TileType.WALL,
    '.': TileType.AIR,
    ' ': TileType.AIR,
}

# === Entity Character Definitions ===
# These characters represent entities, not tiles.
ENTITY_CHAR_MAP = {
    'S': 'spawn',
    'E': 'enemy',
    'M': 'monkey',
    'T': 'trap',
}


class Key(Enum):
    """Logical keys the simulation understands."""
    LEFT = "left"
    RIGHT = "right"
    DOWN = "down"
    JUMP = "jump"


class SoundEffect(Enum):
    """Discrete sound cues emitted by the simulation each frame."""
    JUMP = "jump"
    HIT = "hit"
    CLICK = "click"
    DEAD = "dead"
    FALL = "fall"
    BANANA = "banana"
    RAGE = "rage"
