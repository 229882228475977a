from .tile_types import TileType
from .tile_data import Tile
from .tile_collision import collides, collides_any, first_collision
from .tile_parser import TileParser

__all__ = ['TileType', 'Tile', 'TileParser', 'collides', 'collides_any', 'first_collision']
