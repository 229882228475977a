from typing import List, Dict, Tuple, Optional

from .tile_types import TileType


class TileParser:
    """Parses ASCII level definitions to tile grids."""

    def __init__(self, ascii_map: Optional[Dict[str, TileType]] = None,
                 entity_markers: Optional[Dict[str, str]] = None):
        from ..core.constants import TILE_CHAR_MAP, ENTITY_CHAR_MAP

        self.ascii_map: Dict[str, TileType] = dict(ascii_map or TILE_CHAR_MAP)
        # Entity markers (not converted to tiles)
        self.entity_markers: Dict[str, str] = dict(entity_markers or ENTITY_CHAR_MAP)

    def parse_ascii_level(self, ascii_level: List[str]) -> Tuple[List[List[int]], Dict[str, List[Tuple[int, int]]]]:
        """
        Parse ASCII level definition to tile grid and entity positions.

        Rows may have different lengths; the grid is padded with air to the
        widest row.

        Returns:
            Tuple of (tile_grid, entity_positions) in grid coordinates
            (column, row) with row 0 at the top.
        """
        if not ascii_level:
            return [], {}

        max_width = max(len(line) for line in ascii_level)
        height = len(ascii_level)

        tile_grid = [[TileType.AIR.value for _ in range(max_width)] for _ in range(height)]
        entity_positions: Dict[str, List[Tuple[int, int]]] = {}

        for y, line in enumerate(ascii_level):
            for x, char in enumerate(line):
                if char in self.ascii_map:
                    tile_grid[y][x] = self.ascii_map[char].value
                elif char in self.entity_markers:
                    entity_type = self.entity_markers[char]
                    entity_positions.setdefault(entity_type, []).append((x, y))
                # Unknown characters are ignored (treated as air)

        return tile_grid, entity_positions

    def get_ascii_representation(self, tile_grid: List[List[int]],
                                 entity_positions: Optional[Dict[str, List[Tuple[int, int]]]] = None) -> List[str]:
        """
        Convert tile grid back to ASCII representation.
        Useful for debugging or saving levels.
        """
        reverse_map = {}
        for char, tile_type in self.ascii_map.items():
            reverse_map.setdefault(tile_type.value, char)
        reverse_markers = {v: k for k, v in self.entity_markers.items()}

        rows = [[reverse_map.get(value, ' ') for value in row] for row in tile_grid]
        for entity_type, positions in (entity_positions or {}).items():
            char = reverse_markers.get(entity_type)
            if char is None:
                continue
            for x, y in positions:
                rows[y][x] = char
        return [''.join(row).rstrip() for row in rows]
