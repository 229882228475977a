import pygame

from super_jeff.tiles.tile_collision import collides, collides_any, first_collision
from super_jeff.tiles.tile_data import Tile
from super_jeff.tiles.tile_parser import TileParser
from super_jeff.tiles.tile_types import TileType


# --- Box overlap ---

def test_overlapping_boxes_collide_both_ways():
    a = ((0.0, 0.0), (1.0, 1.0))
    b = ((0.5, 0.25), (1.0, 1.0))
    assert collides(*a, *b)
    assert collides(*b, *a)


def test_touching_edges_do_not_collide():
    assert not collides((0.0, 0.0), (1.0, 1.0), (1.0, 0.0), (1.0, 1.0))
    assert not collides((0.0, 0.0), (1.0, 1.0), (0.0, 1.0), (1.0, 1.0))


def test_separated_on_one_axis_is_enough():
    assert not collides((0.0, 0.0), (1.0, 1.0), (0.2, 3.0), (1.0, 1.0))


def test_accepts_vectors_and_tuples():
    assert collides(pygame.Vector2(0, 0), pygame.Vector2(2, 2), (0.9, 0.9), (0.5, 0.5))


def test_first_collision_returns_the_overlapping_tile():
    tiles = [Tile.at(0, 0), Tile.at(5, 0), Tile.at(10, 0)]
    hit = first_collision((5.2, 0.3), (1.0, 1.0), tiles)
    assert hit is tiles[1]
    assert first_collision((2.5, 0.0), (1.0, 1.0), tiles) is None
    assert collides_any((9.6, 0.0), (0.5, 0.5), tiles)


# --- ASCII parsing ---

def test_parser_splits_tiles_and_markers():
    grid, entities = TileParser().parse_ascii_level([
        "#  M",
        "S?##",
    ])
    assert grid[0] == [TileType.WALL, TileType.AIR, TileType.AIR, TileType.AIR]
    assert grid[1] == [TileType.AIR, TileType.AIR, TileType.WALL, TileType.WALL]
    assert entities == {"monkey": [(3, 0)], "spawn": [(0, 1)]}


def test_parser_pads_short_rows_with_air():
    grid, _ = TileParser().parse_ascii_level(["###", "#"])
    assert grid[1] == [TileType.WALL, TileType.AIR, TileType.AIR]


def test_ascii_representation_restores_markers():
    parser = TileParser()
    lines = ["#..M", "S.##"]
    grid, entities = parser.parse_ascii_level(lines)
    assert parser.get_ascii_representation(grid, entities) == lines
