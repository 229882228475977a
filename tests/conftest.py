import os
import random

import pytest

# Never open a real window or audio device from the test suite
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from super_jeff.tiles.tile_data import Tile
from super_jeff.level.level_loader import parse_level, LevelLoadError

DT = 1.0 / 60.0

# Floor row: tiles centred on y=0, top surface at y=0.5, x from -10 to 10
FLOOR_TOP = 0.5

# 40 x 5 level, floor row at the bottom.
# to_world(col, row) == (col - 19.5, 2 - row)
SMALL_LEVEL = "\n".join([
    "#                                      #",
    "#                                      #",
    "#                                      #",
    "#  S        E                     M    #",
    "########################################",
])


class FakeLoader:
    """Loader double returning a parsed string, or failing on demand."""

    def __init__(self, text=SMALL_LEVEL):
        self.text = text
        self.fail = False
        self.calls = 0

    def load(self):
        self.calls += 1
        if self.fail:
            raise LevelLoadError("level unavailable")
        return parse_level(self.text, source="<test>")


@pytest.fixture
def floor_tiles():
    return [Tile.at(x, 0.0) for x in range(-10, 11)]


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def small_level_text():
    return SMALL_LEVEL


@pytest.fixture
def small_level_data():
    return parse_level(SMALL_LEVEL, source="<test>")


@pytest.fixture
def fake_loader():
    return FakeLoader()
