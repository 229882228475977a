import random

import pytest

from config import (
    GRAVITY, MONKEY_SIDES, MONKEY_RAGE_SPEED, MONKEY_RAGE_SPEED_INCREMENT,
)
from super_jeff.core.constants import SoundEffect
from super_jeff.entities.entity_common import DamageResult
from super_jeff.entities.enemy_entities import Monkey, MonkeyState, Banana
from super_jeff.tiles.tile_data import Tile

from conftest import DT, FLOOR_TOP

MONKEY_Y = FLOOR_TOP + MONKEY_SIDES[1] / 2


@pytest.fixture
def monkey(rng):
    return Monkey((0.0, MONKEY_Y), rng=rng)


# --- Damage and rage ---

def test_hit_enrages_and_speeds_up(monkey):
    monkey.bananas_thrown = 4

    result = monkey.damage(1)

    assert result is DamageResult.HIT
    assert monkey.health == 2
    assert monkey.enraged
    assert monkey.state is MonkeyState.CHARGING
    assert monkey.bananas_thrown == 0
    assert abs(monkey.rage_velocity.x) == pytest.approx(MONKEY_RAGE_SPEED + MONKEY_RAGE_SPEED_INCREMENT)


def test_killing_blow_skips_rage(monkey, floor_tiles, rng):
    monkey.combat.hp = 1
    monkey.velocity.update(3.0, 0.0)

    result = monkey.damage(1)

    assert result is DamageResult.KILLED
    assert monkey.health == 0
    assert monkey.dead
    assert not monkey.enraged
    assert monkey.velocity.x == 0.0 and monkey.velocity.y == 0.0

    start = monkey.position.copy()
    for _ in range(120):
        assert monkey.update(DT, (1.0, MONKEY_Y), floor_tiles, rng) == []
    assert monkey.position == start
    assert monkey.state is MonkeyState.DEAD
    assert monkey.damage(1) is DamageResult.IGNORED


def test_enraged_monkey_is_invulnerable(monkey):
    monkey.rage()

    assert monkey.damage(1) is DamageResult.IGNORED
    assert monkey.health == 3
    assert abs(monkey.rage_velocity.x) == pytest.approx(MONKEY_RAGE_SPEED)


def test_charge_delay_scales_with_health():
    monkey = Monkey((0.0, MONKEY_Y), rage_delay=0.5, rng=random.Random(0))
    assert monkey.charge_delay() == pytest.approx(1.5)
    monkey.damage(1)
    assert monkey.charge_delay() == pytest.approx(1.0)


# --- Bananas ---

def test_banana_lands_at_target_offset(monkey, rng):
    target = (10.0, MONKEY_Y)

    banana = monkey.throw_banana(target, rng)

    assert banana is not None
    assert banana.velocity.y >= 1.0
    # A ballistic arc returns to launch height after 2 * vy / g seconds
    flight = 2 * banana.velocity.y / -GRAVITY[1]
    assert banana.velocity.x * flight == pytest.approx(10.0)
    assert monkey.bananas_thrown == 1
    assert monkey.bananas == [banana]


def test_banana_thrown_left_for_target_on_the_left(monkey, rng):
    banana = monkey.throw_banana((-6.0, MONKEY_Y), rng)
    assert banana.velocity.x < 0


def test_out_of_range_target_is_skipped(monkey, rng):
    assert monkey.throw_banana((31.0, MONKEY_Y), rng) is None
    assert monkey.bananas == []
    assert monkey.bananas_thrown == 0


def test_banana_falls_and_is_pruned(monkey):
    banana = Banana((0.0, 0.0), (0.0, 5.0))
    monkey.bananas.append(banana)

    heights = []
    for _ in range(120):
        banana.update(DT)
        heights.append(banana.position.y)
    assert max(heights) > 0.0
    assert heights[-1] < heights[-2] < 0.0

    assert monkey.prune_bananas(min_y=-3.0) == 1
    assert monkey.bananas == []


def test_prune_keeps_bananas_in_bounds(monkey):
    monkey.bananas.append(Banana((0.0, 1.0), (0.0, 0.0)))
    assert monkey.prune_bananas(min_y=-3.0) == 0
    assert len(monkey.bananas) == 1


# --- State machine ---

def test_throw_cycle_then_rage(floor_tiles):
    rng = random.Random(7)
    monkey = Monkey((0.0, MONKEY_Y), throw_interval=(1.0, 1.0), rage_threshold=(2, 3), rng=rng)
    target = (5.0, MONKEY_Y)

    assert monkey.update(0.5, target, floor_tiles, rng) == []
    assert monkey.state is MonkeyState.IDLE

    assert monkey.update(0.6, target, floor_tiles, rng) == [SoundEffect.BANANA]
    assert monkey.state is MonkeyState.THROWING

    assert monkey.update(DT, target, floor_tiles, rng) == []
    assert monkey.state is MonkeyState.IDLE

    assert monkey.update(1.0, target, floor_tiles, rng) == [SoundEffect.BANANA]
    assert monkey.bananas_thrown == 2
    monkey.update(DT, target, floor_tiles, rng)

    assert monkey.update(DT, target, floor_tiles, rng) == [SoundEffect.RAGE]
    assert monkey.enraged
    assert monkey.bananas_thrown == 0
    assert len(monkey.bananas) == 2


def test_charge_waits_then_stops_at_wall(floor_tiles, rng):
    wall = [Tile.at(-5.0, 1.0)]
    monkey = Monkey((0.0, MONKEY_Y), rage_delay=0.0, rng=rng)
    monkey.rage()

    monkey.update(0.1, (0.0, MONKEY_Y), floor_tiles + wall, rng)
    assert monkey.enraged
    assert monkey.position.x == pytest.approx(-1.5)

    monkey.update(0.1, (0.0, MONKEY_Y), floor_tiles + wall, rng)
    monkey.update(0.1, (0.0, MONKEY_Y), floor_tiles + wall, rng)

    assert monkey.state is MonkeyState.IDLE
    assert monkey.position.x == pytest.approx(-3.0)
    assert monkey.velocity.x == 0.0
    assert monkey.rage_velocity.x == pytest.approx(MONKEY_RAGE_SPEED)
    assert 5 <= monkey.rage_threshold < 10


def test_charge_does_not_start_before_delay(floor_tiles, rng):
    monkey = Monkey((0.0, MONKEY_Y), rage_delay=1.0, rng=rng)
    monkey.rage()

    for _ in range(10):
        monkey.update(0.1, (0.0, MONKEY_Y), floor_tiles, rng)

    assert monkey.position.x == 0.0
    assert monkey.enraged


def test_same_seed_same_behaviour(floor_tiles):
    def run(seed):
        rng = random.Random(seed)
        monkey = Monkey((0.0, MONKEY_Y), rng=rng)
        for _ in range(600):
            monkey.update(DT, (8.0, MONKEY_Y), floor_tiles, rng)
        return [(b.velocity.x, b.velocity.y) for b in monkey.bananas], monkey.state

    assert run(42) == run(42)
