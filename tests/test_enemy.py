import pytest

from config import PLAYER_JUMP_SPEED, PLAYER_SIDES, ENEMY_SPEED
from super_jeff.ai.enemy_movement import MovementStrategyFactory, GroundPatrolStrategy
from super_jeff.entities.components.combat_component import stomp, body_contact
from super_jeff.entities.entity_common import DamageResult
from super_jeff.entities.enemy_entities import Enemy
from super_jeff.entities.player_entity import Player

from conftest import DT, FLOOR_TOP


@pytest.fixture
def enemy():
    return Enemy((0.0, FLOOR_TOP + 1.0))


def _player_over_head(target):
    """Player whose feet sit inside the target's head box, falling."""
    head_pos, _ = target.head()
    player = Player((target.position.x, head_pos.y + 0.08 + PLAYER_SIDES[1] / 2))
    player.velocity.y = -5.0
    return player


# --- Patrol ---

def test_enemy_starts_walking_left(enemy):
    assert enemy.velocity.x == -ENEMY_SPEED
    assert enemy.facing_left()
    assert enemy.health == 1


def test_enemy_turns_around_at_ledge(floor_tiles):
    enemy = Enemy((-10.0, FLOOR_TOP + 1.0))

    enemy.update(DT, floor_tiles)
    assert enemy.velocity.x == ENEMY_SPEED

    for _ in range(30):
        enemy.update(DT, floor_tiles)
    assert enemy.position.x > -10.0


def test_enemy_stays_on_its_platform(floor_tiles):
    enemy = Enemy((0.0, FLOOR_TOP + 1.0))
    for _ in range(600):
        enemy.update(DT, floor_tiles)
        assert -10.5 <= enemy.position.x <= 10.5


# --- Damage ---

def test_one_hit_kills_and_freezes(enemy, floor_tiles):
    assert enemy.damage(1) is DamageResult.KILLED
    assert enemy.dead
    assert enemy.velocity.x == 0.0 and enemy.velocity.y == 0.0

    start = enemy.position.copy()
    enemy.update(DT, floor_tiles)
    assert enemy.position == start
    assert enemy.damage(1) is DamageResult.IGNORED
    assert enemy.health == 0


def test_stomp_kills_and_bounces(enemy):
    player = _player_over_head(enemy)

    result = stomp(player, enemy)

    assert result is DamageResult.KILLED
    assert enemy.health == 0
    assert player.velocity.y == PLAYER_JUMP_SPEED


def test_no_stomp_while_rising(enemy):
    player = _player_over_head(enemy)
    player.velocity.y = 2.0
    assert stomp(player, enemy) is None
    assert not enemy.dead


def test_side_contact_is_body_contact(enemy):
    player = Player((enemy.position.x + 0.5, enemy.position.y))
    assert stomp(player, enemy) is None
    assert body_contact(player, enemy)


def test_far_player_has_no_contact(enemy):
    player = Player((enemy.position.x + 3.0, enemy.position.y))
    assert not body_contact(player, enemy)


# --- Strategies ---

def test_factory_builds_known_strategies():
    assert isinstance(MovementStrategyFactory.create_strategy('ground_patrol'), GroundPatrolStrategy)
    assert set(MovementStrategyFactory.get_available_strategies()) == {'ground_patrol', 'charge'}


def test_factory_rejects_unknown_strategy():
    with pytest.raises(ValueError):
        MovementStrategyFactory.create_strategy('teleport')
