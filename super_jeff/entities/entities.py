from .entity_common import KinematicBody, DamageResult
from .player_entity import Player
from .enemy_entities import Enemy, Monkey, MonkeyState, Banana

__all__ = [
    'Player',
    'Enemy', 'Monkey', 'MonkeyState', 'Banana',
    'KinematicBody', 'DamageResult',
]
