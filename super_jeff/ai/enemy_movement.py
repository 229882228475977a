"""
Enemy Movement System - Core Movement Strategies
Provides modular movement behaviors for the patrolling enemies and the monkey's charge
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, Sequence, Type

import pygame

from ..entities.components.physics_component import PatrolProbe
from ..tiles.tile_data import Tile

logger = logging.getLogger(__name__)


class MovementStrategy(ABC):
    """Base class for enemy movement strategies"""

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def move(self, enemy, elapsed: float, tiles: Sequence[Tile]) -> PatrolProbe:
        """Execute movement strategy for one frame"""


class GroundPatrolStrategy(MovementStrategy):
    """Constant speed back-and-forth walk bounded by walls and ledges"""

    def __init__(self):
        super().__init__("ground_patrol")

    def move(self, enemy, elapsed: float, tiles: Sequence[Tile]) -> PatrolProbe:
        return enemy.physics.patrol(elapsed, tiles)


class ChargeStrategy(MovementStrategy):
    """Run at the charge velocity until a wall or ledge is one step ahead.

    On a stop the velocity is zeroed and the stored charge velocity reversed
    so the next charge heads back the other way.
    """

    def __init__(self):
        super().__init__("charge")

    def move(self, enemy, elapsed: float, tiles: Sequence[Tile]) -> PatrolProbe:
        enemy.velocity.update(enemy.rage_velocity)
        probe = enemy.physics.probe_patrol(tiles)
        if probe is not PatrolProbe.CLEAR:
            enemy.velocity.update(0.0, 0.0)
            enemy.rage_velocity = pygame.Vector2(-enemy.rage_velocity.x, -enemy.rage_velocity.y)
            logger.debug("%s charge stopped by %s", enemy.__class__.__name__, probe.value)
        enemy.integrate(elapsed)
        return probe


class MovementStrategyFactory:
    """Factory for creating movement strategies"""

    _strategies: Dict[str, Type[MovementStrategy]] = {
        'ground_patrol': GroundPatrolStrategy,
        'charge': ChargeStrategy,
    }

    @classmethod
    def create_strategy(cls, strategy_name: str) -> MovementStrategy:
        try:
            return cls._strategies[strategy_name]()
        except KeyError:
            raise ValueError(f"Unknown movement strategy: {strategy_name}") from None

    @classmethod
    def get_available_strategies(cls):
        return list(cls._strategies.keys())
