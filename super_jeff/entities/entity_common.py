"""
Shared kinematic body contract for the player, enemies, the monkey and bananas.

Every body is a centred axis-aligned box: `position` is the centre, `sides`
the full width and height, `velocity` is in world units per second.
"""
from enum import Enum
from typing import Sequence, Tuple

import pygame

from config import HEAD_HEIGHT, HITBOX_SCALE


class DamageResult(Enum):
    """Outcome of a damage call."""
    IGNORED = "ignored"
    HIT = "hit"
    KILLED = "killed"


def vec(value: Sequence[float]) -> pygame.Vector2:
    return pygame.Vector2(value[0], value[1])


class KinematicBody:
    """Position / sides / velocity state shared by all moving entities."""

    def __init__(self, position, sides, velocity=(0.0, 0.0)):
        self.position = vec(position)
        self.sides = vec(sides)
        self.velocity = vec(velocity)
        self.spawn = vec(position)

    def integrate(self, elapsed: float) -> None:
        self.position += self.velocity * elapsed

    def body(self) -> Tuple[pygame.Vector2, pygame.Vector2]:
        """Box used against tiles."""
        return pygame.Vector2(self.position), pygame.Vector2(self.sides)

    def hitbox(self) -> Tuple[pygame.Vector2, pygame.Vector2]:
        """Body box used for lethal contact, slightly smaller than the sprite."""
        center, sides = self.body()
        return center, pygame.Vector2(sides.x * HITBOX_SCALE[0], sides.y * HITBOX_SCALE[1])

    def head(self) -> Tuple[pygame.Vector2, pygame.Vector2]:
        """Box straddling the top edge; a stomp must land here."""
        head_pos = pygame.Vector2(self.position.x, self.position.y + self.sides.y / 2)
        return head_pos, pygame.Vector2(self.sides.x, HEAD_HEIGHT)

    def facing_left(self) -> bool:
        return self.velocity.x < 0

    def __repr__(self):
        return (f"{self.__class__.__name__}(position=({self.position.x:.2f}, {self.position.y:.2f}), "
                f"velocity=({self.velocity.x:.2f}, {self.velocity.y:.2f}))")
