"""
Combat Component - Shared combat logic for all entities
Health bookkeeping for enemies and the monkey, plus the player's stomp and
lethal body contact checks.
"""

import logging

from ...tiles.tile_collision import collides
from ..entity_common import DamageResult

logger = logging.getLogger(__name__)


class CombatComponent:
    """Handles health and damage for an entity.

    The owning entity may define `is_invulnerable()`; while it returns True
    damage calls are ignored.
    """

    def __init__(self, entity, max_hp: int):
        self.entity = entity
        self.max_hp = max_hp
        self.hp = max_hp

    @property
    def alive(self) -> bool:
        return self.hp > 0

    def is_invulnerable(self) -> bool:
        check = getattr(self.entity, 'is_invulnerable', None)
        return bool(check()) if check else False

    def take_damage(self, amount: int) -> DamageResult:
        """Apply damage, clamping health at zero."""
        if not self.alive or self.is_invulnerable():
            return DamageResult.IGNORED

        self.hp = max(0, self.hp - amount)
        # Zero velocity on the kill so corpses stay put
        if not self.alive:
            self.entity.velocity.update(0.0, 0.0)
            logger.debug("%s killed", self.entity.__class__.__name__)
            return DamageResult.KILLED
        return DamageResult.HIT


def stomp(player, target, damage: int = 1):
    """Try a stomp from `player` onto `target`.

    Only a descending player can stomp. If the player's feet overlap the
    target's head the target is damaged and the player bounces, whatever the
    damage outcome. Returns the DamageResult, or None when no stomp landed.
    """
    if player.velocity.y >= 0:
        return None
    foot_pos, foot_sides = player.foot_rect()
    head_pos, head_sides = target.head()
    if not collides(foot_pos, foot_sides, head_pos, head_sides):
        return None

    result = target.damage(damage)
    player.bounce()
    return result


def body_contact(player, target) -> bool:
    """Return True if the player's hitbox overlaps the target's hitbox."""
    p_pos, p_sides = player.hitbox()
    t_pos, t_sides = target.hitbox()
    return collides(p_pos, p_sides, t_pos, t_sides)
