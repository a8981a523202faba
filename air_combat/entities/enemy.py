"""
enemy.py
--------
Stationary enemy placed by the spawner. Reports its destruction through
the event system so the session kill counter can be updated.
"""

from air_combat.core.services.event_manager import get_events, EnemyKilledEvent
from air_combat.entities.base_entity import BaseEntity
from air_combat.entities.entity_types import EntityCategory, CollisionLayer
from air_combat.entities.entity_state import LifecycleState


class Enemy(BaseEntity):
    """Enemy ship instantiated from the shared enemy template."""

    __slots__ = ('death_state', 'contact_damage')

    def __init__(self, x: float = 0.0, y: float = 0.0, size=(40, 40), contact_damage: int = 1):
        super().__init__(x, y, size=size, name="Enemy", color=(255, 80, 80))
        self.category = EntityCategory.ENEMY
        self.collision_layer = CollisionLayer.mask(CollisionLayer.ENEMY)
        self.contact_damage = contact_damage
        self.death_state = LifecycleState.ALIVE

    def kill(self):
        """Mark destroyed and notify listeners. Safe to call twice."""
        if self.death_state == LifecycleState.DEAD:
            return
        self.death_state = LifecycleState.DEAD
        get_events().dispatch(EnemyKilledEvent(position=tuple(self.global_position())))
