"""
player.py
---------
Player ship. Moves under input, takes damage from enemies and reports its
own death through the event system.
"""

import pygame

from air_combat.core.debug.debug_logger import DebugLogger
from air_combat.core.services.event_manager import get_events, PlayerDiedEvent
from air_combat.entities.base_entity import BaseEntity
from air_combat.entities.entity_types import EntityCategory, CollisionLayer
from air_combat.entities.entity_state import LifecycleState


class Player(BaseEntity):
    """Player-controlled ship."""

    __slots__ = ('speed', 'health', 'death_state', 'move_dir')

    def __init__(self, x: float = 0.0, y: float = 0.0, speed: int = 300,
                 health: int = 3, size=(48, 24)):
        super().__init__(x, y, size=size, name="Player", color=(80, 200, 255))
        self.category = EntityCategory.PLAYER
        self.collision_layer = CollisionLayer.mask(CollisionLayer.PLAYER)
        self.speed = speed
        self.health = health
        self.death_state = LifecycleState.ALIVE
        self.move_dir = pygame.Vector2(0, 0)

    def update(self, dt: float):
        if self.death_state != LifecycleState.ALIVE or self.speed == 0:
            return
        if self.move_dir.length_squared() > 0:
            self.pos += self.move_dir.normalize() * self.speed * dt

    # ===========================================================
    # Combat
    # ===========================================================

    def take_damage(self, amount: int = 1):
        """Reduce health. Dispatches PlayerDiedEvent once when it reaches zero."""
        if self.death_state != LifecycleState.ALIVE:
            return
        self.health = max(self.health - amount, 0)
        DebugLogger.trace(f"Player hit, health={self.health}", category="collision")
        if self.health == 0:
            self.die()

    def die(self):
        if self.death_state != LifecycleState.ALIVE:
            return
        self.death_state = LifecycleState.DEAD
        DebugLogger.state("Player died", category="stage")
        get_events().dispatch(PlayerDiedEvent(position=tuple(self.global_position())))
