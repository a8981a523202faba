"""
Entity exports.

Scene-graph nodes that live in the arena: player, enemies, cameras and
trigger areas.
"""

from air_combat.entities.entity_types import EntityCategory, CollisionLayer
from air_combat.entities.base_entity import BaseEntity
from air_combat.entities.camera import Camera
from air_combat.entities.player import Player
from air_combat.entities.enemy import Enemy
from air_combat.entities.trigger_area import TriggerArea

__all__ = [
    'EntityCategory',
    'CollisionLayer',
    'BaseEntity',
    'Camera',
    'Player',
    'Enemy',
    'TriggerArea',
]
