"""
Gameplay systems exports.

Provides entity storage, template loading, spawning and collision detection.
"""

from air_combat.systems.arena import Arena
from air_combat.systems.random_source import RandomSource
from air_combat.systems.scene_loader import SceneLoader, EntityTemplate, TemplateSlot
from air_combat.systems.collision_manager import CollisionManager

__all__ = [
    'Arena',
    'RandomSource',
    'SceneLoader',
    'EntityTemplate',
    'TemplateSlot',
    'CollisionManager',
]
