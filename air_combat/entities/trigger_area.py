"""
trigger_area.py
---------------
Invisible collision area, e.g. the stage-exit gate at the end of the level.
"""

from air_combat.entities.base_entity import BaseEntity
from air_combat.entities.entity_types import EntityCategory, CollisionLayer


class TriggerArea(BaseEntity):
    """Area that reports overlaps on the given collision layers."""

    __slots__ = ()

    def __init__(self, x: float, y: float, size, *layer_bits: int, name: str = "TriggerArea"):
        super().__init__(x, y, size=size, name=name, color=(80, 255, 120))
        self.category = EntityCategory.TRIGGER
        self.collision_layer = CollisionLayer.mask(*layer_bits)
