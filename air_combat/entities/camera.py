"""
camera.py
---------
Follow camera. Attached as a child of the entity it tracks; the arena keeps
exactly one camera current.
"""

import pygame

from air_combat.entities.base_entity import BaseEntity
from air_combat.entities.entity_types import EntityCategory


class Camera(BaseEntity):
    """Viewport anchor offset from its parent."""

    __slots__ = ('current',)

    def __init__(self, offset_x: float = 0.0, offset_y: float = 0.0):
        super().__init__(offset_x, offset_y, size=(0, 0), name="Camera")
        self.category = EntityCategory.CAMERA
        self.visible = False
        self.current = False

    def make_current(self):
        """Flag this camera as the active view. The arena clears the previous one."""
        self.current = True

    def view_origin(self, viewport_size) -> pygame.Vector2:
        """Top-left world coordinate of the viewport centered on this camera."""
        width, height = viewport_size
        return self.global_position() - pygame.Vector2(width / 2, height / 2)
