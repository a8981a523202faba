"""
base_entity.py
--------------
Foundational scene-graph node for everything that lives in the arena.

Coordinate System
-----------------
- self.pos is local to the parent entity (or to the arena for roots)
- global_position() walks the parent chain
- rect is centered on the global position and sized by self.size

Ownership
---------
An entity may build a subtree of children before it is inserted into the
arena (e.g. a camera attached to the player). The arena assigns handles to
the whole subtree on insertion and is the only place entities are destroyed.
"""

import pygame
from typing import Optional

from air_combat.entities.entity_types import EntityCategory


class BaseEntity:
    """Base class for all arena entities."""

    __slots__ = (
        'name', 'pos', 'size', 'category', 'collision_layer', 'visible', 'color',
        'parent', 'children', 'handle', 'queued_free', 'freed',
    )

    def __init__(self, x: float = 0.0, y: float = 0.0, size=(32, 32),
                 name: Optional[str] = None, color=(255, 0, 255)):
        self.name = name or type(self).__name__
        self.pos = pygame.Vector2(x, y)
        self.size = tuple(size)
        self.category = EntityCategory.NEUTRAL
        self.collision_layer = 0
        self.visible = True
        self.color = color

        # Scene graph
        self.parent: Optional["BaseEntity"] = None
        self.children: list = []

        # Arena bookkeeping
        self.handle = None
        self.queued_free = False
        self.freed = False

    # ===========================================================
    # Scene Graph
    # ===========================================================

    def add_child(self, child: "BaseEntity") -> None:
        """Attach child below this entity. Child must not have a parent."""
        if child.parent is not None:
            raise ValueError(f"{child.name} already has parent {child.parent.name}")
        if child is self:
            raise ValueError(f"{self.name} cannot be its own child")
        child.parent = self
        self.children.append(child)

    def remove_child(self, child: "BaseEntity") -> None:
        """Detach a direct child. Does not destroy it."""
        if child.parent is not self:
            raise ValueError(f"{child.name} is not a child of {self.name}")
        self.children.remove(child)
        child.parent = None

    def iter_subtree(self):
        """Yield this entity and every descendant, depth first."""
        yield self
        for child in self.children:
            yield from child.iter_subtree()

    # ===========================================================
    # Spatial
    # ===========================================================

    def set_position(self, x: float, y: float) -> None:
        self.pos.update(x, y)

    def global_position(self) -> pygame.Vector2:
        position = pygame.Vector2(self.pos)
        node = self.parent
        while node is not None:
            position += node.pos
            node = node.parent
        return position

    @property
    def rect(self) -> pygame.Rect:
        center = self.global_position()
        rect = pygame.Rect(0, 0, *self.size)
        rect.center = (round(center.x), round(center.y))
        return rect

    # ===========================================================
    # Collision
    # ===========================================================

    def get_collision_layer_bit(self, bit: int) -> bool:
        return bool(self.collision_layer & (1 << bit))

    def set_collision_layer_bit(self, bit: int, enabled: bool = True) -> None:
        if enabled:
            self.collision_layer |= 1 << bit
        else:
            self.collision_layer &= ~(1 << bit)

    # ===========================================================
    # Lifecycle Hooks
    # ===========================================================

    def update(self, dt: float):
        """Per-frame logic. Override in subclasses."""
        pass

    def on_free(self):
        """Called by the arena right before the entity is destroyed."""
        pass

    def __repr__(self):
        return f"<{type(self).__name__} {self.name!r} handle={self.handle} pos=({self.pos.x:.0f}, {self.pos.y:.0f})>"
