"""
arena.py
--------
Owner of every live entity in the playable scene.

Responsibilities
----------------
- Hand out stable integer handles for entities and their subtrees.
- Transfer ownership in (add_child) and out (remove_child).
- Defer destruction (queue_free) until flush() at the end of the frame.
- Track the single current camera.
"""

from typing import Dict, List, Optional

from air_combat.core.debug.debug_logger import DebugLogger
from air_combat.core.errors import EntityConversionError
from air_combat.entities.base_entity import BaseEntity
from air_combat.entities.camera import Camera


class Arena:
    """Handle-based storage for the live scene graph."""

    def __init__(self):
        self._entities: Dict[int, BaseEntity] = {}
        self._roots: List[BaseEntity] = []
        self._free_queue: List[BaseEntity] = []
        self._next_handle = 1
        self.current_camera: Optional[int] = None

        DebugLogger.init_entry("Arena Initialized")

    # ===========================================================
    # Ownership Transfer
    # ===========================================================

    def add_child(self, entity: BaseEntity, parent: Optional[int] = None) -> int:
        """
        Insert an entity (and any children it already carries).

        Args:
            entity: Entity not yet owned by the arena
            parent: Handle to attach under, or None for a root entity

        Returns:
            int: Handle of the inserted entity
        """
        if entity.handle is not None or entity.freed:
            raise ValueError(f"{entity.name} is already owned by the arena")

        if parent is None:
            if entity.parent is not None:
                raise ValueError(f"{entity.name} is attached to {entity.parent.name}")
            self._roots.append(entity)
        else:
            self._require(parent).add_child(entity)

        for node in entity.iter_subtree():
            self._register(node)

        DebugLogger.trace(f"Added {entity.name} as handle {entity.handle}", category="entity_spawn")
        return entity.handle

    def remove_child(self, handle: int) -> BaseEntity:
        """
        Detach an entity and its subtree without destroying them.

        Returns:
            BaseEntity: The detached entity; the caller now owns it
        """
        entity = self._require(handle)

        if entity.parent is not None:
            entity.parent.remove_child(entity)
        else:
            self._roots.remove(entity)

        for node in entity.iter_subtree():
            self._unregister(node)

        DebugLogger.state(f"Removed {entity.name} from arena", category="entity_cleanup")
        return entity

    # ===========================================================
    # Destruction
    # ===========================================================

    def queue_free(self, handle: int) -> None:
        """Mark an entity for destruction at the next flush()."""
        entity = self._require(handle)
        if entity.queued_free:
            return
        entity.queued_free = True
        self._free_queue.append(entity)

    def flush(self) -> int:
        """
        Destroy every queued entity with its descendants.
        Entities detached after being queued are destroyed as well.

        Returns:
            int: Number of entities destroyed
        """
        if not self._free_queue:
            return 0

        queue, self._free_queue = self._free_queue, []
        destroyed = 0

        for entity in queue:
            if entity.freed:
                continue
            if entity.parent is not None:
                entity.parent.remove_child(entity)
            elif entity in self._roots:
                self._roots.remove(entity)

            for node in list(entity.iter_subtree()):
                node.on_free()
                if node.handle is not None:
                    self._unregister(node)
                node.freed = True
                destroyed += 1

        DebugLogger.state(f"Freed {destroyed} entities", category="entity_cleanup")
        return destroyed

    def clear(self) -> None:
        """Destroy everything. Used on scene exit."""
        for root in list(self._roots):
            self.queue_free(root.handle)
        self.flush()
        self.current_camera = None

    # ===========================================================
    # Queries
    # ===========================================================

    def get(self, handle: Optional[int]) -> Optional[BaseEntity]:
        if handle is None:
            return None
        return self._entities.get(handle)

    def contains(self, handle: Optional[int]) -> bool:
        return handle in self._entities

    def resolve(self, handle: Optional[int], expected_type: type):
        """
        Return the entity behind a handle, checked against a type.

        Raises:
            EntityConversionError: handle is dead or points to another type
        """
        entity = self.get(handle)
        if entity is None:
            raise EntityConversionError(f"Handle {handle} does not refer to a live entity")
        if not isinstance(entity, expected_type):
            raise EntityConversionError(
                f"Handle {handle} is {type(entity).__name__}, expected {expected_type.__name__}"
            )
        return entity

    def get_children(self, handle: int) -> List[int]:
        """Handles of the direct children of an entity."""
        return [child.handle for child in self._require(handle).children]

    def roots(self) -> List[BaseEntity]:
        return list(self._roots)

    def entities(self) -> List[BaseEntity]:
        return list(self._entities.values())

    def entities_by_category(self, category: str) -> List[BaseEntity]:
        return [e for e in self._entities.values() if e.category == category]

    def camera(self) -> Optional[Camera]:
        return self.get(self.current_camera)

    def set_current_camera(self, handle: int) -> Camera:
        """Make an owned camera the active view, demoting the previous one."""
        camera = self.resolve(handle, Camera)
        camera.make_current()
        self._promote_camera(camera)
        return camera

    def __len__(self):
        return len(self._entities)

    # ===========================================================
    # Internal
    # ===========================================================

    def _require(self, handle: Optional[int]) -> BaseEntity:
        entity = self.get(handle)
        if entity is None:
            raise KeyError(f"No entity with handle {handle}")
        return entity

    def _register(self, node: BaseEntity) -> None:
        node.handle = self._next_handle
        self._next_handle += 1
        self._entities[node.handle] = node

        if isinstance(node, Camera) and node.current:
            self._promote_camera(node)

    def _promote_camera(self, camera: Camera) -> None:
        previous = self.camera()
        if previous is not None and previous is not camera:
            previous.current = False
        self.current_camera = camera.handle

    def _unregister(self, node: BaseEntity) -> None:
        self._entities.pop(node.handle, None)
        if self.current_camera == node.handle:
            self.current_camera = None
        node.handle = None
