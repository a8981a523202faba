"""
collision_manager.py
--------------------
Rect overlap detection that reports "entered" events, once per overlap.

Responsibilities
----------------
- Track which pairs overlapped on the previous frame.
- Report a pair through a rule callback only on the frame it starts
  overlapping, like an area-entered signal.
- Filter pairs by collision layer masks.
"""

from typing import Callable, List, Tuple

from air_combat.core.debug.debug_logger import DebugLogger


class CollisionManager:
    """Detects newly entered overlaps and hands them to registered rules."""

    def __init__(self):
        self._rules: List[Tuple[int, int, Callable]] = []
        self._active_pairs = set()
        DebugLogger.init_entry("CollisionManager Initialized")

    def add_rule(self, source_mask: int, target_mask: int, callback: Callable) -> None:
        """
        Call callback(source, target) when an entity on source_mask enters
        an entity on target_mask.
        """
        self._rules.append((source_mask, target_mask, callback))

    def detect(self, entities) -> int:
        """
        Run one detection pass.

        Returns:
            int: Number of entered events delivered
        """
        entities = [e for e in entities if e.collision_layer and not e.queued_free]
        current_pairs = set()
        delivered = 0

        for source_mask, target_mask, callback in self._rules:
            sources = [e for e in entities if e.collision_layer & source_mask]
            targets = [e for e in entities if e.collision_layer & target_mask]
            for source in sources:
                source_rect = source.rect
                for target in targets:
                    if source is target or not source_rect.colliderect(target.rect):
                        continue
                    key = (id(callback), id(source), id(target))
                    current_pairs.add(key)
                    if key in self._active_pairs:
                        continue
                    # An earlier callback in this pass may have freed either side
                    if source.queued_free or target.queued_free:
                        continue
                    DebugLogger.trace(f"{source.name} entered {target.name}")
                    callback(source, target)
                    delivered += 1

        self._active_pairs = current_pairs
        return delivered

    def reset(self) -> None:
        self._active_pairs.clear()
