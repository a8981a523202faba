"""
scene_loader.py
---------------
Registry of entity templates keyed by resource path, plus the factory used
to instantiate them.

Responsibilities
----------------
- Map resource paths ("res://Enemy.tscn") to template factories.
- Produce immutable EntityTemplate descriptors via load().
- Instantiate fresh entities from a template without consuming it.
"""

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from air_combat.core.debug.debug_logger import DebugLogger
from air_combat.core.errors import SceneLoadError
from air_combat.entities.base_entity import BaseEntity


@dataclass(frozen=True)
class EntityTemplate:
    """Reusable descriptor that new entities are instantiated from."""
    path: str
    factory: Callable[[], BaseEntity]


class SceneLoader:
    """Loads templates by path and instantiates entities from them."""

    def __init__(self):
        self._factories: Dict[str, Callable[[], BaseEntity]] = {}
        self._cache: Dict[str, EntityTemplate] = {}

    # ===========================================================
    # Registration
    # ===========================================================

    def register_template(self, path: str, factory: Callable[[], BaseEntity]) -> None:
        if path in self._factories:
            DebugLogger.warn(f"Overwriting template '{path}'", category="loading")
        self._factories[path] = factory
        self._cache.pop(path, None)
        DebugLogger.trace(f"Registered template '{path}'", category="loading")

    # ===========================================================
    # Loading
    # ===========================================================

    def load(self, path: str) -> EntityTemplate:
        """
        Resolve a template by path.

        Raises:
            SceneLoadError: no template registered under path
        """
        template = self._cache.get(path)
        if template is not None:
            return template

        factory = self._factories.get(path)
        if factory is None:
            raise SceneLoadError(path, "no template registered")

        template = EntityTemplate(path=path, factory=factory)
        self._cache[path] = template
        DebugLogger.system(f"Loaded template '{path}'", category="loading")
        return template

    def instantiate(self, template: EntityTemplate) -> BaseEntity:
        """
        Build a fresh entity from a template.

        Raises:
            SceneLoadError: factory failed or did not return an entity
        """
        try:
            entity = template.factory()
        except Exception as e:
            raise SceneLoadError(template.path, str(e)) from e

        if not isinstance(entity, BaseEntity):
            raise SceneLoadError(
                template.path, f"factory returned {type(entity).__name__}, not an entity"
            )
        return entity


class TemplateSlot:
    """
    Holds a template with take/replace discipline: while an instantiation
    is in flight the slot is empty, so no second user can hold it.
    """

    def __init__(self, template: Optional[EntityTemplate] = None):
        self._template = template

    @property
    def is_empty(self) -> bool:
        return self._template is None

    def take(self) -> Optional[EntityTemplate]:
        template, self._template = self._template, None
        return template

    def replace(self, template: Optional[EntityTemplate]) -> Optional[EntityTemplate]:
        """Put a template back. Returns whatever the slot held before."""
        previous, self._template = self._template, template
        return previous

    @contextmanager
    def borrowed(self):
        """Take the template for the duration of the block, then put it back."""
        template = self.take()
        try:
            yield template
        finally:
            self.replace(template)
