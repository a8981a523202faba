"""
base_scene.py
-------------
Abstract base class for all scenes.
Defines the interface and common lifecycle management.
"""

from abc import ABC, abstractmethod


class BaseScene(ABC):
    """
    Base class for all scenes.

    Attributes:
        scene_manager: Owner that creates, reloads and exits this scene
    """

    def __init__(self, scene_manager):
        self.scene_manager = scene_manager

    # ===========================================================
    # Lifecycle Hooks (Override in subclasses)
    # ===========================================================

    def on_enter(self):
        """Called once the scene becomes the active scene."""
        pass

    def on_exit(self):
        """Called before the scene is discarded (reload or shutdown)."""
        pass

    # ===========================================================
    # Standard Methods (Must implement in subclasses)
    # ===========================================================

    @abstractmethod
    def update(self, dt: float):
        """Update scene logic."""
        pass

    @abstractmethod
    def draw(self, surface):
        """Render the scene."""
        pass
