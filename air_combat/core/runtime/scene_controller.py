"""
scene_controller.py
-------------------
Base class for scene controllers that handle specific responsibilities.
"""

from abc import ABC


class SceneController(ABC):
    """
    Base class for controllers that manage a portion of a scene's logic.

    Controllers pull the systems they need from the parent scene at
    construction time and never own them.
    """

    def __init__(self, scene):
        """
        Initialize controller with reference to parent scene.

        Args:
            scene: The parent scene this controller belongs to
        """
        self.scene = scene

    def update(self, dt: float):
        """
        Update this controller's logic.

        Args:
            dt: Delta time in seconds
        """
        pass
