"""
scene_manager.py
----------------
Owns the active GameScene and implements stage restarts.

reload_current_scene() only records the request; the reload runs after the
current update finishes, so a callback never destroys the scene that is
executing it.
"""

from air_combat.core.debug.debug_logger import DebugLogger
from air_combat.core.runtime.stage_state import get_stage_state, reset_stage_state


class SceneManager:
    """Creates, reloads and exits the active scene."""

    def __init__(self, scene_factory=None):
        """
        Args:
            scene_factory: Callable taking this manager and returning a scene.
                Defaults to GameScene.
        """
        if scene_factory is None:
            from air_combat.scenes.game_scene import GameScene
            scene_factory = GameScene

        self.scene_factory = scene_factory
        self._active_scene = None
        self._reload_requested = False
        self.reload_count = 0

        DebugLogger.init_entry("SceneManager")

    @property
    def active_scene(self):
        return self._active_scene

    @property
    def reload_pending(self) -> bool:
        return self._reload_requested

    # ===========================================================
    # Scene Control
    # ===========================================================

    def start(self):
        """Ensure a session exists and enter the first scene."""
        get_stage_state()
        self._enter_new_scene()

    def reload_current_scene(self):
        """Request a full rebuild of the active scene at the end of this frame."""
        if self._reload_requested:
            DebugLogger.trace("Reload already pending", category="scene")
            return
        self._reload_requested = True
        DebugLogger.state("Scene reload requested", category="scene")

    def new_session(self):
        """Discard session progress and restart from stage 1."""
        reset_stage_state()
        get_stage_state()
        self.reload_current_scene()

    def shutdown(self):
        if self._active_scene is not None:
            self._active_scene.on_exit()
            self._active_scene = None

    # ===========================================================
    # Update & Draw Delegation
    # ===========================================================

    def update(self, dt: float):
        if self._active_scene is not None:
            self._active_scene.update(dt)

        if self._reload_requested:
            self._perform_reload()

    def draw(self, surface):
        if self._active_scene is not None:
            self._active_scene.draw(surface)

    # ===========================================================
    # Internal
    # ===========================================================

    def _perform_reload(self):
        self._reload_requested = False
        self.reload_count += 1

        if self._active_scene is not None:
            self._active_scene.on_exit()

        self._enter_new_scene()

    def _enter_new_scene(self):
        scene = self.scene_factory(self)
        self._active_scene = scene
        DebugLogger.section(f"Active Scene: {type(scene).__name__}")
        scene.on_enter()
