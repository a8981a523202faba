"""
test_scene_manager.py
---------------------
Unit tests for deferred scene reloads and session restarts.
"""

from unittest.mock import MagicMock

from air_combat.core.runtime.stage_state import get_stage_state, load_stage_state
from air_combat.core.services.scene_manager import SceneManager


def make_manager():
    scenes = []

    def factory(manager):
        scene = MagicMock(name=f"scene{len(scenes)}")
        scenes.append(scene)
        return scene

    return SceneManager(scene_factory=factory), scenes


def test_start_creates_session_and_enters_scene():
    manager, scenes = make_manager()
    manager.start()

    assert load_stage_state() is not None
    assert manager.active_scene is scenes[0]
    scenes[0].on_enter.assert_called_once()


def test_reload_is_deferred_until_end_of_update():
    manager, scenes = make_manager()
    manager.start()

    manager.reload_current_scene()
    assert manager.active_scene is scenes[0]
    assert manager.reload_pending

    manager.update(0.016)

    scenes[0].update.assert_called_once_with(0.016)
    scenes[0].on_exit.assert_called_once()
    assert manager.active_scene is scenes[1]
    scenes[1].on_enter.assert_called_once()
    assert not manager.reload_pending


def test_repeated_requests_reload_once():
    manager, scenes = make_manager()
    manager.start()

    manager.reload_current_scene()
    manager.reload_current_scene()
    manager.update(0.016)

    assert manager.reload_count == 1
    assert len(scenes) == 2


def test_new_session_resets_progress_and_reloads():
    manager, scenes = make_manager()
    manager.start()
    get_stage_state().advance_stage()

    manager.new_session()
    manager.update(0.016)

    assert load_stage_state().current_stage == 1
    assert manager.active_scene is scenes[1]


def test_shutdown_exits_active_scene():
    manager, scenes = make_manager()
    manager.start()
    manager.shutdown()

    scenes[0].on_exit.assert_called_once()
    assert manager.active_scene is None
