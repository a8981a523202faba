"""
test_game_scene.py
------------------
Integration tests: a real SceneManager driving GameScene through the
intro, kills, a stage clear with scene reload, and game over.
"""

import pytest

from air_combat.core.runtime.game_settings import Stage
from air_combat.core.runtime.stage_phase import StagePhase
from air_combat.core.runtime.stage_state import get_stage_state
from air_combat.core.services.event_manager import get_events, EnemyKilledEvent, PlayerDiedEvent
from air_combat.core.services.scene_manager import SceneManager
from air_combat.entities.entity_types import EntityCategory
from air_combat.scenes.game_scene import DEFAULT_STAGE_CONFIG, GameScene
from air_combat.systems.random_source import RandomSource

pytestmark = pytest.mark.integration

INTRO = DEFAULT_STAGE_CONFIG["clips"][Stage.INTRO_CLIP]


@pytest.fixture
def manager():
    manager = SceneManager(
        scene_factory=lambda mgr: GameScene(mgr, config=DEFAULT_STAGE_CONFIG, rng=RandomSource(7))
    )
    manager.start()
    yield manager
    manager.shutdown()


def enemies(scene):
    return scene.arena.entities_by_category(EntityCategory.ENEMY)


def play_intro(manager):
    manager.update(INTRO + 0.1)
    scene = manager.active_scene
    assert scene.stage_ctrl.phase == StagePhase.RUNNING
    return scene, scene.arena.get(scene.stage_ctrl.player)


def test_scene_starts_loading_with_stage_label(manager):
    scene = manager.active_scene

    assert scene.stage_ctrl.phase == StagePhase.LOADING
    assert scene.hud.find(Stage.STAGE_LABEL).text == "Stage 1"
    assert scene.hud.find(Stage.STAGE_LABEL).visible
    assert enemies(scene) == []


def test_intro_completion_starts_the_stage(manager):
    scene, player = play_intro(manager)

    assert len(enemies(scene)) == 12
    assert scene.arena.camera().parent is player
    assert not scene.hud.find(Stage.STAGE_LABEL).visible


def test_ramming_an_enemy_counts_a_kill(manager):
    scene, player = play_intro(manager)
    target = enemies(scene)[0]
    target.set_position(player.pos.x, player.pos.y)

    manager.update(0.01)

    assert get_stage_state().kills == 1
    assert scene.hud.find(Stage.KILLS_LABEL).text == "Kills: 1"
    assert target.freed
    assert player.health == DEFAULT_STAGE_CONFIG["player"]["health"] - 1


def test_reaching_exit_reloads_into_next_stage(manager):
    scene, player = play_intro(manager)
    get_stage_state().record_kill()
    player.set_position(scene.stage_exit.pos.x, scene.stage_exit.pos.y)

    manager.update(0.01)

    state = get_stage_state()
    assert state.current_stage == 2
    assert state.kills == 1
    assert manager.reload_count == 1
    assert player.speed == 0

    fresh = manager.active_scene
    assert fresh is not scene
    assert fresh.stage_ctrl.phase == StagePhase.LOADING
    assert fresh.stage_ctrl.player is None
    assert fresh.hud.find(Stage.STAGE_LABEL).text == "Stage 2"
    assert len(scene.arena) == 0

    play_intro(manager)
    assert len(enemies(manager.active_scene)) == 13


def test_old_scene_stops_listening_after_reload(manager):
    scene, player = play_intro(manager)
    player.set_position(scene.stage_exit.pos.x, scene.stage_exit.pos.y)
    manager.update(0.01)

    events = get_events()
    assert events.get_subscriber_count(PlayerDiedEvent) == 1
    assert events.get_subscriber_count(EnemyKilledEvent) == 1


def test_player_death_ends_the_game(manager):
    scene, player = play_intro(manager)

    handle = player.handle
    player.die()
    manager.update(0.01)

    assert scene.stage_ctrl.phase == StagePhase.GAME_OVER
    assert scene.stage_ctrl.player is None
    assert handle is not None
    assert not scene.arena.contains(handle)
    assert player.handle is None
    assert scene.hud.find(Stage.STAGE_LABEL).text == "Game Over"
    assert scene.arena.camera() is None
    assert len(enemies(scene)) == 12


def test_dead_player_stops_colliding_in_same_pass(manager):
    scene, player = play_intro(manager)
    player.health = 1
    for enemy in enemies(scene)[:3]:
        enemy.set_position(player.pos.x, player.pos.y)

    manager.update(0.001)

    assert scene.stage_ctrl.phase == StagePhase.GAME_OVER
    assert get_stage_state().kills == 1
    assert len(enemies(scene)) == 11


def test_steer_moves_player(manager):
    scene, player = play_intro(manager)
    start_y = player.pos.y

    scene.steer(0, 1)
    manager.update(0.1)

    assert player.pos.y > start_y


def test_new_session_after_game_over(manager):
    scene, player = play_intro(manager)
    get_stage_state().advance_stage()
    player.die()

    manager.new_session()
    manager.update(0.01)

    assert get_stage_state().current_stage == 1
    assert manager.active_scene.hud.find(Stage.STAGE_LABEL).text == "Stage 1"
