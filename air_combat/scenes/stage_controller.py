"""
stage_controller.py
-------------------
State machine for one gameplay stage: Loading -> Running -> GameOver.

Entry points (called by GameScene):
    on_ready()            scene entered; show "Stage N", start intro clip
    on_tick(dt)           push "Kills: N" to the HUD
    on_intro_finished()   Loading -> Running; spawn player, camera and wave
    on_collision(area)    stage-exit reached; advance stage and reload scene
    on_player_died()      Running -> GameOver; tear down the player subtree

A stage clear never leaves Running: the scene reload discards this
controller and builds a fresh one in Loading. Stage number and kill count
live in the session StageState and survive the reload.
"""

from typing import Optional

from air_combat.core.debug.debug_logger import DebugLogger
from air_combat.core.errors import EntityConversionError, MissingSessionError, SceneLoadError
from air_combat.core.runtime.game_settings import Stage
from air_combat.core.runtime.scene_controller import SceneController
from air_combat.core.runtime.stage_phase import StagePhase
from air_combat.core.runtime.stage_state import load_stage_state
from air_combat.entities.camera import Camera
from air_combat.entities.player import Player
from air_combat.systems.scene_loader import TemplateSlot


class StageController(SceneController):
    """Drives the stage phases and owns the player handle."""

    def __init__(self, scene):
        super().__init__(scene)
        self.arena = scene.arena
        self.hud = scene.hud
        self.animation_player = scene.animation_player
        self.scene_loader = scene.scene_loader
        self.spawner = scene.spawner
        self.viewport_height = scene.viewport_height

        self.phase = StagePhase.LOADING
        self.enemy_template = TemplateSlot()
        self.player: Optional[int] = None
        self.stage_label = None

    # ===========================================================
    # Loading
    # ===========================================================

    def on_ready(self):
        """Load the enemy template, label the stage and start the intro clip."""
        if self.enemy_template.is_empty:
            try:
                self.enemy_template.replace(self.scene_loader.load(Stage.ENEMY_SCENE))
            except SceneLoadError:
                DebugLogger.fail("Could not load enemy template", category="stage")
                raise

        state = load_stage_state()
        if state is None:
            DebugLogger.warn("No session state - skipping stage intro", category="stage")
            return

        label = self.hud.find(Stage.STAGE_LABEL)
        if label is not None:
            label.set_text(state.stage_label_text())
            self.stage_label = label
        else:
            DebugLogger.warn(f"HUD node '{Stage.STAGE_LABEL}' missing", category="ui")

        if self.animation_player is not None:
            self.animation_player.play(Stage.INTRO_CLIP, speed=1.0, direction=1.0, loop=False)

        DebugLogger.state(f"Stage {state.current_stage} loading", category="stage")

    def on_tick(self, dt: float):
        """Mirror the session kill count into the HUD."""
        state = load_stage_state()
        if state is None:
            return

        kills_label = self.hud.find(Stage.KILLS_LABEL)
        if kills_label is not None:
            kills_label.set_text(state.kills_text())

    # ===========================================================
    # Loading -> Running
    # ===========================================================

    def on_intro_finished(self):
        """Spawn the player with its camera, then the enemy wave."""
        if self.phase != StagePhase.LOADING:
            DebugLogger.warn(f"Intro finished while {self.phase.name} - ignored", category="stage")
            return

        if self.stage_label is not None:
            self.stage_label.set_visible(False)

        player = self._create_player()
        player.set_position(Stage.PLAYER_SPAWN_X, self.viewport_height / 2)

        camera = Camera(*Stage.CAMERA_OFFSET)
        camera.make_current()
        player.add_child(camera)

        handle = self.arena.add_child(player)
        self.spawn_enemies()

        self.phase = StagePhase.RUNNING
        self.player = handle
        DebugLogger.state("LOADING -> RUNNING", category="stage")

    def _create_player(self) -> Player:
        try:
            template = self.scene_loader.load(Stage.PLAYER_SCENE)
            entity = self.scene_loader.instantiate(template)
        except SceneLoadError:
            DebugLogger.fail("Could not load player scene", category="stage")
            raise

        if not isinstance(entity, Player):
            raise EntityConversionError(
                f"'{Stage.PLAYER_SCENE}' produced {type(entity).__name__}, expected Player"
            )
        return entity

    def spawn_enemies(self):
        """Populate the arena with this stage's wave."""
        state = load_stage_state()
        if state is None:
            raise MissingSessionError("Cannot spawn enemies without a session")

        return self.spawner.populate(
            self.arena, state.current_stage, self.viewport_height, self.enemy_template
        )

    # ===========================================================
    # Stage Clear
    # ===========================================================

    def on_collision(self, area) -> bool:
        """
        Handle an area-entered event.

        Only areas on the stage-exit layer matter, and only while Running.

        Returns:
            bool: True if a stage clear was triggered
        """
        if not area.get_collision_layer_bit(Stage.EXIT_LAYER_BIT):
            return False

        if self.phase != StagePhase.RUNNING:
            DebugLogger.trace(f"Stage exit ignored while {self.phase.name}", category="stage")
            return False

        state = load_stage_state()
        if state is None:
            raise MissingSessionError("Stage exit reached without a session")

        player = self.arena.resolve(self.player, Player)
        player.speed = 0

        state.advance_stage()
        DebugLogger.state(f"Stage clear -> reloading for stage {state.current_stage}", category="stage")
        self.scene.scene_manager.reload_current_scene()
        return True

    # ===========================================================
    # Running -> GameOver
    # ===========================================================

    def on_player_died(self):
        """Free the player's children, detach it and show the game-over banner."""
        if self.player is not None and self.arena.contains(self.player):
            for child in self.arena.get_children(self.player):
                self.arena.queue_free(child)

            self.arena.remove_child(self.player)

            label = self.hud.find(Stage.STAGE_LABEL)
            if label is not None:
                label.set_text(Stage.GAME_OVER_TEXT)
                label.set_visible(True)
                label.set_position(*Stage.GAME_OVER_POSITION)
            else:
                DebugLogger.warn(f"HUD node '{Stage.STAGE_LABEL}' missing", category="ui")

        self.player = None
        if self.phase != StagePhase.GAME_OVER:
            DebugLogger.state(f"{self.phase.name} -> GAME_OVER", category="stage")
        self.phase = StagePhase.GAME_OVER
