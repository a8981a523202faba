"""
game_scene.py
-------------
Thin adapter between the engine loop and the StageController.
Builds the stage systems, registers templates, routes collisions,
animation completion and entity events into controller callbacks.
"""

import pygame

from air_combat.core.debug.debug_logger import DebugLogger
from air_combat.core.runtime.base_scene import BaseScene
from air_combat.core.runtime.game_settings import Display, Stage
from air_combat.core.runtime.stage_state import load_stage_state
from air_combat.core.services.config_manager import load_config
from air_combat.core.services.event_manager import get_events, EnemyKilledEvent, PlayerDiedEvent
from air_combat.entities.enemy import Enemy
from air_combat.entities.entity_state import LifecycleState
from air_combat.entities.entity_types import CollisionLayer
from air_combat.entities.player import Player
from air_combat.entities.trigger_area import TriggerArea
from air_combat.graphics.animation_player import AnimationPlayer
from air_combat.scenes.stage_controller import StageController
from air_combat.systems.arena import Arena
from air_combat.systems.collision_manager import CollisionManager
from air_combat.systems.random_source import RandomSource
from air_combat.systems.scene_loader import SceneLoader
from air_combat.systems.spawning.enemy_spawner import EnemySpawner
from air_combat.ui.hud_loader import HudLoader


DEFAULT_STAGE_CONFIG = {
    "viewport_height": Display.HEIGHT,
    "spawn": {},
    "player": {"speed": 300, "health": 3, "size": [48, 24]},
    "enemy": {"size": [40, 40], "contact_damage": 1},
    "stage_exit": {"x": 6000, "size": [40, Display.HEIGHT]},
    "clips": {Stage.INTRO_CLIP: 2.0},
}


class GameScene(BaseScene):
    """One stage of play. Rebuilt from scratch on every stage reload."""

    HUD_LAYOUT = "stage_hud.yaml"

    def __init__(self, scene_manager, config=None, rng=None, hud=None):
        super().__init__(scene_manager)
        DebugLogger.section("Initializing Scene: GameScene")

        self.config = config if config is not None else load_config("stage.json", DEFAULT_STAGE_CONFIG)
        self.viewport_height = self.config.get("viewport_height", Display.HEIGHT)
        self.rng = rng or RandomSource()
        if rng is None:
            self.rng.randomize()

        self._init_world()
        self._init_templates()
        self._init_ui(hud)
        self._init_collisions()

        self.stage_ctrl = StageController(self)

    def _init_world(self):
        self.arena = Arena()
        self.scene_loader = SceneLoader()
        self.spawner = EnemySpawner(self.scene_loader, self.rng, self.config.get("spawn"))
        self.stage_exit = None

    def _init_templates(self):
        """Register the player and enemy templates the controller loads by path."""
        player_cfg = self.config.get("player", {})
        enemy_cfg = self.config.get("enemy", {})

        self.scene_loader.register_template(Stage.PLAYER_SCENE, lambda: Player(
            speed=player_cfg.get("speed", 300),
            health=player_cfg.get("health", 3),
            size=tuple(player_cfg.get("size", (48, 24))),
        ))
        self.scene_loader.register_template(Stage.ENEMY_SCENE, lambda: Enemy(
            size=tuple(enemy_cfg.get("size", (40, 40))),
            contact_damage=enemy_cfg.get("contact_damage", 1),
        ))
        DebugLogger.init_sub("Registered [Player, Enemy] templates")

    def _init_ui(self, hud):
        self.hud = hud if hud is not None else HudLoader().load(self.HUD_LAYOUT)
        self.animation_player = AnimationPlayer(
            self.config.get("clips", {}),
            on_finished=self._on_animation_finished,
        )

    def _init_collisions(self):
        self.collision_manager = CollisionManager()
        player_mask = CollisionLayer.mask(CollisionLayer.PLAYER)
        self.collision_manager.add_rule(
            player_mask, CollisionLayer.mask(CollisionLayer.STAGE_EXIT), self._on_area_entered
        )
        self.collision_manager.add_rule(
            player_mask, CollisionLayer.mask(CollisionLayer.ENEMY), self._on_player_hit_enemy
        )

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def on_enter(self):
        events = get_events()
        events.subscribe(PlayerDiedEvent, self._on_player_died)
        events.subscribe(EnemyKilledEvent, self._on_enemy_killed)

        exit_cfg = self.config.get("stage_exit", {})
        width, height = exit_cfg.get("size", (40, self.viewport_height))
        self.stage_exit = TriggerArea(
            exit_cfg.get("x", 6000), self.viewport_height / 2, (width, height),
            CollisionLayer.STAGE_EXIT, name="StageExit",
        )
        self.arena.add_child(self.stage_exit)

        self.stage_ctrl.on_ready()

    def on_exit(self):
        events = get_events()
        events.unsubscribe(PlayerDiedEvent, self._on_player_died)
        events.unsubscribe(EnemyKilledEvent, self._on_enemy_killed)
        self.arena.clear()
        self.collision_manager.reset()
        DebugLogger.state("GameScene exited", category="scene")

    # ===========================================================
    # Frame
    # ===========================================================

    def update(self, dt: float):
        self.animation_player.update(dt)

        for entity in self.arena.entities():
            entity.update(dt)

        self.collision_manager.detect(self.arena.entities())
        self.stage_ctrl.on_tick(dt)
        self.arena.flush()

    def steer(self, dx: float, dy: float):
        """Set the player's movement direction from input."""
        player = self.arena.get(self.stage_ctrl.player)
        if isinstance(player, Player):
            player.move_dir.update(dx, dy)

    def draw(self, surface):
        camera = self.arena.camera()
        if camera is not None:
            origin = camera.view_origin((Display.WIDTH, self.viewport_height))
        else:
            origin = pygame.Vector2(0, 0)

        for entity in self.arena.entities():
            if not entity.visible or entity.size == (0, 0):
                continue
            rect = entity.rect.move(-round(origin.x), -round(origin.y))
            pygame.draw.rect(surface, entity.color, rect)

        self.hud.draw(surface)

    # ===========================================================
    # Callbacks
    # ===========================================================

    def _on_animation_finished(self, clip_name: str):
        if clip_name == Stage.INTRO_CLIP:
            self.stage_ctrl.on_intro_finished()

    def _on_area_entered(self, source, area):
        self.stage_ctrl.on_collision(area)

    def _on_player_hit_enemy(self, player, enemy):
        # A player killed earlier in this pass is already detached
        if player.handle is None or player.death_state != LifecycleState.ALIVE:
            return
        enemy.kill()
        self.arena.queue_free(enemy.handle)
        player.take_damage(enemy.contact_damage)

    def _on_player_died(self, event: PlayerDiedEvent):
        self.stage_ctrl.on_player_died()

    def _on_enemy_killed(self, event: EnemyKilledEvent):
        state = load_stage_state()
        if state is None:
            return
        state.record_kill()
