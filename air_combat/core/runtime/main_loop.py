"""
main_loop.py
------------
Pygame window and fixed-timestep loop around the SceneManager.

Controls:
    Arrow keys  move
    Enter       new session (after game over)
    Esc         quit
"""

import pygame

from air_combat.core.debug.debug_logger import DebugLogger
from air_combat.core.runtime.game_settings import Display, Physics
from air_combat.core.runtime.stage_phase import StagePhase
from air_combat.core.services.scene_manager import SceneManager


class MainLoop:
    """Runs the game until the window closes."""

    def __init__(self):
        DebugLogger.section("Initializing MainLoop")

        pygame.init()
        pygame.font.init()
        pygame.display.set_caption(Display.CAPTION)
        self.screen = pygame.display.set_mode((Display.WIDTH, Display.HEIGHT))
        self.clock = pygame.time.Clock()
        self.running = True
        DebugLogger.init_entry("Pygame")

        self.scenes = SceneManager()
        self.scenes.start()

    def run(self):
        fixed_dt = Physics.FIXED_DT
        accumulator = 0.0

        while self.running:
            frame_time = min(self.clock.tick(Display.FPS) / 1000.0, Physics.MAX_FRAME_TIME)
            accumulator += frame_time

            self._handle_events()
            self._apply_input()

            while accumulator >= fixed_dt:
                self.scenes.update(fixed_dt)
                accumulator -= fixed_dt

            self.screen.fill(Display.BACKGROUND)
            self.scenes.draw(self.screen)
            pygame.display.flip()

        self.scenes.shutdown()
        pygame.quit()
        DebugLogger.system("Pygame terminated")

    def _handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                DebugLogger.action("Quit signal received")
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.key == pygame.K_RETURN and self._is_game_over():
                    self.scenes.new_session()

    def _apply_input(self):
        scene = self.scenes.active_scene
        if scene is None:
            return
        keys = pygame.key.get_pressed()
        dx = keys[pygame.K_RIGHT] - keys[pygame.K_LEFT]
        dy = keys[pygame.K_DOWN] - keys[pygame.K_UP]
        scene.steer(dx, dy)

    def _is_game_over(self) -> bool:
        scene = self.scenes.active_scene
        return scene is not None and scene.stage_ctrl.phase == StagePhase.GAME_OVER
