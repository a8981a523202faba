"""
Scene exports.

GameScene wires engine callbacks to the StageController state machine.
"""

from air_combat.scenes.stage_controller import StageController
from air_combat.scenes.game_scene import GameScene

__all__ = [
    'StageController',
    'GameScene',
]
