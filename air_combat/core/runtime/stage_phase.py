"""
stage_phase.py
--------------
Defines the lifecycle phases a stage controller can be in.
"""

from enum import Enum


class StagePhase(Enum):
    """Lifecycle phases for a single stage."""
    LOADING = "loading"       # Intro animation playing, no player yet
    RUNNING = "running"       # Player spawned, wave active
    GAME_OVER = "game_over"   # Player died, terminal for this controller
