"""
Runtime configuration exports.

Provides game-wide constants and the session-scoped stage state.
"""

from air_combat.core.runtime.game_settings import (
    Display,
    Stage,
    Physics,
)
from air_combat.core.runtime.stage_state import (
    StageState,
    get_stage_state,
    load_stage_state,
    reset_stage_state,
)

__all__ = [
    # Display & Timing
    'Display',
    'Physics',
    # Gameplay
    'Stage',
    # Session
    'StageState',
    'get_stage_state',
    'load_stage_state',
    'reset_stage_state',
]
