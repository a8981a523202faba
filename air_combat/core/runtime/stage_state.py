"""
stage_state.py
--------------
Session-scoped stage progress shared by the stage controller and the HUD.
Survives scene reloads; reset only when a new session starts.
"""

from typing import Optional

from air_combat.core.debug.debug_logger import DebugLogger


# ===========================================================
# Stage State
# ===========================================================

class StageState:
    """Current stage number and kill counter for the running session."""

    def __init__(self, current_stage: int = 1, kills: int = 0):
        if current_stage < 1:
            raise ValueError(f"current_stage must be >= 1, got {current_stage}")
        if kills < 0:
            raise ValueError(f"kills must be >= 0, got {kills}")
        self._current_stage = current_stage
        self._kills = kills

    @property
    def current_stage(self) -> int:
        return self._current_stage

    @property
    def kills(self) -> int:
        return self._kills

    # ===========================================================
    # Mutation
    # ===========================================================

    def advance_stage(self) -> int:
        """Move to the next stage. Returns the new stage number."""
        self._current_stage += 1
        DebugLogger.state(f"Advanced to stage {self._current_stage}", category="game_state")
        return self._current_stage

    def record_kill(self) -> int:
        """Increment kill count. Returns the new total."""
        self._kills += 1
        DebugLogger.trace(f"Kill recorded ({self._kills} total)", category="game_state")
        return self._kills

    # ===========================================================
    # Display Formatting
    # ===========================================================

    def stage_label_text(self) -> str:
        return f"Stage {self._current_stage}"

    def kills_text(self) -> str:
        return f"Kills: {self._kills}"

    def __repr__(self):
        return f"StageState(current_stage={self._current_stage}, kills={self._kills})"


# ===========================================================
# Singleton Access
# ===========================================================

_STAGE_STATE = None


def get_stage_state() -> StageState:
    """Get or create the stage state singleton. Starts a session if none exists."""
    global _STAGE_STATE
    if _STAGE_STATE is None:
        _STAGE_STATE = StageState()
        DebugLogger.state("New session started", category="game_state")
    return _STAGE_STATE


def load_stage_state() -> Optional[StageState]:
    """Return the active session's state, or None if no session was started."""
    return _STAGE_STATE


def reset_stage_state() -> None:
    """Reset the singleton. Call on full game restart."""
    global _STAGE_STATE
    _STAGE_STATE = None
