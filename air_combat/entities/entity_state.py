"""
entity_state.py
---------------
Runtime state enumerations for entities.
"""

from enum import IntEnum


class LifecycleState(IntEnum):
    """Tracks the life/death progression of an entity."""
    ALIVE = 0
    DEAD = 1
