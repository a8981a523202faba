"""
errors.py
---------
Exception types raised by the stage runtime.

Only unrecoverable conditions are modelled as exceptions. A missing optional
node (label, animation player) is not an error: callers log and skip.
"""


class AirCombatError(Exception):
    """Base class for all stage runtime errors."""


class SceneLoadError(AirCombatError):
    """A scene template could not be loaded or instantiated."""

    def __init__(self, path: str, reason: str = ""):
        self.path = path
        self.reason = reason
        message = f"Could not load scene '{path}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class EntityConversionError(AirCombatError):
    """A handle or node resolved to an entity of the wrong type."""


class MissingSessionError(AirCombatError):
    """The session store holds no StageState where one is required."""
