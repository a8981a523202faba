"""
game_settings.py
----------------
Centralized constants for all game systems.
"""


# ===========================================================
# Display & Performance
# ===========================================================

class Display:
    """Screen and window configuration."""
    WIDTH: int = 1280
    HEIGHT: int = 720
    FPS: int = 60
    CAPTION: str = "Air Combat"
    BACKGROUND: tuple = (10, 10, 40)


# ===========================================================
# Physics & Timing
# ===========================================================

class Physics:
    """Physics and update timing."""
    UPDATE_RATE: int = 60
    FIXED_DT: float = 1 / UPDATE_RATE
    MAX_FRAME_TIME: float = 0.1


# ===========================================================
# Stage Defaults
# ===========================================================

class Stage:
    """Stage flow and spawn constants. Overridable from stage.json."""
    PLAYER_SCENE: str = "res://PlayerRoot.tscn"
    ENEMY_SCENE: str = "res://Enemy.tscn"

    # Player spawns at this x, vertically centered in the viewport
    PLAYER_SPAWN_X: float = 300.0
    CAMERA_OFFSET: tuple = (360.0, 0.0)

    # Wave size is BASE_WAVE_SIZE + stage
    BASE_WAVE_SIZE: int = 11
    SPAWN_X_OFFSET: int = 700
    SPAWN_X_RANGE: int = 5000

    # Collision layer bit reserved for stage-exit geometry
    EXIT_LAYER_BIT: int = 4

    INTRO_CLIP: str = "Stage Display"
    GAME_OVER_TEXT: str = "Game Over"
    GAME_OVER_POSITION: tuple = (Display.WIDTH / 2 - 200, Display.HEIGHT / 2)

    # HUD node names
    STAGE_LABEL: str = "Label"
    KILLS_LABEL: str = "HUD/Kills"
