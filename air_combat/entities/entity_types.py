"""Entity types."""

from air_combat.core.runtime.game_settings import Stage


class EntityCategory:
    """High-level logical grouping for entities."""
    PLAYER = "player"
    ENEMY = "enemy"
    CAMERA = "camera"
    EFFECT = "effect"
    TRIGGER = "trigger"
    NEUTRAL = "neutral"


# ===========================================================
# Collision Layers
# ===========================================================
class CollisionLayer:
    """
    Bit indices used in entity collision masks.

    Example:
        area.collision_layer = CollisionLayer.mask(CollisionLayer.STAGE_EXIT)
    """
    PLAYER = 0
    ENEMY = 1
    PLAYER_BULLET = 2
    ENEMY_BULLET = 3
    STAGE_EXIT = Stage.EXIT_LAYER_BIT

    @staticmethod
    def mask(*bits: int) -> int:
        """Build a bitmask with the given bit indices set."""
        value = 0
        for bit in bits:
            if not 0 <= bit < 32:
                raise ValueError(f"Collision layer bit out of range: {bit}")
            value |= 1 << bit
        return value
