"""
enemy_spawner.py
----------------
Places a wave of enemies to the right of the visible play-field.

Wave size grows linearly with the stage: BASE_WAVE_SIZE + stage.
Vertical placement is the remainder of an unbounded 32-bit draw by the
viewport height, which slightly favours low y values whenever the height
does not divide 2**32. That distribution is the game's established
behaviour and is kept as is.
"""

from dataclasses import dataclass
from typing import List

from air_combat.core.debug.debug_logger import DebugLogger
from air_combat.core.errors import SceneLoadError
from air_combat.core.runtime.game_settings import Stage
from air_combat.systems.random_source import RandomSource
from air_combat.systems.scene_loader import EntityTemplate, SceneLoader, TemplateSlot


@dataclass(frozen=True)
class EnemyPlacement:
    """World position for one enemy of a wave."""
    x: float
    y: float


def wave_size(stage: int, base_size: int = Stage.BASE_WAVE_SIZE) -> int:
    """Number of enemies for a stage."""
    if stage < 1:
        raise ValueError(f"stage must be >= 1, got {stage}")
    return base_size + stage


def spawn_wave(stage: int, viewport_height: float, template: EntityTemplate,
               rng: RandomSource, x_offset: int = Stage.SPAWN_X_OFFSET,
               x_range: int = Stage.SPAWN_X_RANGE,
               base_size: int = Stage.BASE_WAVE_SIZE) -> List[EnemyPlacement]:
    """
    Compute the placements for one wave.

    Args:
        stage: Current stage number (>= 1)
        viewport_height: Vertical extent of the viewport (> 0)
        template: Enemy template the wave is built from (not consumed)
        rng: Source of 32-bit draws

    Returns:
        list[EnemyPlacement]: base_size + stage placements
    """
    if viewport_height <= 0:
        raise ValueError(f"viewport_height must be > 0, got {viewport_height}")
    if x_range <= 0:
        raise ValueError(f"x_range must be > 0, got {x_range}")

    count = wave_size(stage, base_size)
    placements = []
    for _ in range(count):
        x = float(x_offset + rng.next_uint() % x_range)
        y = float(rng.next_uint()) % viewport_height
        placements.append(EnemyPlacement(x, y))

    DebugLogger.trace(
        f"Planned {count} placements from '{template.path}' for stage {stage}",
        category="entity_spawn"
    )
    return placements


class EnemySpawner:
    """Instantiates a wave from the shared enemy template into the arena."""

    def __init__(self, scene_loader: SceneLoader, rng: RandomSource, config=None):
        self.scene_loader = scene_loader
        self.rng = rng

        config = config or {}
        self.base_size = config.get("base_wave_size", Stage.BASE_WAVE_SIZE)
        self.x_offset = config.get("spawn_x_offset", Stage.SPAWN_X_OFFSET)
        self.x_range = config.get("spawn_x_range", Stage.SPAWN_X_RANGE)

        for key, value in (("base_wave_size", self.base_size), ("spawn_x_range", self.x_range)):
            if value <= 0:
                raise ValueError(f"{key} must be > 0, got {value}")

    def populate(self, arena, stage: int, viewport_height: float, slot: TemplateSlot) -> List[int]:
        """
        Spawn one wave into the arena.

        The template is taken out of the slot for each instantiation and put
        back afterwards. An empty slot spawns nothing.

        Returns:
            list[int]: Arena handles of the spawned enemies

        Raises:
            SceneLoadError: any single instantiation failed
        """
        if slot.is_empty:
            DebugLogger.warn("No enemy template loaded - skipping wave", category="entity_spawn")
            return []

        with slot.borrowed() as template:
            placements = spawn_wave(
                stage, viewport_height, template, self.rng,
                x_offset=self.x_offset, x_range=self.x_range, base_size=self.base_size,
            )

        handles = []
        for placement in placements:
            handles.append(self._spawn_one(arena, slot, placement))

        DebugLogger.system(f"Spawned wave of {len(handles)} for stage {stage}", category="entity_spawn")
        return handles

    def _spawn_one(self, arena, slot: TemplateSlot, placement: EnemyPlacement) -> int:
        with slot.borrowed() as template:
            try:
                enemy = self.scene_loader.instantiate(template)
            except SceneLoadError:
                DebugLogger.fail("Could not create enemy instance", category="entity_spawn")
                raise
            enemy.set_position(placement.x, placement.y)
            return arena.add_child(enemy)
