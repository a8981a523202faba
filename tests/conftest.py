"""
conftest.py
-----------
Shared pytest configuration and fixtures for Air Combat tests.

Contains:
- Session/event singleton isolation between tests
- A minimal scene double carrying the systems StageController pulls in
- Deterministic random sources
"""

import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest
from types import SimpleNamespace
from unittest.mock import MagicMock

from air_combat.core.debug.debug_logger import LoggerConfig
from air_combat.core.runtime.game_settings import Stage
from air_combat.core.runtime.stage_state import get_stage_state, reset_stage_state
from air_combat.core.services.event_manager import reset_events
from air_combat.entities.enemy import Enemy
from air_combat.entities.player import Player
from air_combat.graphics.animation_player import AnimationPlayer
from air_combat.systems.arena import Arena
from air_combat.systems.random_source import RandomSource
from air_combat.systems.scene_loader import SceneLoader
from air_combat.systems.spawning.enemy_spawner import EnemySpawner
from air_combat.ui.hud_loader import HudLoader


HUD_LAYOUT = {
    "labels": {
        "Label": {"text": "", "position": [540, 320]},
        "HUD/Kills": {"text": "Kills: 0", "position": [20, 20]},
    }
}


# ===========================================================
# Isolation
# ===========================================================

@pytest.fixture(autouse=True)
def isolated_singletons():
    """Every test starts without a session and with a fresh event bus."""
    reset_stage_state()
    reset_events()
    yield
    reset_stage_state()
    reset_events()


@pytest.fixture(autouse=True)
def quiet_logger(monkeypatch):
    """Keep console output out of test reports."""
    monkeypatch.setattr(LoggerConfig, "ENABLE_LOGGING", False)


# ===========================================================
# Common Fixtures
# ===========================================================

@pytest.fixture
def session():
    """Start a session at stage 1 with zero kills."""
    return get_stage_state()


@pytest.fixture
def rng():
    return RandomSource(seed=1234)


@pytest.fixture
def scene_loader():
    """Loader with the default player and enemy templates registered."""
    loader = SceneLoader()
    loader.register_template(Stage.PLAYER_SCENE, lambda: Player())
    loader.register_template(Stage.ENEMY_SCENE, lambda: Enemy())
    return loader


@pytest.fixture
def stage_scene(scene_loader, rng):
    """Scene double exposing what StageController reads from its scene."""
    return SimpleNamespace(
        arena=Arena(),
        hud=HudLoader().load_from_dict(HUD_LAYOUT),
        animation_player=AnimationPlayer({Stage.INTRO_CLIP: 2.0}),
        scene_loader=scene_loader,
        spawner=EnemySpawner(scene_loader, rng),
        viewport_height=720,
        scene_manager=MagicMock(),
    )


# ===========================================================
# Test Utilities
# ===========================================================

class SequenceRandom:
    """RandomSource stand-in that replays fixed draws."""

    def __init__(self, values):
        self._values = list(values)
        self.calls = 0

    def next_uint(self) -> int:
        value = self._values[self.calls % len(self._values)]
        self.calls += 1
        return value


@pytest.fixture
def sequence_random():
    """Factory for RandomSource stand-ins with scripted draws."""
    return SequenceRandom


# Pytest configuration
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: marks tests that drive a full GameScene")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


def pytest_collection_modifyitems(config, items):
    """Tag everything not marked integration as a unit test."""
    for item in items:
        if "integration" not in item.keywords:
            item.add_marker(pytest.mark.unit)
