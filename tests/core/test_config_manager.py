"""
test_config_manager.py
----------------------
Unit tests for JSON config loading and default merging.
"""

import json

import pytest

from air_combat.core.services.config_manager import load_config, resolve_config_path, CONFIG_ROOT


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "stage.json"
    path.write_text(json.dumps({
        "_notes": "ignored",
        "viewport_height": 600,
        "spawn": {"base_wave_size": 5},
    }))
    return str(path)


def test_file_values_override_defaults(config_file):
    defaults = {"viewport_height": 720, "spawn": {"base_wave_size": 11, "spawn_x_range": 5000}}
    config = load_config(config_file, defaults)

    assert config["viewport_height"] == 600
    assert config["spawn"] == {"base_wave_size": 5, "spawn_x_range": 5000}
    assert "_notes" not in config


def test_defaults_are_not_mutated(config_file):
    defaults = {"spawn": {"base_wave_size": 11}}
    load_config(config_file, defaults)
    assert defaults == {"spawn": {"base_wave_size": 11}}


def test_missing_file_falls_back_to_defaults(tmp_path):
    defaults = {"viewport_height": 720}
    config = load_config(str(tmp_path / "missing.json"), defaults)
    assert config == defaults
    assert config is not defaults


def test_missing_file_strict_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "missing.json"), strict=True)


def test_bare_names_resolve_into_package_config():
    assert resolve_config_path("stage") == resolve_config_path("stage.json")
    assert resolve_config_path("stage.json").startswith(CONFIG_ROOT)


def test_packaged_stage_config_loads():
    config = load_config("stage.json", strict=True)
    assert config["spawn"]["base_wave_size"] == 11
    assert "Stage Display" in config["clips"]
