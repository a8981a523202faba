"""
hud_loader.py
-------------
Loads HUD layouts from YAML files and builds Hud containers.
"""

from pathlib import Path
from typing import Any, Dict

import yaml

from air_combat.core.debug.debug_logger import DebugLogger
from air_combat.core.services.config_manager import CONFIG_ROOT
from air_combat.ui.display_sink import Label
from air_combat.ui.hud import Hud


class HudLoader:
    """Parses HUD layout files (config/hud/*.yaml) into Hud instances."""

    def __init__(self, base_path=None):
        self.base_path = Path(base_path) if base_path else Path(CONFIG_ROOT) / "hud"
        self.cache: Dict[str, Dict] = {}

    def load(self, filename: str) -> Hud:
        """
        Load a HUD layout.

        Raises:
            FileNotFoundError: layout file does not exist
        """
        if filename not in self.cache:
            full_path = self.base_path / filename
            if not full_path.exists():
                raise FileNotFoundError(f"HUD config not found: {full_path}")

            with open(full_path, "r", encoding="utf-8") as f:
                self.cache[filename] = yaml.safe_load(f) or {}
            DebugLogger.system(f"Loaded HUD layout {filename}", category="ui")

        return self.load_from_dict(self.cache[filename])

    def load_from_dict(self, config: Dict[str, Any]) -> Hud:
        """Build a Hud from an already parsed layout."""
        hud = Hud()
        defaults = config.get("defaults", {})

        for name, data in (config.get("labels") or {}).items():
            data = {**defaults, **(data or {})}
            hud.add(Label(
                name=name,
                text=data.get("text", ""),
                position=tuple(data.get("position", (0, 0))),
                visible=data.get("visible", True),
                font_size=data.get("font_size", 32),
                color=tuple(data.get("color", (255, 255, 255))),
            ))

        return hud
