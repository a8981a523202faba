"""
hud.py
------
Named collection of HUD labels. find() is the node lookup the stage
controller uses; a missing name yields None, never an error.
"""

from typing import Dict, Optional

import pygame

from air_combat.core.debug.debug_logger import DebugLogger
from air_combat.ui.display_sink import Label


class Hud:
    """Container for screen-space labels, looked up by path-like name."""

    def __init__(self):
        self._labels: Dict[str, Label] = {}
        self._fonts: Dict[int, object] = {}

    def add(self, label: Label) -> Label:
        if label.name in self._labels:
            DebugLogger.warn(f"Replacing HUD label '{label.name}'", category="ui")
        self._labels[label.name] = label
        return label

    def find(self, name: str, expected_type: type = Label) -> Optional[Label]:
        """Return the label registered under name if it has the expected type."""
        node = self._labels.get(name.lstrip("./"))
        if node is None or not isinstance(node, expected_type):
            return None
        return node

    def labels(self):
        return list(self._labels.values())

    # ===========================================================
    # Rendering
    # ===========================================================

    def draw(self, surface) -> None:
        for label in self._labels.values():
            label.draw(surface, self._get_font(label.font_size))

    def _get_font(self, size: int):
        font = self._fonts.get(size)
        if font is None:
            font = pygame.font.Font(None, size)
            self._fonts[size] = font
        return font
