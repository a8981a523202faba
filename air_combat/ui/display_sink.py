"""
display_sink.py
---------------
Capability interface the stage logic uses to update on-screen text, and
the pygame-backed Label that implements it.
"""

from abc import ABC, abstractmethod
from typing import Tuple

import pygame


class DisplaySink(ABC):
    """Something that can show a line of text somewhere on screen."""

    @abstractmethod
    def set_text(self, text: str) -> None:
        pass

    @abstractmethod
    def set_visible(self, visible: bool) -> None:
        pass

    @abstractmethod
    def set_position(self, x: float, y: float) -> None:
        pass


class Label(DisplaySink):
    """Screen-space text label."""

    def __init__(self, name: str, text: str = "", position: Tuple[float, float] = (0, 0),
                 visible: bool = True, font_size: int = 32, color=(255, 255, 255)):
        self.name = name
        self.text = text
        self.position = pygame.Vector2(position)
        self.visible = visible
        self.font_size = font_size
        self.color = tuple(color)

        self._surface = None
        self._rendered_text = None

    def set_text(self, text: str) -> None:
        self.text = str(text)

    def set_visible(self, visible: bool) -> None:
        self.visible = bool(visible)

    def set_position(self, x: float, y: float) -> None:
        self.position.update(x, y)

    # ===========================================================
    # Rendering
    # ===========================================================

    def draw(self, surface, font) -> None:
        """Blit the label. Re-renders only when the text changed."""
        if not self.visible or not self.text:
            return
        if self._surface is None or self._rendered_text != self.text:
            self._surface = font.render(self.text, True, self.color)
            self._rendered_text = self.text
        surface.blit(self._surface, (round(self.position.x), round(self.position.y)))

    def __repr__(self):
        return f"<Label {self.name!r} text={self.text!r} visible={self.visible}>"
