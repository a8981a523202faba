"""
HUD exports.

Label sinks, the HUD container and its YAML loader.
"""

from air_combat.ui.display_sink import DisplaySink, Label
from air_combat.ui.hud import Hud
from air_combat.ui.hud_loader import HudLoader

__all__ = [
    'DisplaySink',
    'Label',
    'Hud',
    'HudLoader',
]
