"""
Core services: configuration loading, event dispatch and scene management.
"""

from air_combat.core.services.config_manager import load_config
from air_combat.core.services.event_manager import get_events, reset_events

__all__ = [
    'load_config',
    'get_events',
    'reset_events',
]
