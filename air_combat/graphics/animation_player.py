"""
animation_player.py
-------------------
Time-based clip playback with a completion callback.

Responsibilities
----------------
- Play named clips at a given speed and direction, optionally looping.
- Advance playback from the scene's update loop.
- Report completion of non-looping clips through on_finished(clip_name).

Clips carry no visuals here; their lengths come from stage.json.
"""

from typing import Callable, Dict, Optional

from air_combat.core.debug.debug_logger import DebugLogger


class AnimationPlayer:
    """Plays one clip at a time and fires on_finished when it ends."""

    def __init__(self, clips: Dict[str, float], on_finished: Optional[Callable[[str], None]] = None):
        """
        Args:
            clips: Mapping of clip name to length in seconds
            on_finished: Called with the clip name when a non-looping clip ends
        """
        self.clips = dict(clips)
        self.on_finished = on_finished

        self.current_clip: Optional[str] = None
        self.position = 0.0
        self.speed = 1.0
        self.direction = 1.0
        self.loop = False

    @property
    def is_playing(self) -> bool:
        return self.current_clip is not None

    def play(self, clip_name: str, speed: float = 1.0, direction: float = 1.0, loop: bool = False):
        """
        Start a clip from its beginning (or end, when direction is negative).

        Raises:
            KeyError: unknown clip name
        """
        if clip_name not in self.clips:
            raise KeyError(f"Unknown animation clip '{clip_name}'")

        self.current_clip = clip_name
        self.speed = abs(speed)
        self.direction = -1.0 if direction < 0 else 1.0
        self.loop = loop
        self.position = self.clips[clip_name] if self.direction < 0 else 0.0
        DebugLogger.trace(f"Playing '{clip_name}' (speed={self.speed}, loop={loop})", category="animation")

    def stop(self):
        self.current_clip = None
        self.position = 0.0

    def update(self, dt: float):
        """Advance playback. A finished clip stops before its callback runs."""
        if self.current_clip is None:
            return

        length = self.clips[self.current_clip]
        self.position += dt * self.speed * self.direction

        if 0.0 <= self.position <= length:
            return

        if self.loop and length > 0:
            self.position %= length
            return

        finished = self.current_clip
        self.stop()
        DebugLogger.trace(f"Finished '{finished}'", category="animation")
        if self.on_finished:
            self.on_finished(finished)
