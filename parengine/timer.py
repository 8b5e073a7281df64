"""Frame timing: delta time between frames and an FPS read-out."""

from __future__ import annotations

import time
from typing import Any, ClassVar

import pygame

_TEXT_COLOR = (0, 0, 0)
_TEXT_BACKGROUND = (255, 255, 255)
_FONT_SIZE = 18


class Time:
    """Measures the time elapsed between consecutive updates, in seconds."""

    shared: ClassVar["Time"]
    _font: ClassVar[Any] = None

    def __init__(self) -> None:
        self._previous: float | None = None
        self.delta_time: float = 0.0
        self.elapsed: float = 0.0

    def initialize(self, now: float | None = None) -> None:
        """Start measuring from ``now`` (a monotonic clock reading by default)."""
        self._previous = time.perf_counter() if now is None else now
        self.delta_time = 0.0

    def update(self, now: float | None = None) -> None:
        """Record the time since the previous update as the frame's delta."""
        current = time.perf_counter() if now is None else now
        if self._previous is None:
            self._previous = current
        self.delta_time = current - self._previous
        self._previous = current

    @property
    def fps(self) -> float:
        """Frames per second implied by the last delta, or 0 before any time passed."""
        return 1.0 / self.delta_time if self.delta_time > 0 else 0.0

    def fps_text(self) -> str:
        """The text shown in the corner of the screen."""
        return f"Time : {int(self.fps)}"

    def render(self, surface: Any) -> None:
        """Accumulate elapsed time and draw the FPS text at the top-left corner."""
        self.elapsed += self.delta_time
        if not pygame.font.get_init():
            pygame.font.init()
        if Time._font is None:
            Time._font = pygame.font.Font(None, _FONT_SIZE)
        text = Time._font.render(self.fps_text(), True, _TEXT_COLOR, _TEXT_BACKGROUND)
        surface.blit(text, (0, 0))


Time.shared = Time()