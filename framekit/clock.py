"""Frame timing: delta time and frames per second."""

from __future__ import annotations

import time
from typing import Callable


class TimeManager:
    """Measures the time between frames and the frame rate once per second."""

    def __init__(self, counter: Callable[[], float] = time.perf_counter) -> None:
        self._counter = counter
        self._prev = 0.0
        self.dt = 0.0
        self.fps = 0
        self._frame_count = 0
        self._frame_time = 0.0

    def init(self) -> None:
        """Start measuring from the current counter reading."""
        self._prev = self._counter()

    def update(self) -> bool:
        """Advance one frame; True when a new frame rate has just been computed."""
        current = self._counter()
        self.dt = current - self._prev
        self._prev = current

        self._frame_count += 1
        self._frame_time += self.dt
        if self._frame_time >= 1.0:
            self.fps = int(self._frame_count / self._frame_time)
            self._frame_time = 0.0
            self._frame_count = 0
            return True
        return False

    def status_text(self, mouse_pos) -> str:
        """Title-bar text with frame rate, delta time and mouse position."""
        x, y = mouse_pos
        return f"FPS: {self.fps}, DT: {self.dt:f}, Mouse: ({int(x)}, {int(y)})"