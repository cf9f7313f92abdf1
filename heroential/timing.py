"""Frame timing: delta time and frames per second."""

from __future__ import annotations

import time
from typing import Callable


class TimeManager:
    """Measures time between updates and counts frames per second."""

    def __init__(self, clock: Callable[[], float] | None = None):
        self._clock = clock if clock is not None else time.perf_counter
        self._prev = 0.0
        self.delta_time = 0.0
        self.fps = 0
        self._frame_count = 0
        self._frame_time = 0.0

    def start(self) -> None:
        """Take the reference time for the first update."""
        self._prev = self._clock()

    def update(self) -> None:
        now = self._clock()
        self.delta_time = now - self._prev
        self._prev = now

        self._frame_count += 1
        self._frame_time += self.delta_time

        if self._frame_time >= 1.0:
            self.fps = int(self._frame_count / self._frame_time)
            self._frame_time = 0.0
            self._frame_count = 0