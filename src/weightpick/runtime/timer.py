"""
Pausable stopwatch for timing construction and draw phases.
"""

from __future__ import annotations

import time
from typing import Callable

_UNIT_SECONDS = {
    "ms": 1e-3,
    "s": 1.0,
    "min": 60.0,
    "h": 3600.0,
}


class Timer:
    """Accumulates running time across start/pause segments.

    The timer starts on construction. ``start`` begins a new running
    segment without clearing time accumulated by earlier segments.
    """

    def __init__(self, clock: Callable[[], float] = time.perf_counter):
        self._clock = clock
        self._started_at = 0.0
        self._accumulated = 0.0
        self._running = False
        self.start()

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> None:
        self._started_at = self._clock()
        self._running = True

    def pause(self) -> None:
        if self._running:
            self._accumulated += self._clock() - self._started_at
            self._running = False

    def elapsed(self, unit: str = "ms") -> float:
        """Return total running time expressed in ``ms``, ``s``, ``min`` or ``h``."""

        key = str(unit).strip().lower()
        if key not in _UNIT_SECONDS:
            options = ", ".join(_UNIT_SECONDS)
            raise ValueError(f"Unknown time unit '{unit}'. Available: {options}")
        seconds = self._accumulated
        if self._running:
            seconds += self._clock() - self._started_at
        return float(seconds / _UNIT_SECONDS[key])
