"""Time sources.

A clock is any zero-argument callable returning seconds as a float. The
throttle only ever compares readings from the same clock, so the epoch does
not matter: `time.monotonic` is the production default.
"""

from __future__ import annotations

import threading
import time
from typing import Callable

Clock = Callable[[], float]


class ManualClock:
    """Clock that only moves when told to."""

    def __init__(self, start: float = 0.0) -> None:
        self._now = float(start)
        self._lock = threading.Lock()

    def __call__(self) -> float:
        with self._lock:
            return self._now

    def advance(self, seconds: float) -> float:
        with self._lock:
            self._now += seconds
            return self._now

    def set(self, now: float) -> None:
        with self._lock:
            self._now = float(now)


class ScaledClock:
    """Monotonic clock running `speedup` times faster than real time."""

    def __init__(self, *, speedup: float, start: float = 0.0) -> None:
        if speedup <= 0:
            raise ValueError("speedup must be > 0")
        self._speedup = speedup
        self._start = start
        self._origin = time.monotonic()

    def __call__(self) -> float:
        return self._start + (time.monotonic() - self._origin) * self._speedup
