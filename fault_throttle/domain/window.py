from __future__ import annotations

import heapq
import threading
from typing import NamedTuple

from .entry import Outcome, WindowEntry


class WindowCounts(NamedTuple):
    successes: int
    failures: int


class AtomicCounter:
    """Integer counter whose updates are single atomic steps."""

    def __init__(self, value: int = 0) -> None:
        self._value = value
        self._lock = threading.Lock()

    @property
    def value(self) -> int:
        with self._lock:
            return self._value

    def add(self, delta: int) -> int:
        with self._lock:
            self._value += delta
            return self._value


class RollingWindow:
    """Outcomes from the trailing 60 seconds, reaped lazily.

    Nothing runs in the background: expired entries are only removed when a
    caller drains. The counters are written in exactly two places, `record`
    (+1) and `drain` (-1 per expired entry), and a counter is always bumped
    before its entry can be popped, so neither goes negative.
    """

    def __init__(self) -> None:
        self._heap: list[WindowEntry] = []
        self._heap_lock = threading.Lock()
        self._successes = AtomicCounter()
        self._failures = AtomicCounter()

    def __len__(self) -> int:
        with self._heap_lock:
            return len(self._heap)

    @property
    def counts(self) -> WindowCounts:
        return WindowCounts(successes=self._successes.value, failures=self._failures.value)

    def record(self, outcome: Outcome, now: float) -> WindowEntry:
        entry = WindowEntry.create(outcome, now)
        self._counter(outcome).add(1)
        with self._heap_lock:
            heapq.heappush(self._heap, entry)
        return entry

    def drain(self, now: float) -> WindowCounts:
        delta_successes = 0
        delta_failures = 0
        with self._heap_lock:
            while self._heap and self._heap[0].expired(now):
                old = heapq.heappop(self._heap)
                if old.success:
                    delta_successes -= 1
                else:
                    delta_failures -= 1

        # One atomic step per counter, however many entries expired.
        failures = self._failures.add(delta_failures)
        successes = self._successes.add(delta_successes)

        assert failures >= 0
        assert successes >= 0
        return WindowCounts(successes=successes, failures=failures)

    def _counter(self, outcome: Outcome) -> AtomicCounter:
        return self._successes if outcome is Outcome.SUCCESS else self._failures
