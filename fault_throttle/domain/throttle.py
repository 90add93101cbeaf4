from __future__ import annotations

import math
import random
import time
from typing import Any, Awaitable, Callable, TypeVar

from ..adapters import wrap
from ..observability.logging import get_logger
from .admission import Sampler, decide
from .clock import Clock
from .entry import Outcome
from .window import RollingWindow, WindowCounts

T = TypeVar("T")
F = TypeVar("F", bound=Callable[..., Any])

DEFAULT_OVERHEAD = 2.0


class Throttle:
    """Probabilistic admission gate for one fault zone.

    Each attempt drains expired outcomes, decides, runs the operation and
    records the outcome. Those steps are not atomic as a unit: concurrent
    attempts may interleave, and no lock is held while the operation runs.
    Rejections are recorded as failures too, so the admitted share of all
    attempts (rejections included) settles at `overhead` times the successes.
    """

    def __init__(
        self,
        overhead: float = DEFAULT_OVERHEAD,
        clock: Clock = time.monotonic,
        random_sample: Sampler | None = None,
        *,
        zone: str = "default",
        logger=None,
    ) -> None:
        if isinstance(overhead, bool) or not isinstance(overhead, (int, float)):
            raise ValueError(f"overhead must be a number, got {overhead!r}")
        if not math.isfinite(overhead) or overhead <= 0:
            raise ValueError(f"overhead must be finite and > 0, got {overhead!r}")

        self._overhead = float(overhead)
        self._clock = clock
        self._random_sample = random_sample or random.SystemRandom().random
        self._zone = zone
        self._logger = logger or get_logger(component="throttle", zone=zone)
        self._window = RollingWindow()

    @property
    def overhead(self) -> float:
        return self._overhead

    @property
    def zone(self) -> str:
        return self._zone

    @property
    def window(self) -> RollingWindow:
        return self._window

    def snapshot(self) -> WindowCounts:
        """Live counts as of now. Reaps expired entries as a side effect."""
        return self._window.drain(self._clock())

    def attempt(self, operation: Callable[[], T]) -> T:
        """Run `operation`, or raise ThrottleRejected without running it.

        Errors raised by `operation` are recorded and re-raised unchanged.
        """

        self._admit()
        try:
            result = operation()
        except BaseException:
            self._record(Outcome.FAILURE)
            raise
        self._record(Outcome.SUCCESS)
        return result

    async def attempt_async(self, operation: Callable[[], Awaitable[T]]) -> T:
        self._admit()
        try:
            result = await operation()
        except BaseException:
            self._record(Outcome.FAILURE)
            raise
        self._record(Outcome.SUCCESS)
        return result

    def wrap(self, fn: F) -> F:
        return wrap(self, fn)

    def _admit(self) -> None:
        counts = self._window.drain(self._clock())
        decision = decide(counts, overhead=self._overhead, sample=self._random_sample)
        if decision.admitted:
            return

        self._record(Outcome.FAILURE)
        self._logger.debug(
            "throttle.rejected",
            successes=decision.successes,
            failures=decision.failures,
            ratio=decision.ratio,
        )
        raise decision.rejection()

    def _record(self, outcome: Outcome) -> None:
        self._window.record(outcome, self._clock())
