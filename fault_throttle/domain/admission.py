from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from .errors import ThrottleRejected
from .window import WindowCounts

Sampler = Callable[[], float]


@dataclass(frozen=True)
class AdmissionDecision:
    admitted: bool
    successes: int
    failures: int
    ratio: float | None

    def rejection(self) -> ThrottleRejected:
        assert self.ratio is not None
        return ThrottleRejected(successes=self.successes, failures=self.failures, ratio=self.ratio)


def admission_ratio(successes: int, failures: int, overhead: float) -> float | None:
    """Probability threshold for letting an attempt through.

    Allows up to `overhead` times the recent successes. The `overhead` added to
    the successes keeps the ratio above zero after a long run of failures, so
    the gate never closes for good. Returns None while there are no failures.
    """

    if failures == 0:
        return None
    return overhead * ((overhead + successes) / (successes + failures))


def decide(counts: WindowCounts, *, overhead: float, sample: Sampler) -> AdmissionDecision:
    """Decide one attempt. `sample` is only drawn when the gate is actually tight."""

    successes, failures = counts
    ratio = admission_ratio(successes, failures, overhead)
    if ratio is None or ratio > 1.0:
        return AdmissionDecision(admitted=True, successes=successes, failures=failures, ratio=ratio)

    admitted = sample() < ratio
    return AdmissionDecision(admitted=admitted, successes=successes, failures=failures, ratio=ratio)
