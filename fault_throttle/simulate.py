"""Soak simulation: many threads hammering one throttle on an accelerated clock.

Useful for eyeballing how the admitted share of attempts tracks the
underlying success rate, and for shaking out concurrency bugs.
"""

from __future__ import annotations

import random
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import asdict, dataclass, field
from typing import Any

from .config.settings import SimulationSettings
from .domain.clock import ScaledClock
from .domain.errors import ThrottleRejected
from .domain.throttle import Throttle
from .domain.window import WindowCounts
from .observability.logging import get_logger


class SimulatedFailure(RuntimeError):
    pass


@dataclass
class WorkerStats:
    worker: int
    successes: int = 0
    failures: int = 0
    throttles: int = 0

    @property
    def attempts(self) -> int:
        return self.successes + self.failures + self.throttles


@dataclass(frozen=True)
class SimulationReport:
    overhead: float
    failure_rate: float
    workers: list[WorkerStats] = field(default_factory=list)
    final_counts: WindowCounts = WindowCounts(0, 0)

    @property
    def successes(self) -> int:
        return sum(w.successes for w in self.workers)

    @property
    def failures(self) -> int:
        return sum(w.failures for w in self.workers)

    @property
    def throttles(self) -> int:
        return sum(w.throttles for w in self.workers)

    @property
    def attempts(self) -> int:
        return sum(w.attempts for w in self.workers)

    @property
    def admitted_ratio(self) -> float | None:
        if self.attempts == 0:
            return None
        return (self.successes + self.failures) / self.attempts

    def to_dict(self) -> dict[str, Any]:
        return {
            "overhead": self.overhead,
            "failure_rate": self.failure_rate,
            "totals": {
                "attempts": self.attempts,
                "successes": self.successes,
                "failures": self.failures,
                "throttles": self.throttles,
                "admitted_ratio": self.admitted_ratio,
            },
            "final_window": self.final_counts._asdict(),
            "workers": [asdict(w) for w in self.workers],
        }


def run_simulation(sim: SimulationSettings, *, overhead: float, logger=None) -> SimulationReport:
    logger = logger or get_logger(component="simulation")

    clock = ScaledClock(speedup=sim.speedup)
    if sim.seed is None:
        sampler_rng: random.Random = random.SystemRandom()
        failure_rng: random.Random = random.SystemRandom()
    else:
        sampler_rng = random.Random(sim.seed)
        failure_rng = random.Random(sim.seed + 1)

    throttle = Throttle(overhead, clock, sampler_rng.random, zone="simulation")
    stop_at = clock() + sim.duration_s
    work_s = sim.work_ms / 1000.0

    def _flaky_call() -> None:
        if work_s > 0:
            time.sleep(work_s)
        if failure_rng.random() < sim.failure_rate:
            raise SimulatedFailure("deliberate fail")

    def _worker(idx: int) -> WorkerStats:
        stats = WorkerStats(worker=idx)
        while clock() < stop_at:
            try:
                throttle.attempt(_flaky_call)
                stats.successes += 1
            except ThrottleRejected:
                stats.throttles += 1
            except SimulatedFailure:
                stats.failures += 1
        return stats

    logger.info(
        "simulation.start",
        workers=sim.workers,
        duration_s=sim.duration_s,
        speedup=sim.speedup,
        failure_rate=sim.failure_rate,
        overhead=overhead,
    )

    with ThreadPoolExecutor(max_workers=sim.workers, thread_name_prefix="soak") as pool:
        futures = [pool.submit(_worker, i) for i in range(sim.workers)]
        workers = [f.result() for f in futures]

    report = SimulationReport(
        overhead=overhead,
        failure_rate=sim.failure_rate,
        workers=workers,
        final_counts=throttle.window.counts,
    )
    logger.info(
        "simulation.done",
        attempts=report.attempts,
        successes=report.successes,
        failures=report.failures,
        throttles=report.throttles,
        admitted_ratio=report.admitted_ratio,
    )
    return report
