from __future__ import annotations

import threading
import time

from .config.settings import Settings
from .domain.admission import Sampler
from .domain.clock import Clock
from .domain.throttle import Throttle
from .observability.logging import get_logger


class ThrottleRegistry:
    """One throttle per fault zone, created on first use.

    Overhead comes from `settings.zones[<zone>]` when present, else from
    `settings.throttle`.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        clock: Clock = time.monotonic,
        random_sample: Sampler | None = None,
        logger=None,
    ) -> None:
        self._settings = settings or Settings()
        self._clock = clock
        self._random_sample = random_sample
        self._logger = logger or get_logger(component="registry")
        self._throttles: dict[str, Throttle] = {}
        self._lock = threading.Lock()

    def get(self, zone: str) -> Throttle:
        with self._lock:
            throttle = self._throttles.get(zone)
            if throttle is None:
                overhead = self.overhead_for(zone)
                throttle = Throttle(
                    overhead,
                    self._clock,
                    self._random_sample,
                    zone=zone,
                )
                self._throttles[zone] = throttle
                self._logger.info("registry.created", zone=zone, overhead=overhead)
            return throttle

    __getitem__ = get

    def overhead_for(self, zone: str) -> float:
        zone_settings = self._settings.zones.get(zone)
        if zone_settings is not None:
            return zone_settings.overhead
        return self._settings.throttle.overhead

    def zones(self) -> list[str]:
        with self._lock:
            return sorted(self._throttles)

    def __contains__(self, zone: object) -> bool:
        with self._lock:
            return zone in self._throttles
