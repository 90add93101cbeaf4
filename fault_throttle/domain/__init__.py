from __future__ import annotations

from .admission import AdmissionDecision, admission_ratio, decide
from .clock import Clock, ManualClock, ScaledClock
from .entry import WINDOW_S, Outcome, WindowEntry
from .errors import ThrottleRejected
from .throttle import DEFAULT_OVERHEAD, Throttle
from .window import RollingWindow, WindowCounts

__all__ = [
    "AdmissionDecision",
    "Clock",
    "DEFAULT_OVERHEAD",
    "ManualClock",
    "Outcome",
    "RollingWindow",
    "ScaledClock",
    "Throttle",
    "ThrottleRejected",
    "WINDOW_S",
    "WindowCounts",
    "WindowEntry",
    "admission_ratio",
    "decide",
]
