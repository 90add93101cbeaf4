"""Client-side admission throttle for calls into a failing dependency.

One `Throttle` guards one fault zone. Once failures show up in the trailing
minute, it only lets through roughly `overhead` times the number of recent
successes, while still probing often enough to notice recovery.
"""

from __future__ import annotations

from .adapters import throttled, wrap
from .domain import Outcome, Throttle, ThrottleRejected, WindowCounts
from .registry import ThrottleRegistry

__all__ = [
    "Outcome",
    "Throttle",
    "ThrottleRegistry",
    "ThrottleRejected",
    "WindowCounts",
    "__version__",
    "throttled",
    "wrap",
]

__version__ = "0.1.0"
