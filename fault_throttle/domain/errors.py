from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class ThrottleRejected(Exception):
    """Raised instead of running the operation when the admission gate says no.

    Carries the window state seen by the rejected attempt.
    """

    successes: int
    failures: int
    ratio: float
    code: str = "THROTTLED"

    def __post_init__(self) -> None:
        super().__init__(self.message)

    @property
    def message(self) -> str:
        return (
            f"Throttle limit exceeded (last 60s: {self.successes} successes, "
            f"{self.failures} failures, allowed ratio {self.ratio})"
        )

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict[str, Any]:
        return {
            "ok": False,
            "error": {
                "code": self.code,
                "message": self.message,
                "details": {
                    "successes": self.successes,
                    "failures": self.failures,
                    "ratio": self.ratio,
                },
            },
        }
