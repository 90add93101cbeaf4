from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Final

WINDOW_S: Final[float] = 60.0


class Outcome(enum.Enum):
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass(frozen=True)
class WindowEntry:
    """One recorded outcome, counted until `expiry`.

    Identity is (outcome, expiry). Heap ordering only looks at expiry, so two
    entries expiring at the same instant drain in either order.
    """

    outcome: Outcome
    expiry: float

    @classmethod
    def create(cls, outcome: Outcome, now: float) -> "WindowEntry":
        return cls(outcome=outcome, expiry=now + WINDOW_S)

    @property
    def success(self) -> bool:
        return self.outcome is Outcome.SUCCESS

    def expired(self, now: float) -> bool:
        return self.expiry <= now

    def __lt__(self, other: "WindowEntry") -> bool:
        if not isinstance(other, WindowEntry):
            return NotImplemented
        return self.expiry < other.expiry
