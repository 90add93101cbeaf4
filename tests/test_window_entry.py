from __future__ import annotations

import heapq

from fault_throttle.domain import WINDOW_S, ManualClock, Outcome, WindowEntry


def test_entry_expires_one_window_after_creation():
    entry = WindowEntry.create(Outcome.SUCCESS, 100.0)

    assert WINDOW_S == 60.0
    assert entry.expiry == 160.0
    assert entry.success


def test_equality_ignores_which_clock_created_the_entry():
    clock1 = ManualClock(1_000.0)
    clock2 = ManualClock(1_000.0)
    moving = ManualClock(1_000.0)

    a = WindowEntry.create(Outcome.SUCCESS, clock1())
    b = WindowEntry.create(Outcome.SUCCESS, clock2())
    c = WindowEntry.create(Outcome.SUCCESS, moving())
    assert a == b == c
    assert hash(a) == hash(b) == hash(c)

    # Same instant, different outcome.
    assert a != WindowEntry.create(Outcome.FAILURE, clock1())

    moving.advance(1)
    later = WindowEntry.create(Outcome.FAILURE, moving())
    assert later == WindowEntry(outcome=Outcome.FAILURE, expiry=1_061.0)
    assert later != WindowEntry.create(Outcome.FAILURE, clock1())


def test_ordering_uses_expiry_only():
    early_failure = WindowEntry(outcome=Outcome.FAILURE, expiry=10.0)
    late_success = WindowEntry(outcome=Outcome.SUCCESS, expiry=20.0)

    assert early_failure < late_success
    assert not late_success < early_failure

    tie_a = WindowEntry(outcome=Outcome.SUCCESS, expiry=5.0)
    tie_b = WindowEntry(outcome=Outcome.FAILURE, expiry=5.0)
    assert not tie_a < tie_b
    assert not tie_b < tie_a


def test_heap_pops_earliest_expiry_first():
    heap: list[WindowEntry] = []
    for expiry in (30.0, 10.0, 20.0, 10.0):
        heapq.heappush(heap, WindowEntry(outcome=Outcome.SUCCESS, expiry=expiry))

    popped = [heapq.heappop(heap).expiry for _ in range(4)]
    assert popped == [10.0, 10.0, 20.0, 30.0]


def test_expired_is_inclusive_of_expiry_instant():
    entry = WindowEntry(outcome=Outcome.FAILURE, expiry=60.0)

    assert not entry.expired(59.999)
    assert entry.expired(60.0)
    assert entry.expired(61.0)
