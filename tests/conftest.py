from __future__ import annotations

import pytest

from fault_throttle.observability.logging import configure_logging


@pytest.fixture(autouse=True)
def _quiet_logs():
    configure_logging(level="ERROR", json_logs=True)
