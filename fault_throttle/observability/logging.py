from __future__ import annotations

import logging
from typing import Any, Literal

import structlog

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]

LOGGER_NAME = "fault-throttle"


def configure_logging(*, level: LogLevel = "INFO", json_logs: bool = True) -> None:
    """Route structlog through a level filter and a JSON or console renderer.

    Rejections are logged at DEBUG; at INFO only lifecycle events show up.
    """

    numeric_level = getattr(logging, level)
    logging.basicConfig(level=numeric_level, format="%(message)s")

    renderer: structlog.types.Processor = (
        structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str = LOGGER_NAME, **initial: Any) -> structlog.stdlib.BoundLogger:
    logger = structlog.get_logger(name)
    return logger.bind(**initial) if initial else logger
