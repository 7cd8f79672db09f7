from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


def _stderr_logger(*args: Any) -> structlog.PrintLogger:
    # sys.stderr is looked up per logger instance
    return structlog.PrintLogger(file=sys.stderr)


def configure_logging(level: int = logging.INFO, *, json_logs: bool = True) -> None:
    """Route structlog output to stderr, keeping stdout for command output.

    Args:
        level: Minimum level emitted.
        json_logs: Render JSON lines; a coloured console format otherwise.
    """
    logging.basicConfig(format="%(message)s", level=level, stream=sys.stderr)
    renderer = structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=_stderr_logger,
        cache_logger_on_first_use=True,
    )


def get_logger(**initial_values: Any) -> structlog.BoundLogger:
    return structlog.get_logger().bind(**initial_values)


__all__ = ["configure_logging", "get_logger"]
