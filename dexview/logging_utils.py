"""Structured logging setup for DexView using structlog.

Console output by default; set ``LOG_FORMAT=json`` (or pass ``json_logs=True``)
for one JSON object per line.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any, Optional

import structlog
from structlog.contextvars import merge_contextvars
from structlog.typing import Processor


def configure_logging(log_level: str = "INFO", json_logs: Optional[bool] = None) -> None:
    """Configure structlog over the standard library logging module.

    Args:
        log_level: Minimum level name (e.g., "INFO", "DEBUG").
        json_logs: Render JSON instead of console lines. Defaults to the
            LOG_FORMAT environment variable.
    """
    if json_logs is None:
        json_logs = os.getenv("LOG_FORMAT", "").lower() == "json"

    processors: list[Processor] = [
        merge_contextvars,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.add_log_level,
    ]
    if json_logs:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors += [
            structlog.dev.set_exc_info,
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        ]

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, log_level.upper()),
        force=True,
    )
    # urllib3 is chatty at DEBUG; keep it to warnings.
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def create_logger(name: Optional[str] = None) -> Any:
    """Create a logger with optional name binding.

    Args:
        name: Optional logger name (e.g., "dexview.pipeline").

    Returns:
        A structlog bound logger.
    """
    # Stay a lazy proxy so configuration applied later still takes effect.
    if name:
        return structlog.get_logger(logger_name=name)
    return structlog.get_logger()
