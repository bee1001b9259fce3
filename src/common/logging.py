"""Structured logging setup shared by the web app and the CLI.

``setup_logging`` configures structlog once per process. ``get_logger`` is
safe to call at import time; loggers are bound lazily so the configuration
applied later still takes effect.
"""

from __future__ import annotations

import logging
import sys

from typing import Any

import structlog


_configured = False


def setup_logging(level: str = "INFO", json_format: bool = False) -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ...)
        json_format: Render JSON lines instead of the coloured console output
    """
    global _configured

    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
        force=True,
    )

    renderer: Any
    if json_format:
        renderer = structlog.processors.JSONRenderer(ensure_ascii=False)
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    _configured = True


def is_configured() -> bool:
    return _configured


def get_logger(name: str | None = None) -> Any:
    """Return a structlog logger bound to ``name``."""
    return structlog.get_logger(name)


def mask_dni(dni: str | None) -> str:
    """Mask a DNI for log output, keeping only the last four digits."""
    if not dni:
        return ""
    if len(dni) <= 4:
        return "*" * len(dni)
    return "*" * (len(dni) - 4) + dni[-4:]
