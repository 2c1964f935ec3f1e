"""Structured logging for devis.

structlog renders events (``project_saved``, ``negative_room_surface``...)
through the standard library handlers: stdout always, plus a rotating file
outside of test runs. Calculators never log; services do.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Any

import structlog

from devis.core.settings import get_settings

_configured: bool = False


def _build_handlers(log_file: str) -> list[logging.Handler]:
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if not log_file or os.environ.get("PYTEST_CURRENT_TEST"):
        return handlers

    path = Path(log_file)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            logging.handlers.RotatingFileHandler(
                str(path), maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"
            )
        )
    except OSError:
        # read-only checkout
        pass
    return handlers


def _build_processors(json_output: bool) -> list[Any]:
    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    return [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
        renderer,
    ]


def configure_logging(
    level: str | None = None,
    json_output: bool | None = None,
) -> structlog.BoundLogger:
    """Configure structlog once for the process.

    Args:
        level: Log level name. Defaults to DEVIS_LOG_LEVEL.
        json_output: JSON lines instead of console output. Defaults to
            DEVIS_JSON_LOGS.

    Returns:
        Root bound logger
    """
    global _configured

    if not _configured:
        settings = get_settings()
        level_name = (level or settings.log_level).upper()
        logging.basicConfig(
            format="%(message)s",
            level=getattr(logging, level_name, logging.INFO),
            handlers=_build_handlers(settings.log_file),
            force=True,
        )
        structlog.configure(
            processors=_build_processors(settings.json_logs if json_output is None else json_output),
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        _configured = True

    return structlog.get_logger()


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Logger bound to `name`, configuring logging on first use."""
    logger = configure_logging()
    return logger.bind(logger_name=name) if name else logger
