"""Structured logging for the rent ledger, built on structlog over stdlib logging.

Ledger events carry money, dates and categories. ``render_ledger_values``
flattens those to plain strings before rendering, so JSON lines read
``"rate": "130.00"`` and ``"start": "2024-03-01"`` instead of Python reprs.
"""

import logging
import os
from datetime import date
from decimal import Decimal
from enum import Enum

import structlog
from structlog.types import EventDict, WrappedLogger


def render_ledger_values(_logger: WrappedLogger, _method: str, event_dict: EventDict) -> EventDict:
    """Render Decimal, date and Enum values in ``event_dict`` as strings."""
    for key, value in event_dict.items():
        if isinstance(value, Decimal):
            event_dict[key] = str(value)
        elif isinstance(value, date):
            event_dict[key] = value.isoformat()
        elif isinstance(value, Enum):
            event_dict[key] = value.value
    return event_dict


def setup_logging(log_level: str = "INFO", log_format: str | None = None) -> None:
    """Configure structlog and route it through the stdlib root logger.

    ``log_format`` ("json" or "console") overrides the LOG_FORMAT
    environment variable; console is the default.
    """
    fmt = (log_format or os.environ.get("LOG_FORMAT", "console")).lower()

    shared: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        render_ledger_values,
        structlog.processors.format_exc_info,
    ]

    renderer: structlog.types.Processor = (
        structlog.processors.JSONRenderer() if fmt == "json" else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler()
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(getattr(logging, log_level.upper(), logging.INFO))


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)
