"""Logging configuration."""

import logging
import sys

import structlog

from robopay.core.config import settings

STANDARD_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def build_json_formatter() -> logging.Formatter:
    """Formatter rendering stdlib records as one JSON object per line."""
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ],
    )


def setup_logging(
    level: str | None = None,
    log_format: str | None = None,
) -> None:
    """Configure root logger from settings.

    Explicit arguments override LOG_LEVEL / LOG_FORMAT.
    """
    level = (level or settings.log_level).upper()
    log_format = log_format or settings.log_format

    handler = logging.StreamHandler(sys.stdout)
    if log_format == "json":
        handler.setFormatter(build_json_formatter())
    else:
        handler.setFormatter(logging.Formatter(STANDARD_FORMAT))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Get module logger."""
    return logging.getLogger(name)
