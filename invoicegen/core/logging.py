"""Structured logging setup.

Library modules log through ``logging.getLogger(__name__)``; the CLI uses
``structlog.get_logger()``. Both end up on stdout, rendered as JSON when
``json_logs`` is set and as coloured console lines otherwise.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Any

import structlog

LOG_FILE = Path("logs/invoicegen.log")


def _renderer(json_logs: bool) -> Any:
    if json_logs:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def configure_logging(level: str | None = None, json_logs: bool | None = None) -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        level: Log level name; falls back to LOG_LEVEL, then INFO
        json_logs: Render JSON lines; falls back to JSON_LOGS=true
    """
    if level is None:
        level = os.getenv("LOG_LEVEL", "INFO")
    if json_logs is None:
        json_logs = os.getenv("JSON_LOGS", "false").lower() == "true"

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            _renderer(json_logs),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    # Only log to file when the logs/ directory has been created
    if LOG_FILE.parent.exists():
        handlers.append(logging.FileHandler(LOG_FILE))

    logging.basicConfig(format="%(message)s", handlers=handlers, level=level.upper())
