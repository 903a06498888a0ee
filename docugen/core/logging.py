"""
DocuGen - Structured Logging
============================

Configures structlog on top of the stdlib logging module. Modules only ever
call ``structlog.get_logger(__name__)``; the host application calls
``configure_logging()`` once at startup.
"""

import logging
import sys
from typing import Optional

import structlog

from .config import settings


def configure_logging(level: Optional[str] = None, json_format: Optional[bool] = None) -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        level: Log level name, defaults to ``settings.LOG_LEVEL``
        json_format: Render JSON lines instead of console output,
            defaults to ``settings.LOG_FORMAT == "json"``
    """
    level = (level or settings.LOG_LEVEL).upper()
    if json_format is None:
        json_format = settings.LOG_FORMAT == "json"

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level, force=True)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer() if json_format
            else structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
