"""Structured logging setup."""
import logging
from typing import Optional

import structlog

from mundipagg.config import settings
from mundipagg.infrastructure.redaction import JsonRedactor


def configure_logging(level: Optional[str] = None, redactor: Optional[JsonRedactor] = None) -> None:
    """Configure structlog on top of stdlib logging.

    Every event passes through the block-list redactor before rendering.
    """
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
            redactor or JsonRedactor(),
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, (level or settings.log_level).upper()),
    )
