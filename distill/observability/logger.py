"""
Logger configuration.

Configures stdout logging with ISO timestamps and the current correlation
ID on every record.

Dependencies: logging (stdlib)
System role: Centralized logging configuration
"""

import logging
import sys

from distill.observability.correlation import get_correlation_id

NOISY_LOGGERS = ("urllib3", "botocore", "httpx", "httpcore", "sqlalchemy.engine", "aiosqlite", "asyncio")


class CorrelationIdFilter(logging.Filter):
    """Attach the active correlation ID to each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = get_correlation_id() or "-"
        return True


def configure_logging(level: str = "INFO") -> None:
    """
    Configure root logging.

    Args:
        level: Root log level name
    """
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(logging.DEBUG)
    handler.addFilter(CorrelationIdFilter())
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - [%(correlation_id)s] %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    )

    root_logger.setLevel(level.upper())
    root_logger.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)