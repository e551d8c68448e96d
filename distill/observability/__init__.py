"""
Observability module.

Structured logging, correlation ID tracking and request middleware.
"""

from distill.observability.correlation import get_correlation_id, set_correlation_id
from distill.observability.logger import configure_logging

__all__ = ["configure_logging", "get_correlation_id", "set_correlation_id"]
