"""
Exception hierarchy for the distillation backend.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Transport failures of remote embedding or generation tiers are never raised
through this hierarchy; tiers report them as failure results instead.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class DistillException(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(DistillException):
    """Raised when caller input is malformed (missing required field)."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class SourceNotFoundError(DistillException):
    """Raised when a source cannot be found in the corpus."""

    def __init__(self, source_id: str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["source_id"] = source_id
        super().__init__(f"Source not found: {source_id}", details)


class EmbeddingError(DistillException):
    """Raised when vectors cannot be produced or are inconsistent."""

    pass


class VectorStoreError(DistillException):
    """Raised when vector store operations fail."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize vector store error.

        Args:
            message: Error message
            operation: Operation that failed (upsert, query, count, reset)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)

