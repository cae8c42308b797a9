"""LoggerProtocol definition for structured logging.

Standardizes structured logging across the codebase while remaining
backend-agnostic. Implementations MUST emit structured (key-value) logs.

Context Binding:
    Use bind() to create scoped loggers whose context (entity, operation,
    trace_id) is automatically included in all subsequent logs.

Security:
    - NEVER log tokens or secret keys
    - Raw storage exceptions are logged here and nowhere else; callers
      only ever see the classified error

Usage:
    from entitygate.core.container import get_logger

    logger = get_logger()
    logger.info("Entity created", entity="TodoItem", entity_id=7)

    scoped = logger.bind(entity="TodoItem", operation="write")
    scoped.warning("Guard denied", error_code="unauthorized")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters."""

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message.

        Args:
            message: Human-readable message (avoid f-strings; use context).
            **context: Structured key-value context fields.
        """
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Human-readable message (avoid f-strings; use context).
            error: Optional exception instance; implementation may include
                error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return new logger with permanently bound context.

        Original logger instance remains unchanged.

        Args:
            **context: Context to bind to all future logs.

        Returns:
            New logger instance with bound context.
        """
        ...
