"""LoggerProtocol definition for structured logging.

Backend-agnostic port for structured logging. Implementations MUST emit
structured records (message + key-value context).

Log Levels (standard 5-level hierarchy):
    - DEBUG: Detailed diagnostic info
    - INFO: Normal operational events
    - WARNING: Rejected input, degraded behavior
    - ERROR: Operation failed, caller continues
    - CRITICAL: Unrecoverable failure

Usage:
    from moneta.core.container import get_logger
    from moneta.domain.protocols.logger_protocol import LoggerProtocol

    logger: LoggerProtocol = get_logger()
    logger.info("outcome_decoded", kind="mismatch")

    scoped = logger.bind(batch_id=batch_id)
    scoped.warning("amount_rejected", reason="unknown_currency")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    All logging calls MUST be structured: message + key-value context.
    """

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message."""
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
            message: Event name (snake_case; put variable data in context).
            error: Optional exception instance; implementation may include
                error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message with optional exception details."""
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

    def with_context(self, **context: Any) -> LoggerProtocol:
        """Alias for bind()."""
        ...
