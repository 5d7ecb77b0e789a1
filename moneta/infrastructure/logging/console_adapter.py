"""structlog-backed console adapter for LoggerProtocol.

Records are written to a text stream (stdout unless told otherwise) and
filtered at a minimum level. Rendering is chosen once, at construction:

    ConsoleAdapter(use_json=False)   # key=value lines with colors
    ConsoleAdapter(use_json=True)    # one JSON object per line

Structural implementation of LoggerProtocol; no inheritance.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

import structlog


def build_processors(*, use_json: bool) -> list[Any]:
    """Processor chain: level name, UTC timestamp, then the renderer."""
    renderer = (
        structlog.processors.JSONRenderer()
        if use_json
        else structlog.dev.ConsoleRenderer(colors=True)
    )
    return [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        renderer,
    ]


class ConsoleAdapter:
    """Structured console logger.

    Args:
        use_json: Render JSON lines instead of human-readable output.
        level: Lowest level name emitted (case-insensitive, default INFO).
        stream: Destination for rendered records (default: stdout).

    Raises:
        KeyError: If level is not a standard logging level name.
    """

    def __init__(
        self,
        *,
        use_json: bool = False,
        level: str = "INFO",
        stream: TextIO | None = None,
    ) -> None:
        threshold = logging.getLevelNamesMapping()[level.upper()]
        structlog.configure(
            processors=build_processors(use_json=use_json),
            wrapper_class=structlog.make_filtering_bound_logger(threshold),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=stream or sys.stdout),
            cache_logger_on_first_use=True,
        )
        self._logger = structlog.get_logger()

    @classmethod
    def _wrapping(cls, logger: Any) -> ConsoleAdapter:
        adapter = cls.__new__(cls)
        adapter._logger = logger
        return adapter

    def _emit(
        self,
        method: str,
        message: str,
        error: BaseException | None,
        context: dict[str, Any],
    ) -> None:
        if error is not None:
            context.update(error_type=type(error).__name__, error_message=str(error))
        getattr(self._logger, method)(message, **context)

    def debug(self, message: str, /, **context: Any) -> None:
        self._emit("debug", message, None, context)

    def info(self, message: str, /, **context: Any) -> None:
        self._emit("info", message, None, context)

    def warning(self, message: str, /, **context: Any) -> None:
        self._emit("warning", message, None, context)

    def error(
        self, message: str, /, *, error: BaseException | None = None, **context: Any
    ) -> None:
        """Log at ERROR; ``error`` adds ``error_type`` and ``error_message``."""
        self._emit("error", message, error, context)

    def critical(
        self, message: str, /, *, error: BaseException | None = None, **context: Any
    ) -> None:
        """Log at CRITICAL; ``error`` adds ``error_type`` and ``error_message``."""
        self._emit("critical", message, error, context)

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Return a new adapter whose records all carry ``context``."""
        return self._wrapping(self._logger.bind(**context))

    with_context = bind
