"""Composition root for ambient services.

Usage:
    from moneta.core.container import get_logger

    logger = get_logger()
    logger.info("totals_computed", count=3)
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from moneta.core.config import get_settings

if TYPE_CHECKING:
    from moneta.domain.protocols.logger_protocol import LoggerProtocol


@lru_cache
def get_logger() -> "LoggerProtocol":
    """Return the library-scoped logger singleton.

    Adapter selection is centralized here:
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from moneta.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    logger = ConsoleAdapter(
        use_json=not settings.is_development,
        level=settings.log_level,
    )
    return logger.bind(app=settings.app_name, version=settings.app_version)
