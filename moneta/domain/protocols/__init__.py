"""Domain protocols (ports)."""

from moneta.domain.protocols.logger_protocol import LoggerProtocol

__all__ = ["LoggerProtocol"]
