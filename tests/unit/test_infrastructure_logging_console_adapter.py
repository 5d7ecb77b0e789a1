"""Unit tests for ConsoleAdapter (structured console logging).

Tests cover:
- LoggerProtocol methods (debug, info, warning, error, critical)
- Exception details on error and critical
- Context binding
- structlog configuration (renderer, level filtering, stream)
- Rendered JSON output

Architecture:
- Unit tests with mocked structlog, plus real output to an in-memory stream
"""

import io
import json
import logging
from unittest.mock import MagicMock, patch

import pytest

from moneta.domain.protocols.logger_protocol import LoggerProtocol
from moneta.infrastructure.logging.console_adapter import ConsoleAdapter


@pytest.fixture
def mock_structlog():
    """Patch structlog inside the adapter module."""
    with patch("moneta.infrastructure.logging.console_adapter.structlog") as mocked:
        mocked.get_logger.return_value = MagicMock()
        yield mocked


@pytest.mark.unit
class TestConsoleAdapterLogging:
    """Test ConsoleAdapter logging methods."""

    @pytest.mark.parametrize("level", ["debug", "info", "warning", "error", "critical"])
    def test_level_methods_forward_context(self, mock_structlog, level):
        """Test each level method forwards message and context unchanged."""
        adapter = ConsoleAdapter()
        getattr(adapter, level)("outcome_computed", currency="EUR", count=3)

        getattr(mock_structlog.get_logger.return_value, level).assert_called_once_with(
            "outcome_computed", currency="EUR", count=3
        )

    def test_logs_with_no_context(self, mock_structlog):
        """Test logging with no additional context."""
        ConsoleAdapter().info("amounts_loaded")

        mock_structlog.get_logger.return_value.info.assert_called_once_with(
            "amounts_loaded"
        )

    def test_error_adds_exception_details(self, mock_structlog):
        """Test error() records the exception type and message."""
        adapter = ConsoleAdapter()
        adapter.error("total_failed", error=ValueError("bad amount"), batch="b-1")

        mock_structlog.get_logger.return_value.error.assert_called_once_with(
            "total_failed",
            batch="b-1",
            error_type="ValueError",
            error_message="bad amount",
        )

    def test_critical_adds_exception_details(self, mock_structlog):
        """Test critical() records the exception type and message."""
        adapter = ConsoleAdapter()
        adapter.critical("ledger_unreadable", error=RuntimeError("disk"))

        mock_structlog.get_logger.return_value.critical.assert_called_once_with(
            "ledger_unreadable",
            error_type="RuntimeError",
            error_message="disk",
        )

    def test_error_without_exception(self, mock_structlog):
        """Test error() without an exception adds no details."""
        ConsoleAdapter().error("currency_mismatch", first="EUR", second="USD")

        mock_structlog.get_logger.return_value.error.assert_called_once_with(
            "currency_mismatch", first="EUR", second="USD"
        )


@pytest.mark.unit
class TestConsoleAdapterContextBinding:
    """Test ConsoleAdapter context binding methods."""

    def test_bind_returns_new_adapter_with_bound_logger(self, mock_structlog):
        """Test bind() wraps the bound structlog logger in a new adapter."""
        mock_logger = mock_structlog.get_logger.return_value
        adapter = ConsoleAdapter()

        bound = adapter.bind(app="moneta", version="0.1.0")

        mock_logger.bind.assert_called_once_with(app="moneta", version="0.1.0")
        assert bound is not adapter
        assert bound._logger == mock_logger.bind.return_value

    def test_with_context_is_bind(self, mock_structlog):
        """Test with_context() binds like bind()."""
        mock_logger = mock_structlog.get_logger.return_value
        bound = ConsoleAdapter().with_context(request_id="req-1")

        mock_logger.bind.assert_called_once_with(request_id="req-1")
        assert isinstance(bound, ConsoleAdapter)

    def test_bound_context_used_for_later_logs(self, mock_structlog):
        """Test logs from a bound adapter go through the bound logger."""
        mock_bound = mock_structlog.get_logger.return_value.bind.return_value
        bound = ConsoleAdapter().bind(app="moneta")

        bound.info("first")
        bound.warning("second", reason="rounding")

        mock_bound.info.assert_called_once_with("first")
        mock_bound.warning.assert_called_once_with("second", reason="rounding")


@pytest.mark.unit
class TestConsoleAdapterConfiguration:
    """Test structlog configuration."""

    def test_json_renderer_when_requested(self, mock_structlog):
        """Test use_json selects the JSON renderer."""
        ConsoleAdapter(use_json=True)

        processors = mock_structlog.configure.call_args.kwargs["processors"]
        assert processors[-1] is mock_structlog.processors.JSONRenderer.return_value
        mock_structlog.dev.ConsoleRenderer.assert_not_called()

    def test_console_renderer_by_default(self, mock_structlog):
        """Test human-readable rendering is the default."""
        ConsoleAdapter()

        processors = mock_structlog.configure.call_args.kwargs["processors"]
        assert processors[-1] is mock_structlog.dev.ConsoleRenderer.return_value
        mock_structlog.processors.JSONRenderer.assert_not_called()

    def test_level_filtering(self, mock_structlog):
        """Test the level name is converted to its numeric value."""
        ConsoleAdapter(level="warning")

        mock_structlog.make_filtering_bound_logger.assert_called_once_with(
            logging.WARNING
        )

    def test_satisfies_logger_protocol(self, mock_structlog):
        """Test the adapter structurally implements LoggerProtocol."""
        adapter = ConsoleAdapter()
        for name in ("debug", "info", "warning", "error", "critical", "bind", "with_context"):
            assert hasattr(LoggerProtocol, name)
            assert callable(getattr(adapter, name))

    def test_stream_passed_to_factory(self, mock_structlog):
        """Test records go to the requested stream."""
        stream = io.StringIO()
        ConsoleAdapter(stream=stream)

        mock_structlog.PrintLoggerFactory.assert_called_once_with(file=stream)

    def test_unknown_level_rejected(self, mock_structlog):
        """Test a non-standard level name fails at construction."""
        with pytest.raises(KeyError):
            ConsoleAdapter(level="LOUD")


@pytest.mark.unit
class TestConsoleAdapterOutput:
    """Test rendered output with real structlog."""

    def test_json_record_written_to_stream(self):
        """Test a JSON record carries event, level and context."""
        stream = io.StringIO()
        adapter = ConsoleAdapter(use_json=True, stream=stream)

        adapter.bind(app="moneta").warning("amount_decode_failed", error_count=2)

        record = json.loads(stream.getvalue().strip())
        assert record["event"] == "amount_decode_failed"
        assert record["level"] == "warning"
        assert record["error_count"] == 2
        assert record["app"] == "moneta"

    def test_records_below_level_dropped(self):
        """Test records under the threshold are not written."""
        stream = io.StringIO()
        adapter = ConsoleAdapter(use_json=True, level="WARNING", stream=stream)

        adapter.info("outcome_computed")

        assert stream.getvalue() == ""
