"""
Tests for structured logging, masking and correlation context.
"""

# Standard library imports
import json
import logging
import sys

# Third-party imports
import pytest
from opentelemetry.sdk.trace import TracerProvider

# Local imports
from src.infrastructure.monitoring.logging import (
    ContextFilter,
    SensitiveDataConfig,
    SensitiveDataMasker,
    StructuredJSONFormatter,
    correlation_context,
    get_correlation_id,
    setup_structured_logging,
)


def _record(message: str = "hello", **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="lessons.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg=message,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestSensitiveDataMasker:
    """Test masking of secrets"""

    def test_masks_key_value_pairs_in_message(self):
        masker = SensitiveDataMasker(SensitiveDataConfig())

        masked = masker.mask_message("calling with api_key=abc123 now")

        assert "abc123" not in masked
        assert "***MASKED***" in masked

    def test_excluded_fields_are_dropped(self):
        masker = SensitiveDataMasker(SensitiveDataConfig())

        assert masker.mask_extra_fields({"password": "hunter2", "user": "bob"}) == {"user": "bob"}

    def test_sensitive_fields_are_masked(self):
        masker = SensitiveDataMasker(SensitiveDataConfig())

        masked = masker.mask_extra_fields({"account_number": "12345", "nested": {"ssn": "1"}})

        assert masked == {"account_number": "***MASKED***", "nested": {"ssn": "***MASKED***"}}


class TestStructuredJSONFormatter:
    """Test JSON log output"""

    def test_basic_fields(self):
        entry = json.loads(StructuredJSONFormatter().format(_record()))

        assert entry["level"] == "INFO"
        assert entry["logger"] == "lessons.test"
        assert entry["message"] == "hello"
        assert entry["line"] == 10
        assert "extra" not in entry

    def test_extra_fields_are_serialized(self):
        from decimal import Decimal

        entry = json.loads(
            StructuredJSONFormatter().format(_record(payee_id="F001", amount=Decimal("1.50")))
        )

        assert entry["extra"] == {"amount": "1.50", "payee_id": "F001"}

    def test_correlation_id_included(self):
        entry = json.loads(StructuredJSONFormatter().format(_record(correlation_id="abc")))

        assert entry["correlation_id"] == "abc"

    def test_exception_info(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = _record()
            record.exc_info = sys.exc_info()

        entry = json.loads(StructuredJSONFormatter().format(record))

        assert entry["exception"]["type"] == "ValueError"
        assert entry["exception"]["message"] == "boom"


class TestCorrelationContext:
    def test_sets_and_resets(self):
        assert get_correlation_id() is None

        with correlation_context("req-1") as correlation_id:
            assert correlation_id == "req-1"
            assert get_correlation_id() == "req-1"

        assert get_correlation_id() is None

    def test_generates_id(self):
        with correlation_context() as correlation_id:
            assert correlation_id
            assert get_correlation_id() == correlation_id


class TestContextFilter:
    """Test context attached to records"""

    def test_without_span(self):
        record = _record()

        with correlation_context("req-2"):
            assert ContextFilter().filter(record) is True

        assert record.correlation_id == "req-2"
        assert record.trace_id is None
        assert record.span_id is None

    def test_with_recording_span(self):
        tracer = TracerProvider().get_tracer(__name__)
        record = _record()

        with tracer.start_as_current_span("payroll") as span:
            ContextFilter().filter(record)
            span_context = span.get_span_context()

        assert record.trace_id == format(span_context.trace_id, "032x")
        assert record.span_id == format(span_context.span_id, "016x")


class TestSetupStructuredLogging:
    def test_json_output(self, restore_root_logger, capsys):
        setup_structured_logging(level="DEBUG", format_type="json")

        with correlation_context("req-3"):
            logging.getLogger("lessons.payroll").info("Salary: 8000", extra={"payee_id": "I101"})

        lines = [line for line in capsys.readouterr().out.splitlines() if "Salary" in line]
        entry = json.loads(lines[-1])
        assert entry["correlation_id"] == "req-3"
        assert entry["extra"]["payee_id"] == "I101"
        assert restore_root_logger.level == logging.DEBUG

    def test_log_file(self, restore_root_logger, tmp_path):
        log_file = tmp_path / "lessons.log"

        setup_structured_logging(format_type="text", log_file=str(log_file))
        logging.getLogger("lessons.orders").warning("Placing order...")
        for handler in restore_root_logger.handlers:
            handler.flush()

        assert "Placing order..." in log_file.read_text()

    @pytest.mark.parametrize("format_type", ["json", "text"])
    def test_replaces_handlers(self, restore_root_logger, format_type):
        setup_structured_logging(format_type=format_type)
        setup_structured_logging(format_type=format_type)

        assert len(restore_root_logger.handlers) == 1
