"""Tests for the structured logging system (orders_kernel/logging_config.py)."""

import json
import logging
from datetime import datetime
from decimal import Decimal
from io import StringIO
from uuid import uuid4

import pytest

from orders_kernel.logging_config import (
    LogContext,
    StructuredFormatter,
    configure_logging,
    get_logger,
    reset_logging,
)


@pytest.fixture(autouse=True)
def _clean_logging():
    """Reset logging state between tests."""
    reset_logging()
    LogContext.clear()
    yield
    LogContext.clear()
    reset_logging()


def _make_handler() -> tuple[logging.Handler, StringIO]:
    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(StructuredFormatter())
    return handler, stream


def _parse_log(stream: StringIO) -> dict:
    """Parse the first JSON log line from a stream."""
    line = stream.getvalue().strip().split("\n")[0]
    return json.loads(line)


def _parse_all_logs(stream: StringIO) -> list[dict]:
    lines = stream.getvalue().strip().split("\n")
    return [json.loads(line) for line in lines if line]


# ---------------------------------------------------------------------------
# StructuredFormatter tests
# ---------------------------------------------------------------------------


class TestStructuredFormatter:
    def test_basic_json_output(self):
        handler, stream = _make_handler()
        configure_logging(handler=handler)
        get_logger("test").info("hello")

        record = _parse_log(stream)
        assert record["level"] == "INFO"
        assert record["message"] == "hello"
        assert record["logger"] == "orders_kernel.test"
        assert "ts" in record

    def test_extra_fields_included(self):
        handler, stream = _make_handler()
        configure_logging(handler=handler)
        get_logger("test").info("open_fiscal_year_resolved", extra={"year": 2022})

        assert _parse_log(stream)["year"] == 2022

    def test_context_fields_included(self):
        handler, stream = _make_handler()
        configure_logging(handler=handler)
        with LogContext.bind(correlation_id="abc-123", report_id="rep-1"):
            get_logger("test").info("test_msg")

        record = _parse_log(stream)
        assert record["correlation_id"] == "abc-123"
        assert record["report_id"] == "rep-1"

    def test_no_context_fields_when_empty(self):
        handler, stream = _make_handler()
        configure_logging(handler=handler)
        get_logger("test").info("bare_message")

        record = _parse_log(stream)
        assert "correlation_id" not in record
        assert "report_id" not in record

    def test_exception_fields(self):
        handler, stream = _make_handler()
        configure_logging(handler=handler)
        try:
            raise ValueError("boom")
        except ValueError:
            get_logger("test").error("failed", exc_info=True)

        record = _parse_log(stream)
        assert record["exc_type"] == "ValueError"
        assert record["exc_message"] == "boom"
        assert "traceback" in record

    def test_kernel_exception_code_and_fields_extracted(self):
        from orders_kernel.exceptions import MultipleOpenFiscalYearsError

        handler, stream = _make_handler()
        configure_logging(handler=handler)
        try:
            raise MultipleOpenFiscalYearsError((2022, 2023))
        except MultipleOpenFiscalYearsError:
            get_logger("test").error("fiscal_year_error", exc_info=True)

        record = _parse_log(stream)
        assert record["exc_code"] == "MULTIPLE_OPEN_FISCAL_YEARS"
        assert record["exc_type"] == "MultipleOpenFiscalYearsError"
        assert record["exc_open_years"] == [2022, 2023]

    def test_uuid_decimal_and_datetime_serialized(self):
        handler, stream = _make_handler()
        configure_logging(handler=handler)
        uid = uuid4()
        get_logger("test").info(
            "typed_values",
            extra={
                "report_uuid": uid,
                "total": Decimal("48.3"),
                "generated_at": datetime(2022, 6, 30, 12, 0),
            },
        )

        record = _parse_log(stream)
        assert record["report_uuid"] == str(uid)
        assert record["total"] == "48.3"
        assert record["generated_at"] == "2022-06-30T12:00:00"

    def test_valid_json_every_line(self):
        handler, stream = _make_handler()
        configure_logging(handler=handler)
        logger = get_logger("test")
        logger.info("first")
        logger.warning("second", extra={"k": "v"})
        logger.debug("third")

        logs = _parse_all_logs(stream)
        # default level is INFO, so the debug record is dropped
        assert len(logs) == 2
        for record in logs:
            assert {"ts", "level", "logger", "message"} <= set(record)


# ---------------------------------------------------------------------------
# LogContext tests
# ---------------------------------------------------------------------------


class TestLogContext:
    def test_nothing_bound_by_default(self):
        assert LogContext.get_all() == {}

    def test_bind_sets_and_restores(self):
        with LogContext.bind(correlation_id="run-1", report_id="rep-1"):
            assert LogContext.get_all() == {"correlation_id": "run-1", "report_id": "rep-1"}
        assert LogContext.get_all() == {}

    def test_nested_bind_restores_outer_value(self):
        with LogContext.bind(correlation_id="outer"):
            with LogContext.bind(correlation_id="inner", report_id="rep-2"):
                assert LogContext.get_all() == {"correlation_id": "inner", "report_id": "rep-2"}
            assert LogContext.get_all() == {"correlation_id": "outer"}

    def test_bind_restores_on_error(self):
        with pytest.raises(RuntimeError):
            with LogContext.bind(report_id="rep-3"):
                raise RuntimeError("report failed")
        assert LogContext.get_all() == {}

    def test_none_values_are_skipped(self):
        with LogContext.bind(correlation_id=None, report_id="rep-4"):
            assert LogContext.get_all() == {"report_id": "rep-4"}

    def test_unknown_field_rejected(self):
        with pytest.raises(KeyError):
            with LogContext.bind(actor_id="someone"):
                pass

    def test_clear(self):
        with LogContext.bind(correlation_id="run-5"):
            LogContext.clear()
            assert LogContext.get_all() == {}


# ---------------------------------------------------------------------------
# configure_logging tests
# ---------------------------------------------------------------------------


class TestConfigureLogging:
    def test_idempotent(self):
        h1, _ = _make_handler()
        configure_logging(handler=h1)
        h2, _ = _make_handler()
        configure_logging(handler=h2)  # no-op
        assert len(logging.getLogger("orders_kernel").handlers) == 1

    def test_get_logger_returns_child(self):
        logger = get_logger("modules.reporting.service")
        assert logger.name == "orders_kernel.modules.reporting.service"

    def test_logger_hierarchy(self):
        handler, stream = _make_handler()
        configure_logging(handler=handler, level=logging.DEBUG)
        get_logger("deep.nested.module").debug("hierarchy_test")

        record = _parse_log(stream)
        assert record["message"] == "hierarchy_test"
        assert record["logger"] == "orders_kernel.deep.nested.module"

    def test_reset_allows_reconfiguration(self):
        h1, _ = _make_handler()
        configure_logging(handler=h1)
        reset_logging()
        h2, stream = _make_handler()
        configure_logging(handler=h2)
        get_logger("test").info("after_reset")

        assert _parse_log(stream)["message"] == "after_reset"
