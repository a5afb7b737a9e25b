"""
Pytest fixtures for the orders reporting test suite.

Provides:
- Structured logging configuration and log capture
- Deterministic clock
- The reference fiscal years and orders (three orders over 2020-2022)
- An in-memory SQLite session for selector tests
"""

import json
import logging
from datetime import datetime, timezone
from io import StringIO

import pytest

from orders_kernel.domain.clock import DeterministicClock
from orders_kernel.domain.sources import InMemoryFiscalYearSource, InMemoryOrderSource
from orders_kernel.domain.values import FiscalYear, FiscalYearStatus, Order
from orders_kernel.logging_config import (
    LogContext,
    StructuredFormatter,
    configure_logging,
    reset_logging,
)
from tests.factories import make_line, make_order


# =============================================================================
# Logging fixtures
# =============================================================================


@pytest.fixture(autouse=True, scope="session")
def _configure_test_logging():
    """Configure structured logging for the test suite."""
    reset_logging()
    configure_logging(level=logging.DEBUG, stream=StringIO())
    yield
    reset_logging()


@pytest.fixture(autouse=True)
def _clear_log_context():
    """Clear LogContext between tests to prevent cross-test contamination."""
    LogContext.clear()
    yield
    LogContext.clear()


@pytest.fixture
def captured_logs():
    """
    Capture orders_kernel logs as parsed JSON dicts.

    Usage::

        def test_something(captured_logs, reporting_service):
            reporting_service.current_open_fiscal_year()
            logs = captured_logs()
            assert any(r["message"] == "open_fiscal_year_resolved" for r in logs)
    """
    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(StructuredFormatter())
    root = logging.getLogger("orders_kernel")
    previous_level = root.level
    root.setLevel(logging.DEBUG)
    root.addHandler(handler)

    def _get_records() -> list[dict]:
        lines = stream.getvalue().strip().split("\n")
        return [json.loads(line) for line in lines if line]

    yield _get_records

    root.removeHandler(handler)
    root.setLevel(previous_level)


# =============================================================================
# Clock
# =============================================================================


@pytest.fixture
def deterministic_clock() -> DeterministicClock:
    return DeterministicClock(datetime(2022, 6, 30, 12, 0, 0, tzinfo=timezone.utc))


# =============================================================================
# Reference data
# =============================================================================


@pytest.fixture
def reference_fiscal_years() -> list[FiscalYear]:
    """2019-2023, with 2022 the single OPEN fiscal year."""
    return [
        FiscalYear(2023, FiscalYearStatus.IN_PREPARATION),
        FiscalYear(2022, FiscalYearStatus.OPEN),
        FiscalYear(2021, FiscalYearStatus.RESTRICTED),
        FiscalYear(2020, FiscalYearStatus.CLOSED),
        FiscalYear(2019, FiscalYearStatus.CLOSED),
    ]


@pytest.fixture
def reference_orders() -> list[Order]:
    """
    Three orders, one per year 2020-2022.

    Expected pre-tax totals: 2022 -> 11, 2021 -> 5, 2020 -> 48.3.
    """
    created_2022 = datetime(2022, 5, 24, 10, 45)
    return [
        make_order(
            created_2022,
            make_line(4, 2, line_id="ligne11", article_code="art11"),
            make_line(1, 3, line_id="ligne12", article_code="art12"),
            order_number="cde1",
            supplier_code="fou1",
        ),
        make_order(
            created_2022.replace(year=2021),
            make_line(1, 5, line_id="ligne21", article_code="art21"),
            order_number="cde2",
            supplier_code="fou1",
        ),
        make_order(
            created_2022.replace(year=2020),
            make_line(4, 12, line_id="ligne31", article_code="art31"),
            make_line(3, "0.1", line_id="ligne32", article_code="art32"),
            order_number="cde2",
            supplier_code="fou2",
        ),
    ]


@pytest.fixture
def fiscal_year_source(reference_fiscal_years) -> InMemoryFiscalYearSource:
    return InMemoryFiscalYearSource(reference_fiscal_years)


@pytest.fixture
def order_source(reference_orders) -> InMemoryOrderSource:
    return InMemoryOrderSource(reference_orders)


# =============================================================================
# Database
# =============================================================================


@pytest.fixture
def session():
    """Session on a fresh in-memory SQLite database with all tables."""
    from orders_kernel.db.engine import (
        create_tables,
        get_session,
        init_engine_from_url,
        reset_engine,
    )

    init_engine_from_url("sqlite://")
    create_tables()
    db_session = get_session()
    yield db_session
    db_session.close()
    reset_engine()
