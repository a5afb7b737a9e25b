"""
Reporting-specific test fixtures.

Provides:
- ReportingConfig with defaults
- ReportingService wired to the reference in-memory sources
"""

import pytest

from orders_modules.reporting.config import ReportingConfig
from orders_modules.reporting.service import ReportingService


@pytest.fixture
def reporting_config() -> ReportingConfig:
    """Standard reporting configuration for tests."""
    return ReportingConfig.with_defaults()


@pytest.fixture
def reporting_service(
    fiscal_year_source,
    order_source,
    deterministic_clock,
    reporting_config,
) -> ReportingService:
    """ReportingService over the reference fiscal years and orders."""
    return ReportingService(
        fiscal_years=fiscal_year_source,
        orders=order_source,
        clock=deterministic_clock,
        config=reporting_config,
    )
