"""
Order Reporting Domain Models (``orders_modules.reporting.models``).

Responsibility
--------------
Frozen dataclass value objects for reporting outputs: report metadata,
per-year pre-tax totals, and the multi-year total report.

Architecture position
---------------------
**Modules layer** -- pure data definitions with ZERO I/O.

Invariants enforced
-------------------
* All models are ``frozen=True``.
* All monetary fields use ``Decimal`` -- NEVER ``float``.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class ReportType(str, Enum):
    """Types of order reports."""

    MULTI_YEAR_TOTAL = "multi_year_total"


@dataclass(frozen=True)
class ReportMetadata:
    """Metadata attached to every report."""

    report_type: ReportType
    entity_name: str
    currency: str
    generated_at: str  # ISO format timestamp from injected clock
    reference_year: int | None = None
    window_years: int | None = None
    report_id: str | None = None  # also bound as the report_id log field


@dataclass(frozen=True)
class YearTotal:
    """Pre-tax total of the orders created in one fiscal year."""

    year: int
    total_before_tax: Decimal
    order_count: int


@dataclass(frozen=True)
class MultiYearTotalReport:
    """
    Pre-tax totals for a reference year and the preceding years.

    ``years`` is ordered from the reference year backwards and covers every
    year of the window, empty years included.
    """

    metadata: ReportMetadata
    reference_year: int
    years: tuple[YearTotal, ...]
    grand_total: Decimal

    def as_mapping(self) -> dict[int, Decimal]:
        return {row.year: row.total_before_tax for row in self.years}
