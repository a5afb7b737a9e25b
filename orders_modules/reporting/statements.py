"""
Pure order reporting functions.

These functions turn fiscal-year and order snapshots into report values.
ZERO I/O. ZERO side effects.

Functions in this module follow the orders_kernel/domain/ purity convention:
- No database access
- No clock access
- No file I/O
- Deterministic: same inputs always produce same outputs
- Inputs are never mutated
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Sequence
from datetime import date
from decimal import Decimal
from enum import Enum
from uuid import UUID

from orders_kernel.domain.values import ZERO, FiscalYear, Order
from orders_kernel.exceptions import MultipleOpenFiscalYearsError, NoOpenFiscalYearError
from orders_modules.reporting.models import (
    MultiYearTotalReport,
    ReportMetadata,
    YearTotal,
)

THREE_YEARS = 3


# =========================================================================
# Fiscal year selection
# =========================================================================


def select_open_fiscal_year(fiscal_years: Iterable[FiscalYear]) -> FiscalYear:
    """
    Return the single OPEN fiscal year.

    Raises:
        NoOpenFiscalYearError: when no fiscal year is OPEN.
        MultipleOpenFiscalYearsError: when more than one is OPEN; the
            engine never picks one of them.
    """
    fiscal_years = tuple(fiscal_years)
    open_years = [fy for fy in fiscal_years if fy.is_open]

    if not open_years:
        raise NoOpenFiscalYearError(
            known_years=tuple(sorted(fy.year for fy in fiscal_years))
        )
    if len(open_years) > 1:
        raise MultipleOpenFiscalYearsError(
            open_years=tuple(sorted(fy.year for fy in open_years))
        )
    return open_years[0]


# =========================================================================
# Order aggregation
# =========================================================================


def reporting_window(reference_year: int, span: int = THREE_YEARS) -> tuple[int, ...]:
    """
    The reference year followed by the ``span - 1`` preceding years.

    >>> reporting_window(2022)
    (2022, 2021, 2020)
    """
    if isinstance(reference_year, bool) or not isinstance(reference_year, int):
        raise TypeError(
            f"reference_year must be int, not {type(reference_year).__name__}"
        )
    if span < 1:
        raise ValueError(f"span must be at least 1, got {span}")
    return tuple(reference_year - offset for offset in range(span))


def total_before_tax_by_year(
    orders: Iterable[Order],
    years: Sequence[int],
) -> dict[int, Decimal]:
    """
    Sum the pre-tax totals of ``orders`` per fiscal year.

    Every year of ``years`` is a key, zero when no order matches; orders
    created in any other year are ignored. Keys keep the order of
    ``years``.
    """
    totals: dict[int, Decimal] = {year: ZERO for year in years}
    for order in orders:
        year = order.fiscal_year
        if year in totals:
            totals[year] += order.total_before_tax
    return totals


def count_orders_by_year(
    orders: Iterable[Order],
    years: Sequence[int],
) -> dict[int, int]:
    """Number of orders per fiscal year of ``years``."""
    counts: dict[int, int] = {year: 0 for year in years}
    for order in orders:
        if order.fiscal_year in counts:
            counts[order.fiscal_year] += 1
    return counts


def build_multi_year_report(
    orders: Sequence[Order],
    years: Sequence[int],
    metadata: ReportMetadata,
) -> MultiYearTotalReport:
    """
    Build the multi-year pre-tax total report.

    ``years[0]`` is the reference year.
    """
    if not years:
        raise ValueError("years cannot be empty")
    totals = total_before_tax_by_year(orders, years)
    counts = count_orders_by_year(orders, years)
    rows = tuple(
        YearTotal(year=year, total_before_tax=totals[year], order_count=counts[year])
        for year in years
    )
    return MultiYearTotalReport(
        metadata=metadata,
        reference_year=years[0],
        years=rows,
        grand_total=sum((row.total_before_tax for row in rows), ZERO),
    )


# =========================================================================
# Rendering
# =========================================================================


def render_to_dict(obj: object) -> dict | list | str | int | float | bool | None:
    """
    Convert any report dataclass to a plain dict for JSON serialization.

    Handles:
    - Decimal -> str (preserving precision)
    - UUID -> str
    - date/datetime -> ISO format string
    - Enum -> .value
    - Nested frozen dataclasses -> nested dicts
    - Tuples -> lists
    - None preserved
    """
    if obj is None:
        return None
    if isinstance(obj, Decimal):
        return str(obj)
    if isinstance(obj, UUID):
        return str(obj)
    if isinstance(obj, date):
        return obj.isoformat()
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, (list, tuple)):
        return [render_to_dict(item) for item in obj]
    if isinstance(obj, dict):
        return {str(k): render_to_dict(v) for k, v in obj.items()}
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {
            f.name: render_to_dict(getattr(obj, f.name))
            for f in dataclasses.fields(obj)
        }
    if isinstance(obj, (str, int, float, bool)):
        return obj
    return str(obj)
