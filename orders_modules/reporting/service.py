"""
Order Reporting Service (``orders_modules.reporting.service``).

Responsibility
--------------
The reporting engine: answers which fiscal year is currently open and
what the pre-tax total of orders is for a reference fiscal year and the
preceding years.  Bridges the two read ports (``FiscalYearSource``,
``OrderSource``) to the pure functions in ``statements.py``.

Architecture position
---------------------
**Modules layer** -- read-only service.  Constructor: the two read ports
+ ``clock`` + ``config``.  Production backings (YAML fixtures, database
selectors) are injected, never hard-coded.

Invariants enforced
-------------------
* Read-only -- nothing is created, mutated or deleted.
* Each call performs at most one ``find_all()`` per read port; nothing is
  cached between calls, so the service is stateless and reentrant.
* All monetary amounts use ``Decimal`` -- NEVER ``float``.
* The three-year total always has exactly three keys.

Failure modes
-------------
* No OPEN fiscal year  -> ``NoOpenFiscalYearError``.
* Several OPEN fiscal years  -> ``MultipleOpenFiscalYearsError``.
* Read port failure  -> exception propagates unchanged.
* Non-integer reference year  -> ``TypeError`` before any read.
"""

from __future__ import annotations

from decimal import Decimal
from uuid import uuid4

from orders_kernel.domain.clock import Clock, SystemClock
from orders_kernel.domain.sources import FiscalYearSource, OrderSource
from orders_kernel.exceptions import FiscalYearError
from orders_kernel.logging_config import LogContext, get_logger

from orders_modules.reporting.config import ReportingConfig
from orders_modules.reporting.models import (
    MultiYearTotalReport,
    ReportMetadata,
    ReportType,
)
from orders_modules.reporting.statements import (
    THREE_YEARS,
    build_multi_year_report,
    reporting_window,
    select_open_fiscal_year,
    total_before_tax_by_year,
)

logger = get_logger("modules.reporting.service")


class ReportingService:
    """
    Fiscal-year and order reporting service.

    Contract
    --------
    * ``current_open_fiscal_year()`` returns the year of the single OPEN
      fiscal year.
    * ``total_before_tax_over_three_years(R)`` returns
      ``{R: ..., R-1: ..., R-2: ...}``, zero for empty years.

    Non-goals
    ---------
    * Does NOT validate upstream data beyond the OPEN-uniqueness check.
    * Does NOT compute taxes or convert currencies.
    """

    def __init__(
        self,
        fiscal_years: FiscalYearSource,
        orders: OrderSource,
        clock: Clock | None = None,
        config: ReportingConfig | None = None,
    ):
        self._fiscal_years = fiscal_years
        self._orders = orders
        self._clock = clock or SystemClock()
        self._config = config or ReportingConfig.with_defaults()

        logger.info(
            "reporting_service_initialized",
            extra={
                "entity_name": self._config.entity_name,
                "window_years": self._config.window_years,
            },
        )

    # =========================================================================
    # Public API
    # =========================================================================

    def current_open_fiscal_year(self) -> int:
        """
        Year of the fiscal year currently open for transactions.

        Raises:
            NoOpenFiscalYearError: no fiscal year is OPEN.
            MultipleOpenFiscalYearsError: more than one fiscal year is OPEN.
        """
        fiscal_years = self._fiscal_years.find_all()
        try:
            fiscal_year = select_open_fiscal_year(fiscal_years)
        except FiscalYearError as exc:
            logger.warning(
                "open_fiscal_year_unresolved",
                extra={"error_code": exc.code, "fiscal_year_count": len(fiscal_years)},
            )
            raise

        logger.info(
            "open_fiscal_year_resolved",
            extra={"year": fiscal_year.year},
        )
        return fiscal_year.year

    def total_before_tax_over_three_years(
        self,
        reference_year: int,
    ) -> dict[int, Decimal]:
        """
        Pre-tax order totals for ``reference_year`` and the two years before.

        Years without orders are present with ``Decimal("0")``.
        """
        return self.total_before_tax_over_years(reference_year, span=THREE_YEARS)

    def total_before_tax_over_years(
        self,
        reference_year: int,
        span: int | None = None,
    ) -> dict[int, Decimal]:
        """
        Pre-tax order totals over a window of ``span`` years ending at
        ``reference_year`` (defaults to ``config.window_years``).
        """
        if span is None:
            span = self._config.window_years
        years = reporting_window(reference_year, span)
        orders = self._orders.find_all()
        totals = total_before_tax_by_year(orders, years)

        logger.info(
            "multi_year_totals_computed",
            extra={
                "reference_year": reference_year,
                "years": list(years),
                "order_count": len(orders),
                "totals": {str(year): str(total) for year, total in totals.items()},
            },
        )
        return totals

    def multi_year_report(
        self,
        reference_year: int | None = None,
    ) -> MultiYearTotalReport:
        """
        Multi-year pre-tax total report with metadata.

        When ``reference_year`` is None the current open fiscal year is
        used, and its errors propagate.  Every record logged while the
        report is built carries its ``report_id``.
        """
        report_id = str(uuid4())
        with LogContext.bind(report_id=report_id):
            if reference_year is None:
                reference_year = self.current_open_fiscal_year()

            years = reporting_window(reference_year, self._config.window_years)
            metadata = ReportMetadata(
                report_type=ReportType.MULTI_YEAR_TOTAL,
                entity_name=self._config.entity_name,
                currency=self._config.currency,
                generated_at=self._clock.now().isoformat(),
                reference_year=reference_year,
                window_years=self._config.window_years,
                report_id=report_id,
            )
            report = build_multi_year_report(self._orders.find_all(), years, metadata)

            logger.info(
                "multi_year_report_generated",
                extra={
                    "reference_year": reference_year,
                    "window_years": len(years),
                    "grand_total": str(report.grand_total),
                },
            )
        return report
