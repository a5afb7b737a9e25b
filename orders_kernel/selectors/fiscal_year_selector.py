"""
Module: orders_kernel.selectors.fiscal_year_selector
Responsibility: Database-backed FiscalYearSource.
Architecture position: Kernel > Selectors.
"""

from collections.abc import Sequence

from sqlalchemy import select

from orders_kernel.domain.sources import FiscalYearSource
from orders_kernel.domain.values import FiscalYear
from orders_kernel.logging_config import get_logger
from orders_kernel.models.fiscal_year import FiscalYearRecord
from orders_kernel.selectors.base import BaseSelector

logger = get_logger("selectors.fiscal_year")


class FiscalYearSelector(BaseSelector[FiscalYearRecord], FiscalYearSource):
    """Reads every fiscal year, most recent first."""

    def find_all(self) -> Sequence[FiscalYear]:
        stmt = select(FiscalYearRecord).order_by(FiscalYearRecord.year.desc())
        fiscal_years = tuple(
            record.to_value() for record in self.session.scalars(stmt)
        )
        logger.debug(
            "fiscal_years_loaded",
            extra={"fiscal_year_count": len(fiscal_years)},
        )
        return fiscal_years
