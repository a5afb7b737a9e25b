"""
Module: orders_kernel.models.fiscal_year
Responsibility: ORM persistence for fiscal years ("exercices").
Architecture position: Kernel > Models.  May import from db/base.py and
    domain/values.py only.

Invariants enforced:
    - year is unique (uq_fiscal_year).
    - At most one OPEN fiscal year is expected but NOT enforced here; the
      reporting engine validates it on every read.
"""

from sqlalchemy import Index, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from orders_kernel.db.base import Base
from orders_kernel.domain.values import FiscalYear, FiscalYearStatus


class FiscalYearRecord(Base):
    """Stored fiscal year and its status."""

    __tablename__ = "fiscal_years"

    __table_args__ = (
        UniqueConstraint("year", name="uq_fiscal_year"),
        Index("idx_fiscal_year_status", "status"),
    )

    year: Mapped[int] = mapped_column(nullable=False)

    status: Mapped[str] = mapped_column(
        String(20),
        default=FiscalYearStatus.IN_PREPARATION.value,
        nullable=False,
    )

    def to_value(self) -> FiscalYear:
        return FiscalYear(year=self.year, status=FiscalYearStatus(self.status))

    def __repr__(self) -> str:
        return f"<FiscalYearRecord {self.year} {self.status}>"
