"""
Order Reporting Module (``orders_modules.reporting``).

Responsibility
--------------
Read-only module answering two questions over fiscal years and purchase
orders: which fiscal year is currently open, and what the pre-tax total of
orders is for a reference fiscal year and the preceding years.

Architecture position
---------------------
**Modules layer** -- pure statement functions (``statements.py``) behind
a thin service (``service.py``) that reads the two kernel read ports.

Invariants enforced
-------------------
* Exactly one OPEN fiscal year, or a typed error.
* Multi-year totals cover every year of the window, zero when empty.
* Exact Decimal arithmetic throughout.

Failure modes
-------------
* ``NoOpenFiscalYearError`` / ``MultipleOpenFiscalYearsError`` from the
  open fiscal year lookup.
"""

from orders_modules.reporting.config import ReportingConfig
from orders_modules.reporting.models import (
    MultiYearTotalReport,
    ReportMetadata,
    ReportType,
    YearTotal,
)
from orders_modules.reporting.service import ReportingService

__all__ = [
    # Service
    "ReportingService",
    # Config
    "ReportingConfig",
    # Models
    "ReportType",
    "ReportMetadata",
    "YearTotal",
    "MultiYearTotalReport",
]
