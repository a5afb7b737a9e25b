"""
Pure domain layer.

Immutable values and read ports with NO dependencies on:
- ORM (SQLAlchemy)
- Database
- I/O
"""

from orders_kernel.domain.clock import Clock, DeterministicClock, SystemClock
from orders_kernel.domain.sources import (
    FiscalYearSource,
    InMemoryFiscalYearSource,
    InMemoryOrderSource,
    OrderSource,
)
from orders_kernel.domain.values import (
    FiscalYear,
    FiscalYearStatus,
    Order,
    OrderLine,
)

__all__ = [
    "Clock",
    "SystemClock",
    "DeterministicClock",
    "FiscalYear",
    "FiscalYearStatus",
    "Order",
    "OrderLine",
    "FiscalYearSource",
    "OrderSource",
    "InMemoryFiscalYearSource",
    "InMemoryOrderSource",
]
