"""
Sources -- Read ports the reporting engine depends on.

Responsibility:
    Declares the two read-only collaborator contracts (fiscal years, orders)
    and their in-memory implementations. Database-backed implementations
    live in ``orders_kernel.selectors``.

Architecture position:
    Kernel > Domain -- zero I/O. Production backings are injected behind
    these interfaces, never hard-coded into the engine.

Invariants enforced:
    - ``find_all`` returns the full collection: no pagination, no partial
      results, order lines fully populated.
    - In-memory sources snapshot their input at construction, so callers
      mutating the original list do not affect later reads.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence

from orders_kernel.domain.values import FiscalYear, Order


class FiscalYearSource(ABC):
    """Read port over all known fiscal years."""

    @abstractmethod
    def find_all(self) -> Sequence[FiscalYear]:
        """Return every known fiscal year, in any order."""
        ...


class OrderSource(ABC):
    """Read port over all known orders."""

    @abstractmethod
    def find_all(self) -> Sequence[Order]:
        """Return every known order with its lines."""
        ...


class InMemoryFiscalYearSource(FiscalYearSource):
    def __init__(self, fiscal_years: Iterable[FiscalYear] = ()):
        self._fiscal_years = tuple(fiscal_years)

    def find_all(self) -> Sequence[FiscalYear]:
        return self._fiscal_years


class InMemoryOrderSource(OrderSource):
    def __init__(self, orders: Iterable[Order] = ()):
        self._orders = tuple(orders)

    def find_all(self) -> Sequence[Order]:
        return self._orders
