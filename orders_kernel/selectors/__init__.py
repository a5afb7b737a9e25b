"""Selectors for the orders kernel (database read ports)."""

from orders_kernel.selectors.fiscal_year_selector import FiscalYearSelector
from orders_kernel.selectors.order_selector import OrderSelector

__all__ = [
    "FiscalYearSelector",
    "OrderSelector",
]
