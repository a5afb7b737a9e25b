"""ORM models backing the database read ports."""

from orders_kernel.models.fiscal_year import FiscalYearRecord
from orders_kernel.models.order import OrderLineRecord, OrderRecord
from orders_kernel.models.seed import seed_dataset

__all__ = [
    "FiscalYearRecord",
    "OrderRecord",
    "OrderLineRecord",
    "seed_dataset",
]
