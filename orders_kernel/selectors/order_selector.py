"""
Module: orders_kernel.selectors.order_selector
Responsibility: Database-backed OrderSource.
Architecture position: Kernel > Selectors.

Invariants enforced:
    - One find_all() is one read of the full collection: lines are
      eager-loaded with selectinload, never lazily per order.
"""

from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from orders_kernel.domain.sources import OrderSource
from orders_kernel.domain.values import Order
from orders_kernel.logging_config import get_logger
from orders_kernel.models.order import OrderRecord
from orders_kernel.selectors.base import BaseSelector

logger = get_logger("selectors.order")


class OrderSelector(BaseSelector[OrderRecord], OrderSource):
    """Reads every order with its lines, oldest first."""

    def find_all(self) -> Sequence[Order]:
        stmt = (
            select(OrderRecord)
            .options(selectinload(OrderRecord.lines))
            .order_by(OrderRecord.created_at, OrderRecord.order_number)
        )
        orders = tuple(record.to_value() for record in self.session.scalars(stmt))
        logger.debug("orders_loaded", extra={"order_count": len(orders)})
        return orders
