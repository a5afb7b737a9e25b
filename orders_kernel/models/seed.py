"""
Module: orders_kernel.models.seed
Responsibility: Write domain values as ORM rows.  Used by the seeding
    script and by database tests; the reporting engine never writes.
Architecture position: Kernel > Models.

Failure modes:
    - IntegrityError (on flush/commit) when a fiscal year is seeded twice.
"""

from collections.abc import Iterable

from sqlalchemy.orm import Session

from orders_kernel.domain.values import FiscalYear, Order
from orders_kernel.logging_config import get_logger
from orders_kernel.models.fiscal_year import FiscalYearRecord
from orders_kernel.models.order import OrderLineRecord, OrderRecord

logger = get_logger("models.seed")


def seed_dataset(
    session: Session,
    fiscal_years: Iterable[FiscalYear],
    orders: Iterable[Order],
) -> tuple[int, int]:
    """
    Add fiscal years and orders to ``session``.

    The caller owns the transaction: nothing is committed here.

    Returns:
        (fiscal_year_count, order_count) added.
    """
    fy_count = 0
    for fy in fiscal_years:
        session.add(FiscalYearRecord(year=fy.year, status=fy.status.value))
        fy_count += 1

    order_count = 0
    for order in orders:
        session.add(
            OrderRecord(
                order_number=order.order_number,
                supplier_code=order.supplier_code,
                created_at=order.created_at,
                lines=[
                    OrderLineRecord(
                        position=position,
                        line_id=line.line_id,
                        article_code=line.article_code,
                        quantity=line.quantity,
                        unit_price=line.unit_price,
                    )
                    for position, line in enumerate(order.lines)
                ],
            )
        )
        order_count += 1

    session.flush()
    logger.info(
        "dataset_seeded",
        extra={"fiscal_year_count": fy_count, "order_count": order_count},
    )
    return fy_count, order_count
