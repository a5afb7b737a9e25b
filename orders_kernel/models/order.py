"""
Module: orders_kernel.models.order
Responsibility: ORM persistence for purchase orders ("commandes") and their
    lines.
Architecture position: Kernel > Models.  May import from db/base.py and
    domain/values.py only.

Invariants enforced:
    - Quantities and unit prices are Numeric(38, 9), never float.
    - Lines keep an explicit ``position`` so iteration order is reproducible.
    - order_number is NOT unique: the same number may appear in several
      fiscal years.
"""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from sqlalchemy import ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from orders_kernel.db.base import Base, UUIDString
from orders_kernel.domain.values import Order, OrderLine


class OrderRecord(Base):
    """Stored purchase order header."""

    __tablename__ = "orders"

    __table_args__ = (
        Index("idx_order_created_at", "created_at"),
        Index("idx_order_number", "order_number"),
    )

    order_number: Mapped[str] = mapped_column(String(50), nullable=False)

    supplier_code: Mapped[str] = mapped_column(String(50), nullable=False)

    created_at: Mapped[datetime] = mapped_column(nullable=False)

    lines: Mapped[list["OrderLineRecord"]] = relationship(
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderLineRecord.position",
    )

    def to_value(self) -> Order:
        return Order(
            order_number=self.order_number,
            supplier_code=self.supplier_code,
            lines=tuple(line.to_value() for line in self.lines),
            created_at=self.created_at,
        )

    def __repr__(self) -> str:
        return f"<OrderRecord {self.order_number} {self.created_at:%Y-%m-%d}>"


class OrderLineRecord(Base):
    """Stored order line."""

    __tablename__ = "order_lines"

    __table_args__ = (
        Index("idx_order_line_order", "order_id"),
    )

    order_id: Mapped[UUID] = mapped_column(
        UUIDString(),
        ForeignKey("orders.id"),
        nullable=False,
    )

    position: Mapped[int] = mapped_column(nullable=False, default=0)

    line_id: Mapped[str] = mapped_column(String(50), nullable=False)

    article_code: Mapped[str] = mapped_column(String(50), nullable=False)

    quantity: Mapped[Decimal] = mapped_column(nullable=False)

    unit_price: Mapped[Decimal] = mapped_column(nullable=False)

    order: Mapped[OrderRecord] = relationship(back_populates="lines")

    def to_value(self) -> OrderLine:
        return OrderLine(
            line_id=self.line_id,
            article_code=self.article_code,
            quantity=self.quantity,
            unit_price=self.unit_price,
        )
