"""
Values -- Immutable domain value objects for fiscal years and orders.

Responsibility:
    Provides FiscalYear, OrderLine and Order, the read-only snapshots the
    reporting engine consumes, together with their two pure derived
    computations: the open-status check and the pre-tax total.

Architecture position:
    Kernel > Domain -- pure functional core, zero I/O.
    No outward dependencies.

Invariants enforced:
    - All monetary amounts and quantities are Decimal (never float).
    - An order belongs to the fiscal year of its creation timestamp.

Failure modes:
    - TypeError when a float is given for a quantity or a unit price, or a
      non-integer for a fiscal year.
    - ValueError for an unknown status, a negative quantity, or a NaN or
      infinite amount.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal, InvalidOperation
from enum import Enum

ZERO = Decimal("0")


def to_decimal(value: Decimal | int | str, field_name: str) -> Decimal:
    """
    Convert ``value`` to Decimal without passing through binary floating point.

    Raises:
        TypeError: if ``value`` is a float, a bool, or any non-numeric type.
        ValueError: if ``value`` is a string that is not a decimal number,
            or is NaN or infinite.
    """
    if isinstance(value, (bool, float)) or not isinstance(value, (Decimal, int, str)):
        raise TypeError(
            f"{field_name} must be Decimal, int or str, not {type(value).__name__}"
        )
    if isinstance(value, str):
        try:
            value = Decimal(value.strip())
        except InvalidOperation:
            raise ValueError(f"{field_name} is not a decimal number: {value!r}") from None
    elif isinstance(value, int):
        value = Decimal(value)
    if not value.is_finite():
        raise ValueError(f"{field_name} must be finite, got {value}")
    return value


class FiscalYearStatus(str, Enum):
    """Lifecycle status of a fiscal year."""

    OPEN = "open"
    RESTRICTED = "restricted"
    IN_PREPARATION = "in_preparation"
    CLOSED = "closed"


@dataclass(frozen=True, slots=True)
class FiscalYear:
    """
    An annual accounting period and its status.

    Contract:
        ``year`` is an int (bool rejected). ``status`` accepts a
        FiscalYearStatus or its string value.
    """

    year: int
    status: FiscalYearStatus

    def __post_init__(self) -> None:
        if isinstance(self.year, bool) or not isinstance(self.year, int):
            raise TypeError(f"year must be int, not {type(self.year).__name__}")
        if not isinstance(self.status, FiscalYearStatus):
            object.__setattr__(self, "status", FiscalYearStatus(self.status))

    @property
    def is_open(self) -> bool:
        return self.status is FiscalYearStatus.OPEN


@dataclass(frozen=True, slots=True)
class OrderLine:
    """
    One priced, quantified item within an order.

    Guarantees:
        - quantity and unit_price are Decimal after construction
        - quantity is non-negative
    """

    line_id: str
    article_code: str
    quantity: Decimal
    unit_price: Decimal

    def __post_init__(self) -> None:
        quantity = to_decimal(self.quantity, "quantity")
        if quantity < ZERO:
            raise ValueError(f"quantity cannot be negative: {quantity}")
        object.__setattr__(self, "quantity", quantity)
        object.__setattr__(self, "unit_price", to_decimal(self.unit_price, "unit_price"))

    @property
    def amount_before_tax(self) -> Decimal:
        """unit_price x quantity, exact."""
        return self.unit_price * self.quantity


@dataclass(frozen=True, slots=True)
class Order:
    """
    A purchase order ("commande") and its lines.

    ``order_number`` is not unique across fiscal years. Lines keep their
    given order so that iteration is reproducible; it has no effect on
    totals.
    """

    order_number: str
    supplier_code: str
    lines: tuple[OrderLine, ...]
    created_at: datetime

    def __post_init__(self) -> None:
        if not isinstance(self.created_at, datetime):
            raise TypeError(
                f"created_at must be datetime, not {type(self.created_at).__name__}"
            )
        if not isinstance(self.lines, tuple):
            object.__setattr__(self, "lines", tuple(self.lines))

    @property
    def fiscal_year(self) -> int:
        """Calendar year of the creation timestamp."""
        return self.created_at.year

    @property
    def total_before_tax(self) -> Decimal:
        return sum_amounts(line.amount_before_tax for line in self.lines)


def sum_amounts(amounts: Iterable[Decimal]) -> Decimal:
    """Exact Decimal sum; ``Decimal("0")`` for an empty iterable."""
    return sum(amounts, ZERO)
