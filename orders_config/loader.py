"""
Dataset Loader (``orders_config.loader``).

Responsibility
--------------
Loads YAML dataset files (fiscal years, orders and an optional
``reporting`` section) and parses them into the kernel's frozen domain
values.  This backs the fixture data used by tests, the bundled sample,
and the ``scripts/`` entry points.

Architecture position
---------------------
**Config layer** -- infrastructure tooling.  Depends on ``orders_kernel``
domain values; the kernel never imports from here.

Invariants enforced
-------------------
* Money and quantities never pass through float: YAML floats are
  converted via ``repr()`` so ``0.1`` becomes ``Decimal("0.1")``.
* Structural problems raise ``InvalidFixtureError`` naming the file.
* ``compute_checksum`` is deterministic for identical datasets.

Failure modes
-------------
* Missing YAML file  -> ``FileNotFoundError`` propagates.
* Malformed YAML  -> ``yaml.YAMLError`` propagates.
* Missing keys / wrong shapes  -> ``InvalidFixtureError``.
"""

from __future__ import annotations

import hashlib
import json
from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from pathlib import Path
from typing import Any

import yaml

from orders_kernel.domain.sources import InMemoryFiscalYearSource, InMemoryOrderSource
from orders_kernel.domain.values import FiscalYear, FiscalYearStatus, Order, OrderLine, to_decimal
from orders_kernel.exceptions import InvalidFixtureError
from orders_kernel.logging_config import get_logger

logger = get_logger("config.loader")

# Status spellings accepted in dataset files, in addition to the enum
# values themselves ("open", "closed", ...).
STATUS_ALIASES: dict[str, FiscalYearStatus] = {
    "ouvert": FiscalYearStatus.OPEN,
    "restreint": FiscalYearStatus.RESTRICTED,
    "en_preparation": FiscalYearStatus.IN_PREPARATION,
    "clos": FiscalYearStatus.CLOSED,
}


@dataclass(frozen=True)
class Dataset:
    """Fiscal years, orders and reporting settings loaded from one file."""

    fiscal_years: tuple[FiscalYear, ...]
    orders: tuple[Order, ...]
    reporting: dict[str, Any] = field(default_factory=dict)
    source_path: str | None = None

    def sources(self) -> tuple[InMemoryFiscalYearSource, InMemoryOrderSource]:
        """In-memory read ports over this dataset."""
        return (
            InMemoryFiscalYearSource(self.fiscal_years),
            InMemoryOrderSource(self.orders),
        )


def load_yaml_file(path: Path) -> dict[str, Any]:
    """
    Load a single YAML file and return its contents as a dict.

    Raises:
        FileNotFoundError: if the file does not exist.
        yaml.YAMLError: if the file contains invalid YAML.
        InvalidFixtureError: if the top level is not a mapping.
    """
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise InvalidFixtureError(str(path), "top level must be a mapping")
    return data


def parse_decimal(value: Any, field_name: str = "value") -> Decimal:
    """
    Parse a Decimal from YAML (int, float, string or Decimal).

    Floats are converted through their shortest ``repr`` so that ``0.1``
    yields ``Decimal("0.1")``, not the binary approximation.
    """
    if isinstance(value, float):
        value = repr(value)
    return to_decimal(value, field_name)


def parse_datetime(value: Any) -> datetime:
    """
    Parse a timestamp from YAML.

    Accepts datetime objects (YAML timestamps), dates (midnight), and ISO
    strings.

    Raises:
        ValueError: if ``value`` is not a valid timestamp representation.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, str):
        return datetime.fromisoformat(value.strip())
    raise ValueError(f"Cannot parse datetime from {value!r}")


def parse_status(value: Any) -> FiscalYearStatus:
    """Parse a fiscal-year status by value, name, or French alias."""
    if isinstance(value, FiscalYearStatus):
        return value
    key = str(value).strip().lower()
    if key in STATUS_ALIASES:
        return STATUS_ALIASES[key]
    return FiscalYearStatus(key)


def parse_fiscal_year(data: dict[str, Any]) -> FiscalYear:
    """Parse a FiscalYear from ``{"year": ..., "status": ...}``."""
    return FiscalYear(year=data["year"], status=parse_status(data["status"]))


def parse_order_line(data: dict[str, Any]) -> OrderLine:
    """Parse an OrderLine; ``line_id`` and ``article_code`` are read as strings."""
    return OrderLine(
        line_id=str(data["line_id"]),
        article_code=str(data["article_code"]),
        quantity=parse_decimal(data["quantity"], "quantity"),
        unit_price=parse_decimal(data["unit_price"], "unit_price"),
    )


def parse_order(data: dict[str, Any]) -> Order:
    """
    Parse an Order and its lines.

    Raises:
        KeyError: if a required key is missing.
        ValueError / TypeError: if a field has an invalid value.
    """
    return Order(
        order_number=str(data["order_number"]),
        supplier_code=str(data["supplier_code"]),
        lines=tuple(parse_order_line(line) for line in data.get("lines") or ()),
        created_at=parse_datetime(data["created_at"]),
    )


def parse_dataset(data: dict[str, Any], source: str = "<memory>") -> Dataset:
    """
    Parse a dataset dict (as loaded from YAML).

    Raises:
        InvalidFixtureError: on any missing key or invalid field value.
    """
    fiscal_years_raw = data.get("fiscal_years") or []
    orders_raw = data.get("orders") or []
    reporting = data.get("reporting") or {}
    if not isinstance(fiscal_years_raw, list) or not isinstance(orders_raw, list):
        raise InvalidFixtureError(source, "fiscal_years and orders must be lists")
    if not isinstance(reporting, dict):
        raise InvalidFixtureError(source, "reporting must be a mapping")

    try:
        fiscal_years = tuple(parse_fiscal_year(item) for item in fiscal_years_raw)
        orders = tuple(parse_order(item) for item in orders_raw)
    except KeyError as exc:
        raise InvalidFixtureError(source, f"missing key {exc}") from exc
    except (TypeError, ValueError) as exc:
        raise InvalidFixtureError(source, str(exc)) from exc

    return Dataset(
        fiscal_years=fiscal_years,
        orders=orders,
        reporting=dict(reporting),
        source_path=source,
    )


def load_dataset(path: Path | str) -> Dataset:
    """Load and parse a YAML dataset file."""
    path = Path(path)
    dataset = parse_dataset(load_yaml_file(path), source=str(path))
    logger.info(
        "dataset_loaded",
        extra={
            "path": str(path),
            "fiscal_year_count": len(dataset.fiscal_years),
            "order_count": len(dataset.orders),
        },
    )
    return dataset


def compute_checksum(dataset: Dataset) -> str:
    """
    SHA-256 of the canonical JSON form of a dataset.

    Identical fiscal years, orders and reporting settings always produce
    the same checksum, whatever file they came from.
    """
    data = {
        "fiscal_years": [
            {"year": fy.year, "status": fy.status.value} for fy in dataset.fiscal_years
        ],
        "orders": [
            {
                "order_number": order.order_number,
                "supplier_code": order.supplier_code,
                "created_at": order.created_at.isoformat(),
                "lines": [
                    {
                        "line_id": line.line_id,
                        "article_code": line.article_code,
                        "quantity": str(line.quantity),
                        "unit_price": str(line.unit_price),
                    }
                    for line in order.lines
                ],
            }
            for order in dataset.orders
        ],
        "reporting": dataset.reporting,
    }
    canonical = json.dumps(data, sort_keys=True, default=str)
    return hashlib.sha256(canonical.encode()).hexdigest()
