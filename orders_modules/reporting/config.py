"""
Reporting Configuration Schema.

Controls the reporting window and how reports are labelled and displayed.
The engine's three-year total always uses a window of three; the
configurable ``window_years`` drives the multi-year report.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Self

from orders_kernel.logging_config import get_logger

logger = get_logger("modules.reporting.config")


@dataclass
class ReportingConfig:
    """
    Configuration schema for the reporting module.
    """

    # Entity name shown on reports
    entity_name: str = "Procurement Service"

    # Currency label for reports (no conversion is performed)
    currency: str = "EUR"

    # Number of fiscal years covered by the multi-year report, reference
    # year included
    window_years: int = 3

    # Rounding precision for display only; totals are never rounded
    display_precision: int = 2

    def __post_init__(self):
        if isinstance(self.window_years, bool) or not isinstance(self.window_years, int):
            raise ValueError("window_years must be an integer")
        if self.window_years < 1:
            raise ValueError("window_years must be at least 1")
        if self.display_precision < 0:
            raise ValueError("display_precision cannot be negative")
        if len(self.currency) != 3:
            raise ValueError("currency must be a 3-letter ISO 4217 code")

    @classmethod
    def with_defaults(cls) -> Self:
        """Create config with standard defaults."""
        logger.info("reporting_config_created_with_defaults")
        return cls()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create config from dictionary (e.g. a dataset's ``reporting`` section)."""
        logger.info(
            "reporting_config_loading_from_dict",
            extra={"keys": sorted(data.keys())},
        )
        return cls(**data)
