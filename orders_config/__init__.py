"""
orders_config -- YAML datasets for the reporting engine.

Responsibility:
    Loads fiscal years, orders and reporting settings from YAML files
    and exposes the bundled sample dataset.

Architecture position:
    Configuration -- sits above ``orders_kernel`` and below
    ``orders_modules``.  The kernel MUST NEVER import from here.
"""

from __future__ import annotations

from pathlib import Path

from orders_config.loader import (
    Dataset,
    compute_checksum,
    load_dataset,
    load_yaml_file,
    parse_dataset,
)

SAMPLE_DATASET_PATH = Path(__file__).parent / "data" / "sample.yaml"


def get_sample_dataset() -> Dataset:
    """Load the bundled sample dataset."""
    return load_dataset(SAMPLE_DATASET_PATH)


__all__ = [
    "Dataset",
    "SAMPLE_DATASET_PATH",
    "compute_checksum",
    "get_sample_dataset",
    "load_dataset",
    "load_yaml_file",
    "parse_dataset",
]
