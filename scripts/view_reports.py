#!/usr/bin/env python3
"""
Print the open fiscal year and the multi-year pre-tax order totals.

Reads either a YAML dataset (default: the bundled sample) or a database
previously filled by seed_data.py.

Usage:
    python3 scripts/view_reports.py
    python3 scripts/view_reports.py --data my_orders.yaml --reference-year 2022
    python3 scripts/view_reports.py --db-url sqlite:///orders.db --json
"""

import argparse
import json
import logging
import sys
from decimal import Decimal
from pathlib import Path
from uuid import uuid4

# ---------------------------------------------------------------------------
# Project root on sys.path
# ---------------------------------------------------------------------------
ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

W = 48


def fmt_amount(value: Decimal, precision: int) -> str:
    """Format amount for display (e.g. 1,234.50)."""
    return f"{value:,.{precision}f}"


def print_report(report, open_year: int | None, precision: int) -> None:
    meta = report.metadata
    print("=" * W)
    print(f"  {meta.entity_name}".ljust(W))
    print(f"  Pre-tax order totals ({meta.currency})".ljust(W))
    print("=" * W)
    if open_year is not None:
        print(f"  Open fiscal year: {open_year}")
    print(f"  Reference year:   {report.reference_year}")
    print("-" * W)
    print(f"  {'Year':<8}{'Orders':>8}{'Total before tax':>28}")
    for row in report.years:
        print(
            f"  {row.year:<8}{row.order_count:>8}"
            f"{fmt_amount(row.total_before_tax, precision):>28}"
        )
    print("-" * W)
    print(f"  {'Total':<16}{fmt_amount(report.grand_total, precision):>28}")
    print()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Pre-tax order totals by fiscal year")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--data", type=Path, help="YAML dataset (default: bundled sample)")
    source.add_argument("--db-url", help="SQLAlchemy database URL")
    parser.add_argument(
        "--reference-year",
        type=int,
        default=None,
        help="Most recent year of the window (default: the open fiscal year)",
    )
    parser.add_argument("--json", action="store_true", help="Print the report as JSON")
    parser.add_argument("--verbose", action="store_true", help="Structured logs on stderr")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    from orders_config import get_sample_dataset, load_dataset
    from orders_kernel.domain.clock import SystemClock
    from orders_kernel.exceptions import FiscalYearError, OrdersKernelError
    from orders_kernel.logging_config import LogContext, configure_logging
    from orders_modules.reporting.config import ReportingConfig
    from orders_modules.reporting.service import ReportingService
    from orders_modules.reporting.statements import render_to_dict

    if args.verbose:
        configure_logging(level=logging.DEBUG)
    else:
        logging.disable(logging.CRITICAL)

    session = None
    with LogContext.bind(correlation_id=uuid4().hex):
        try:
            if args.db_url:
                from orders_kernel.db.engine import get_session, init_engine_from_url
                from orders_kernel.selectors import FiscalYearSelector, OrderSelector

                init_engine_from_url(args.db_url)
                session = get_session()
                fiscal_years, orders = FiscalYearSelector(session), OrderSelector(session)
                config = ReportingConfig()
            else:
                dataset = load_dataset(args.data) if args.data else get_sample_dataset()
                fiscal_years, orders = dataset.sources()
                try:
                    config = ReportingConfig.from_dict(dataset.reporting)
                except (TypeError, ValueError) as exc:
                    print(
                        f"  ERROR: invalid reporting section in {dataset.source_path}: {exc}",
                        file=sys.stderr,
                    )
                    return 1

            svc = ReportingService(fiscal_years, orders, clock=SystemClock(), config=config)

            try:
                open_year = svc.current_open_fiscal_year()
            except FiscalYearError as exc:
                if args.reference_year is None:
                    raise
                print(f"  WARNING: {exc}", file=sys.stderr)
                open_year = None

            report = svc.multi_year_report(
                args.reference_year if args.reference_year is not None else open_year
            )

            if args.json:
                payload = render_to_dict(report)
                payload["open_fiscal_year"] = open_year
                print(json.dumps(payload, indent=2))
            else:
                print_report(report, open_year, config.display_precision)
            return 0

        except OrdersKernelError as exc:
            print(f"  ERROR [{exc.code}]: {exc}", file=sys.stderr)
            return 1

        except FileNotFoundError as exc:
            print(f"  ERROR: dataset not found: {exc.filename}", file=sys.stderr)
            return 1

        finally:
            if session is not None:
                session.close()
            if not args.verbose:
                logging.disable(logging.NOTSET)


if __name__ == "__main__":
    sys.exit(main())
