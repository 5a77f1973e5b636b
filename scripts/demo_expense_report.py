#!/usr/bin/env python3
"""
Demo: Expense Report Queries.

Loads the sample expense dataset and prints the total and summary of a
fixed set of report queries.  Per-expense lines requested with
``log_to_screen`` go to the structured log on stderr.

Usage:
    python3 scripts/demo_expense_report.py
    python3 scripts/demo_expense_report.py --catalog scripts/data/catalog.yaml
    python3 scripts/demo_expense_report.py --log-level WARNING
"""

import argparse
import logging
import sys
from pathlib import Path

# ---------------------------------------------------------------------------
# Project root on sys.path
# ---------------------------------------------------------------------------
ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

DATA_DIR = Path(__file__).resolve().parent / "data"
W = 72


def _queries():
    from expense_engines.report import ReportFilter
    from expense_kernel.domain.catalog import ExpenseSubType, ExpenseType

    return [
        ReportFilter(expense_type=ExpenseType.MEAL, log_to_screen=True),
        ReportFilter(expense_type=ExpenseType.MEAL, expense_sub_type=ExpenseSubType.BREAKFAST),
        ReportFilter(expense_sub_type=ExpenseSubType.BREAKFAST),
        ReportFilter(expense_type=ExpenseType.TRAVEL),
        ReportFilter(start_date="2023-04-30"),
        ReportFilter(start_date="2023-04-10"),
        ReportFilter(end_date="2023-04-30"),
        ReportFilter(end_date="2023-04-10"),
        ReportFilter(start_date="2023-04-10", end_date="2023-04-15"),
        ReportFilter(start_date="2023-04-10", end_date="2023-04-25"),
        ReportFilter(start_date="2023-04-25", end_date="2023-04-30"),
        ReportFilter(is_over_spent=True, log_to_screen=True),
    ]


def main() -> int:
    parser = argparse.ArgumentParser(description="Run the sample expense report queries")
    parser.add_argument(
        "--data", type=Path, default=DATA_DIR / "sample_expenses.yaml",
        help="Expense records YAML file",
    )
    parser.add_argument(
        "--catalog", type=Path, default=None,
        help="Category catalog YAML file (default: built-in catalog)",
    )
    parser.add_argument(
        "--log-level", default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    args = parser.parse_args()

    from expense_config.loader import load_catalog, load_expenses
    from expense_engines.report import ExpenseReport
    from expense_kernel.domain.catalog import DEFAULT_CATALOG
    from expense_kernel.exceptions import ExpenseKernelError
    from expense_kernel.logging_config import LogContext, configure_logging

    configure_logging(level=getattr(logging, args.log_level))

    try:
        catalog = load_catalog(args.catalog) if args.catalog else DEFAULT_CATALOG
        expenses = load_expenses(args.data, catalog)
    except (OSError, ExpenseKernelError) as exc:
        print(f"ERROR: Could not load expenses: {exc}", file=sys.stderr)
        return 1

    report = ExpenseReport(expenses, catalog)

    print()
    print("=" * W)
    print(f"EXPENSE REPORTS ({len(expenses)} expenses)".center(W))
    print("=" * W)
    for i, report_filter in enumerate(_queries(), 1):
        with LogContext.bind(report_id=f"demo-{i}", source=str(args.data)):
            result = report.get_report(report_filter)
        print(f"  {i:>2}. {result.summary_text}  ({result.count} matched)")
    print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
