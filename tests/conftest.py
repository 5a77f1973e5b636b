"""
Pytest fixtures for the expense kernel test suite.

Provides:
- Structured logging configuration and log capture
- The sample 12-expense dataset across 2023-04-15/17/20
- An ExpenseReport over the sample dataset
"""

import json
import logging
from io import StringIO

import pytest

from expense_engines.report import ExpenseReport
from expense_kernel.domain.expense import Expense
from expense_kernel.logging_config import (
    LogContext,
    StructuredFormatter,
    configure_logging,
    reset_logging,
)
from tests.factories import SAMPLE_ROWS, make_expense


# =============================================================================
# Logging fixtures
# =============================================================================


@pytest.fixture(autouse=True, scope="session")
def _configure_test_logging():
    """Configure structured logging for the test suite."""
    reset_logging()
    configure_logging(level=logging.DEBUG)
    yield
    reset_logging()


@pytest.fixture(autouse=True)
def _clear_log_context():
    """Clear LogContext between tests to prevent cross-test contamination."""
    LogContext.clear()
    yield
    LogContext.clear()


@pytest.fixture
def captured_logs():
    """
    Capture expense_kernel logs as parsed JSON dicts.

    Usage::

        def test_something(captured_logs, expense_report):
            expense_report.get_report(ReportFilter(log_to_screen=True))
            logs = captured_logs()
            assert any(r["logger"] == "expense_kernel.engines.report" for r in logs)
    """
    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(StructuredFormatter())
    root = logging.getLogger("expense_kernel")
    previous_level = root.level
    root.setLevel(logging.DEBUG)
    root.addHandler(handler)

    def _get_records() -> list[dict]:
        lines = stream.getvalue().strip().split("\n")
        return [json.loads(line) for line in lines if line]

    yield _get_records

    root.removeHandler(handler)
    root.setLevel(previous_level)


# =============================================================================
# Sample data
# =============================================================================


@pytest.fixture
def sample_expenses() -> list[Expense]:
    """The 12-expense sample dataset, in insertion order."""
    return [make_expense(*row) for row in SAMPLE_ROWS]


@pytest.fixture
def expense_report(sample_expenses) -> ExpenseReport:
    return ExpenseReport(sample_expenses)
