"""
Module: expense_engines
Responsibility:
    Package entrypoint re-exporting the pure expense report engine.

Architecture position:
    Engines -- pure calculation layer.  May only import expense_kernel.
    MUST NOT import expense_config.

Usage:
    from expense_engines import ExpenseReport, ReportFilter
"""

from expense_engines.report import (
    NO_EXPENSES_MESSAGE,
    ExpenseReport,
    ReportFilter,
    ReportResult,
)
from expense_engines.tracer import compute_input_fingerprint, traced_engine

__all__ = [
    "NO_EXPENSES_MESSAGE",
    "ExpenseReport",
    "ReportFilter",
    "ReportResult",
    "compute_input_fingerprint",
    "traced_engine",
]
