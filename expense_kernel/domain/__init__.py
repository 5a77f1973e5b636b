"""
Pure domain layer.

Immutable, deterministic expense objects with NO dependencies on
storage, clocks or I/O beyond structured logging.
"""

from expense_kernel.domain.catalog import (
    DEFAULT_CATALOG,
    CategoryCatalog,
    ExpenseSubType,
    ExpenseType,
    SubtypeMeta,
)
from expense_kernel.domain.expense import OVER_EXPENSE_MARKER, Expense

__all__ = [
    "DEFAULT_CATALOG",
    "CategoryCatalog",
    "Expense",
    "ExpenseSubType",
    "ExpenseType",
    "OVER_EXPENSE_MARKER",
    "SubtypeMeta",
]
