"""
Expense -- a single immutable expense record.

Dates are kept as ISO-8601 ``YYYY-MM-DD`` strings. ISO dates sort
lexicographically in chronological order, so every date comparison here
is a plain string comparison.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from expense_kernel.domain.catalog import (
    DEFAULT_CATALOG,
    CategoryCatalog,
    ExpenseSubType,
    ExpenseType,
)
from expense_kernel.logging_config import get_logger

logger = get_logger("domain.expense")

OVER_EXPENSE_MARKER = "[over-expense!]"


@dataclass(frozen=True)
class Expense:
    """
    A single expense.

    Display names are resolved against ``catalog`` at construction, so an
    Expense whose subtype is not registered under its type cannot exist.

    Raises:
        InvalidCategoryReferenceError: on construction with an
            unregistered (type, subtype) pair.
    """

    expense_type: ExpenseType
    expense_sub_type: ExpenseSubType
    amount: Decimal
    date_of_expense: str
    catalog: CategoryCatalog = field(default=DEFAULT_CATALOG, compare=False, repr=False)
    expense_type_display_name: str = field(init=False, compare=False)
    expense_sub_type_display_name: str = field(init=False, compare=False)

    def __post_init__(self):
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, "amount", Decimal(str(self.amount)))
        if isinstance(self.date_of_expense, date):
            object.__setattr__(self, "date_of_expense", self.date_of_expense.isoformat())

        object.__setattr__(
            self,
            "expense_type_display_name",
            self.catalog.type_display_name(self.expense_type),
        )
        object.__setattr__(
            self,
            "expense_sub_type_display_name",
            self.catalog.subtype_meta(self.expense_type, self.expense_sub_type).display_name,
        )
        logger.debug(
            "expense_created",
            extra={
                "expense_type": self.expense_type.value,
                "expense_sub_type": self.expense_sub_type.value,
                "amount": str(self.amount),
                "date_of_expense": self.date_of_expense,
            },
        )

    def get_amount(self) -> Decimal:
        return self.amount

    # ------------------------------------------------------------------
    # Predicates -- a falsy argument never matches
    # ------------------------------------------------------------------

    def matches_type(self, expense_type: ExpenseType | None) -> bool:
        return self.expense_type == expense_type if expense_type else False

    def matches_sub_type(self, expense_sub_type: ExpenseSubType | None) -> bool:
        return self.expense_sub_type == expense_sub_type if expense_sub_type else False

    def date_equals(self, on_date: str | None) -> bool:
        return self.date_of_expense == on_date if on_date else False

    def date_at_or_after(self, on_date: str | None) -> bool:
        return self.date_of_expense >= on_date if on_date else False

    def date_at_or_before(self, on_date: str | None) -> bool:
        return self.date_of_expense <= on_date if on_date else False

    def is_over_budget(self) -> bool:
        """True when the amount strictly exceeds the subtype's spend limit."""
        limit = self.catalog.subtype_meta(self.expense_type, self.expense_sub_type).max_spend_limit
        if not limit:
            return False
        return self.amount > limit

    def log_line(self) -> str:
        """Tab-separated line: subtype, amount in eur, date, over-budget marker."""
        marker = OVER_EXPENSE_MARKER if self.is_over_budget() else ""
        return (
            f"{self.expense_sub_type_display_name}\t{self.amount:f}eur\t"
            f"{self.date_of_expense}\t{marker}"
        )
