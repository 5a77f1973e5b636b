"""
expense_engines.report -- Filtered expense totals with a human-readable summary.

Responsibility:
    Filter a fixed collection of ``Expense`` records by type, subtype,
    over-budget status and date range; total the matches; and build the
    summary sentence describing the query.

Architecture position:
    Engines -- pure calculation layer.  Imports only the kernel domain
    and logging.  The only side effect is the optional per-expense log
    record requested with ``log_to_screen``.

Invariants enforced:
    - The held collection is never mutated or re-sorted; results keep
      insertion order and contain only expenses from the collection.
    - ``total`` is the exact Decimal sum of the matching amounts.
    - Identical filters on the same report produce identical results.

Failure modes:
    - ``InvalidCategoryReferenceError`` when the filter names a type
      together with a subtype not registered under it (summary lookup).
    - A start date after the end date is not an error; it yields an
      empty result.

Usage:
    from expense_engines.report import ExpenseReport, ReportFilter
    from expense_kernel.domain import ExpenseType

    report = ExpenseReport(expenses)
    result = report.get_report(ReportFilter(expense_type=ExpenseType.MEAL))
    print(result.summary_text)  # Total expense for type Meal is 520
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from expense_engines.tracer import traced_engine
from expense_kernel.domain.catalog import (
    DEFAULT_CATALOG,
    CategoryCatalog,
    ExpenseSubType,
    ExpenseType,
)
from expense_kernel.domain.expense import Expense
from expense_kernel.logging_config import get_logger

logger = get_logger("engines.report")

NO_EXPENSES_MESSAGE = "No expenses found for filters passed"


@dataclass(frozen=True)
class ReportFilter:
    """
    Query for ``ExpenseReport.get_report``.

    Every field is optional; a falsy field applies no filtering.
    Dates are ISO ``YYYY-MM-DD`` strings (``date`` values are converted).
    """

    expense_type: ExpenseType | None = None
    expense_sub_type: ExpenseSubType | None = None
    start_date: str | None = None
    end_date: str | None = None
    is_over_spent: bool = False
    log_to_screen: bool = False

    def __post_init__(self):
        for name in ("start_date", "end_date"):
            value = getattr(self, name)
            if isinstance(value, date):
                object.__setattr__(self, name, value.isoformat())


@dataclass(frozen=True)
class ReportResult:
    """Total, summary sentence and matching expenses of one query."""

    total: Decimal
    summary_text: str
    expenses: tuple[Expense, ...]

    @property
    def count(self) -> int:
        return len(self.expenses)


class ExpenseReport:
    """
    Read-only report over an ordered collection of expenses.

    Contract:
        Every query is stateless; the collection is fixed at construction.
    """

    def __init__(
        self,
        expenses: Iterable[Expense],
        catalog: CategoryCatalog = DEFAULT_CATALOG,
    ):
        self._expenses: tuple[Expense, ...] = tuple(expenses)
        self._catalog = catalog

    @property
    def expenses(self) -> tuple[Expense, ...]:
        return self._expenses

    @traced_engine("expense_report", "1.0", fingerprint_fields=("report_filter",))
    def get_report(self, report_filter: ReportFilter | None = None) -> ReportResult:
        """
        Filter, total and summarise the held expenses.

        Filters compose as AND and commute: type, subtype, over-budget,
        then date range.  When ``log_to_screen`` is set, one INFO record
        lists every match (or the no-match message).
        """
        f = report_filter or ReportFilter()

        matches = list(self._expenses)
        if f.expense_type:
            matches = [e for e in matches if e.matches_type(f.expense_type)]
        if f.expense_sub_type:
            matches = [e for e in matches if e.matches_sub_type(f.expense_sub_type)]
        if f.is_over_spent:
            matches = [e for e in matches if e.is_over_budget()]
        matches = self._filter_date_range(matches, f.start_date, f.end_date)

        total = self._calculate_total(matches)
        summary_text = self._build_summary(f, total)

        if f.log_to_screen:
            if matches:
                logger.info("\n".join(e.log_line() for e in matches))
            else:
                logger.info(NO_EXPENSES_MESSAGE)

        logger.debug(
            "expense_report_built",
            extra={
                "match_count": len(matches),
                "total": str(total),
                "summary_text": summary_text,
            },
        )
        return ReportResult(
            total=total,
            summary_text=summary_text,
            expenses=tuple(matches),
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _calculate_total(expenses: Iterable[Expense]) -> Decimal:
        return sum((e.get_amount() for e in expenses), Decimal("0"))

    @staticmethod
    def _filter_date_range(
        expenses: list[Expense],
        start_date: str | None,
        end_date: str | None,
    ) -> list[Expense]:
        if start_date and end_date:
            if start_date == end_date:
                return [e for e in expenses if e.date_equals(start_date)]
            return [
                e for e in expenses
                if e.date_at_or_after(start_date) and e.date_at_or_before(end_date)
            ]
        if start_date:
            return [e for e in expenses if e.date_at_or_after(start_date)]
        if end_date:
            return [e for e in expenses if e.date_at_or_before(end_date)]
        return expenses

    @staticmethod
    def _date_clause(start_date: str | None, end_date: str | None) -> str:
        if start_date and end_date:
            if start_date == end_date:
                return f"for the date {start_date}"
            return f"for the date range {start_date} - {end_date}"
        if start_date:
            return f"from the date {start_date}"
        if end_date:
            return f"until the date {end_date}"
        return ""

    def _category_clause(
        self,
        expense_type: ExpenseType | None,
        expense_sub_type: ExpenseSubType | None,
    ) -> str:
        if expense_type:
            txt = f"type {self._catalog.type_display_name(expense_type)}"
            if expense_sub_type:
                meta = self._catalog.subtype_meta(expense_type, expense_sub_type)
                txt += f", subtype {meta.display_name}"
            return txt
        if expense_sub_type:
            # First type registering the subtype wins; unknown leaves no clause
            display_name = self._catalog.subtype_display_name_any_type(expense_sub_type)
            return f"subtype {display_name}" if display_name else ""
        return ""

    def _build_summary(self, f: ReportFilter, total: Decimal) -> str:
        txt = "Total expense "
        if f.expense_type or f.expense_sub_type:
            txt += "for "
        txt += self._category_clause(f.expense_type, f.expense_sub_type)
        txt += self._date_clause(f.start_date, f.end_date)
        return f"{txt} is {total:f}"
