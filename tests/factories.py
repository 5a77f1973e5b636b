"""Builders for expense test data."""

from decimal import Decimal

from expense_kernel.domain.catalog import ExpenseSubType, ExpenseType
from expense_kernel.domain.expense import Expense


def make_expense(
    expense_type: ExpenseType,
    expense_sub_type: ExpenseSubType,
    amount: str | int,
    date_of_expense: str,
    **kwargs,
) -> Expense:
    return Expense(
        expense_type=expense_type,
        expense_sub_type=expense_sub_type,
        amount=Decimal(str(amount)),
        date_of_expense=date_of_expense,
        **kwargs,
    )


# Three days of meals and travel; the 110 dinner is the only over-budget dinner
SAMPLE_ROWS = [
    (ExpenseType.TRAVEL, ExpenseSubType.CAR_RENTAL, 90, "2023-04-15"),
    (ExpenseType.MEAL, ExpenseSubType.BREAKFAST, 30, "2023-04-15"),
    (ExpenseType.MEAL, ExpenseSubType.LUNCH, 40, "2023-04-15"),
    (ExpenseType.MEAL, ExpenseSubType.DINNER, 80, "2023-04-15"),
    (ExpenseType.TRAVEL, ExpenseSubType.METRO, 10, "2023-04-17"),
    (ExpenseType.MEAL, ExpenseSubType.BREAKFAST, 30, "2023-04-17"),
    (ExpenseType.MEAL, ExpenseSubType.LUNCH, 60, "2023-04-17"),
    (ExpenseType.MEAL, ExpenseSubType.DINNER, 90, "2023-04-17"),
    (ExpenseType.TRAVEL, ExpenseSubType.BUS, 30, "2023-04-20"),
    (ExpenseType.MEAL, ExpenseSubType.BREAKFAST, 10, "2023-04-20"),
    (ExpenseType.MEAL, ExpenseSubType.LUNCH, 70, "2023-04-20"),
    (ExpenseType.MEAL, ExpenseSubType.DINNER, 110, "2023-04-20"),
]
