"""
Configuration Loader (``expense_config.loader``).

Responsibility
--------------
Loads YAML files describing a category catalog or a list of expense
records and parses them into kernel domain objects
(``CategoryCatalog`` / ``Expense``).

Architecture position
---------------------
**Config layer** -- infrastructure tooling.  Depends on the kernel; the
kernel and engines never import this module.

Failure modes
-------------
* Missing YAML file  -> ``FileNotFoundError`` propagates.
* Malformed YAML  -> ``yaml.YAMLError`` propagates.
* Unknown type/subtype tags, missing keys, bad amounts
  -> ``CatalogConfigError`` / ``ExpenseRecordError``.
* A record whose subtype is not registered under its type
  -> ``InvalidCategoryReferenceError`` propagates from ``Expense``.

YAML shapes
-----------
Catalog::

    types:
      MEAL:
        display_name: Meal
        subtypes:
          BREAKFAST: {display_name: Breakfast, max_spend_limit: 20}

Expenses::

    expenses:
      - {expense_type: MEAL, expense_sub_type: BREAKFAST,
         amount: 30, date_of_expense: "2023-04-15"}
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal, InvalidOperation
from enum import Enum
from pathlib import Path
from typing import Any

import yaml

from expense_kernel.domain.catalog import (
    DEFAULT_CATALOG,
    CategoryCatalog,
    ExpenseSubType,
    ExpenseType,
    SubtypeMeta,
)
from expense_kernel.domain.expense import Expense
from expense_kernel.exceptions import CatalogConfigError, ExpenseRecordError
from expense_kernel.logging_config import get_logger

logger = get_logger("config.loader")


def load_yaml_file(path: Path) -> dict[str, Any]:
    """
    Load a single YAML file and return its contents as a dict.

    Raises:
        FileNotFoundError: if the file does not exist.
        yaml.YAMLError: if the file contains invalid YAML.
    """
    with open(path) as f:
        return yaml.safe_load(f) or {}


def parse_tag(enum_cls: type[Enum], value: Any) -> Enum | None:
    """
    Resolve a YAML tag to an enum member by member name or value.

    ``MEAL`` and ``meal`` both resolve to ``ExpenseType.MEAL``.
    Returns None for unknown tags.
    """
    if isinstance(value, enum_cls):
        return value
    if not isinstance(value, str):
        return None
    member = enum_cls.__members__.get(value.upper())
    if member is not None:
        return member
    try:
        return enum_cls(value)
    except ValueError:
        return None


def parse_amount(value: Any) -> Decimal:
    """Parse a monetary amount. Floats go through ``str`` to avoid binary noise."""
    if isinstance(value, bool):
        raise ValueError(f"Cannot parse amount from {value!r}")
    try:
        amount = Decimal(str(value))
    except InvalidOperation:
        raise ValueError(f"Cannot parse amount from {value!r}") from None
    if not amount.is_finite():
        raise ValueError(f"Amount must be a finite number, got {value!r}")
    return amount


def parse_date(value: Any) -> str:
    """Parse an ISO date (YAML date or string) to its ``YYYY-MM-DD`` form."""
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, str):
        return date.fromisoformat(value).isoformat()
    raise ValueError(f"Cannot parse date from {value!r}")


def parse_catalog(data: dict[str, Any]) -> CategoryCatalog:
    """
    Parse a ``CategoryCatalog`` from a dict.

    Raises:
        CatalogConfigError: on unknown tags, missing display names or
            invalid limits.
    """
    types_data = data.get("types")
    if not types_data:
        raise CatalogConfigError("types", "at least one expense type is required")

    type_display_names: dict[ExpenseType, str] = {}
    subtypes: dict[ExpenseType, dict[ExpenseSubType, SubtypeMeta]] = {}

    for type_key, type_data in types_data.items():
        expense_type = parse_tag(ExpenseType, type_key)
        if expense_type is None:
            raise CatalogConfigError(str(type_key), "unknown expense type")
        type_data = type_data or {}
        if not type_data.get("display_name"):
            raise CatalogConfigError(str(type_key), "display_name is required")
        type_display_names[expense_type] = type_data["display_name"]

        metas: dict[ExpenseSubType, SubtypeMeta] = {}
        for sub_key, sub_data in (type_data.get("subtypes") or {}).items():
            entry = f"{type_key}.{sub_key}"
            expense_sub_type = parse_tag(ExpenseSubType, sub_key)
            if expense_sub_type is None:
                raise CatalogConfigError(entry, "unknown expense subtype")
            sub_data = sub_data or {}
            if not sub_data.get("display_name"):
                raise CatalogConfigError(entry, "display_name is required")

            limit = sub_data.get("max_spend_limit")
            if limit is not None:
                try:
                    limit = parse_amount(limit)
                except ValueError as exc:
                    raise CatalogConfigError(entry, str(exc)) from exc
                if limit < 0:
                    raise CatalogConfigError(entry, "max_spend_limit cannot be negative")
            metas[expense_sub_type] = SubtypeMeta(sub_data["display_name"], limit)
        subtypes[expense_type] = metas

    return CategoryCatalog(type_display_names=type_display_names, subtypes=subtypes)


def parse_expense(
    data: dict[str, Any],
    catalog: CategoryCatalog = DEFAULT_CATALOG,
    index: int = 0,
) -> Expense:
    """
    Parse a single ``Expense`` from a dict.

    Raises:
        ExpenseRecordError: on missing keys, unknown tags, or bad
            amount/date values.
        InvalidCategoryReferenceError: if the subtype is not registered
            under the type in ``catalog``.
    """
    for key in ("expense_type", "expense_sub_type", "amount", "date_of_expense"):
        if key not in data:
            raise ExpenseRecordError(index, f"missing key '{key}'")

    expense_type = parse_tag(ExpenseType, data["expense_type"])
    if expense_type is None:
        raise ExpenseRecordError(index, f"unknown expense type {data['expense_type']!r}")
    expense_sub_type = parse_tag(ExpenseSubType, data["expense_sub_type"])
    if expense_sub_type is None:
        raise ExpenseRecordError(
            index, f"unknown expense subtype {data['expense_sub_type']!r}"
        )

    try:
        amount = parse_amount(data["amount"])
        date_of_expense = parse_date(data["date_of_expense"])
    except ValueError as exc:
        raise ExpenseRecordError(index, str(exc)) from exc
    if amount < 0:
        raise ExpenseRecordError(index, "amount cannot be negative")

    return Expense(
        expense_type=expense_type,
        expense_sub_type=expense_sub_type,
        amount=amount,
        date_of_expense=date_of_expense,
        catalog=catalog,
    )


def load_catalog(path: Path) -> CategoryCatalog:
    """Load and parse a catalog YAML file."""
    catalog = parse_catalog(load_yaml_file(path))
    logger.info(
        "catalog_loaded",
        extra={"path": str(path), "types": [t.value for t in catalog.expense_types()]},
    )
    return catalog


def load_expenses(
    path: Path,
    catalog: CategoryCatalog = DEFAULT_CATALOG,
) -> tuple[Expense, ...]:
    """Load and parse an expense records YAML file, keeping file order."""
    records = load_yaml_file(path).get("expenses") or []
    expenses = tuple(
        parse_expense(record, catalog, index)
        for index, record in enumerate(records)
    )
    logger.info(
        "expenses_loaded",
        extra={"path": str(path), "count": len(expenses)},
    )
    return expenses
