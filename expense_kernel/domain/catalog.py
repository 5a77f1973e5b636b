"""
Expense category catalog.

Static tables mapping each expense type to its display name, and each
(type, subtype) pair to its display name and optional max-spend limit.

Invariants:
    - Every subtype is registered under a type that has a display name.
    - Lookups of unregistered types or pairs raise
      ``InvalidCategoryReferenceError``; they never return a default.
    - Registration order is preserved and is the scan order of
      ``subtype_display_name_any_type``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from types import MappingProxyType

from expense_kernel.exceptions import InvalidCategoryReferenceError
from expense_kernel.logging_config import get_logger

logger = get_logger("domain.catalog")


class ExpenseType(str, Enum):
    """Top-level expense types."""

    MEAL = "meal"
    TRAVEL = "travel"


class ExpenseSubType(str, Enum):
    """Expense subtypes. Each belongs to exactly one ExpenseType."""

    # MEAL
    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    # TRAVEL
    CAR_RENTAL = "car_rental"
    METRO = "metro"
    BUS = "bus"


@dataclass(frozen=True)
class SubtypeMeta:
    """Display name and spend limit for a subtype. None limit means unlimited."""

    display_name: str
    max_spend_limit: Decimal | None = None

    def __post_init__(self):
        if self.max_spend_limit is not None and not isinstance(self.max_spend_limit, Decimal):
            object.__setattr__(self, "max_spend_limit", Decimal(str(self.max_spend_limit)))


@dataclass(frozen=True, eq=False)
class CategoryCatalog:
    """
    Immutable lookup tables for expense types and subtypes.

    Both mappings are copied into read-only views on construction, so
    callers cannot mutate a catalog after building it.  Catalogs compare
    and hash by identity.
    """

    type_display_names: Mapping[ExpenseType, str]
    subtypes: Mapping[ExpenseType, Mapping[ExpenseSubType, SubtypeMeta]]

    def __post_init__(self):
        for expense_type in self.subtypes:
            if expense_type not in self.type_display_names:
                raise InvalidCategoryReferenceError(expense_type)

        object.__setattr__(
            self, "type_display_names", MappingProxyType(dict(self.type_display_names))
        )
        object.__setattr__(
            self,
            "subtypes",
            MappingProxyType({
                expense_type: MappingProxyType(dict(metas))
                for expense_type, metas in self.subtypes.items()
            }),
        )
        logger.debug(
            "category_catalog_initialized",
            extra={
                "types": [t.value for t in self.type_display_names],
                "subtype_count": sum(len(m) for m in self.subtypes.values()),
            },
        )

    def expense_types(self) -> tuple[ExpenseType, ...]:
        """Registered types, in registration order."""
        return tuple(self.type_display_names)

    def subtypes_of(self, expense_type: ExpenseType) -> tuple[ExpenseSubType, ...]:
        """Subtypes registered under ``expense_type``, in registration order."""
        if expense_type not in self.type_display_names:
            raise InvalidCategoryReferenceError(expense_type)
        return tuple(self.subtypes.get(expense_type, {}))

    def contains(self, expense_type: ExpenseType, expense_sub_type: ExpenseSubType) -> bool:
        return expense_sub_type in self.subtypes.get(expense_type, {})

    def type_display_name(self, expense_type: ExpenseType) -> str:
        """
        Display name for an expense type.

        Raises:
            InvalidCategoryReferenceError: if the type is not registered.
        """
        try:
            return self.type_display_names[expense_type]
        except KeyError:
            raise InvalidCategoryReferenceError(expense_type) from None

    def subtype_meta(
        self,
        expense_type: ExpenseType,
        expense_sub_type: ExpenseSubType,
    ) -> SubtypeMeta:
        """
        Metadata for a (type, subtype) pair.

        Raises:
            InvalidCategoryReferenceError: if the pair is not registered.
        """
        try:
            return self.subtypes[expense_type][expense_sub_type]
        except KeyError:
            raise InvalidCategoryReferenceError(expense_type, expense_sub_type) from None

    def subtype_display_name_any_type(self, expense_sub_type: ExpenseSubType) -> str | None:
        """
        Display name of ``expense_sub_type`` under whichever type registers it.

        Types are scanned in registration order and the first match wins.
        Returns None when no type registers the subtype.
        """
        for metas in self.subtypes.values():
            meta = metas.get(expense_sub_type)
            if meta is not None:
                return meta.display_name
        return None


DEFAULT_CATALOG = CategoryCatalog(
    type_display_names={
        ExpenseType.MEAL: "Meal",
        ExpenseType.TRAVEL: "Travel",
    },
    subtypes={
        ExpenseType.MEAL: {
            ExpenseSubType.BREAKFAST: SubtypeMeta("Breakfast", Decimal("20")),
            ExpenseSubType.LUNCH: SubtypeMeta("Lunch", Decimal("50")),
            ExpenseSubType.DINNER: SubtypeMeta("Dinner", Decimal("100")),
        },
        ExpenseType.TRAVEL: {
            ExpenseSubType.CAR_RENTAL: SubtypeMeta("Car Rental"),
            ExpenseSubType.METRO: SubtypeMeta("Metro"),
            ExpenseSubType.BUS: SubtypeMeta("Bus"),
        },
    },
)
