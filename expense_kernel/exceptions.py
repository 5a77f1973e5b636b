"""
Typed Exception Hierarchy for the Expense Kernel.

===============================================================================
EXCEPTION HIERARCHY
===============================================================================

All exceptions inherit from ExpenseKernelError:

    ExpenseKernelError (base)
    |
    +-- CatalogError
    |   +-- InvalidCategoryReferenceError
    |
    +-- ConfigurationError
        +-- CatalogConfigError
        +-- ExpenseRecordError

===============================================================================
ERROR CODES - QUICK REFERENCE
===============================================================================

Category        | Code                        | When Raised
----------------|-----------------------------|-----------------------------------------
Catalog         | INVALID_CATEGORY_REFERENCE  | Type or (type, subtype) not registered
----------------|-----------------------------|-----------------------------------------
Configuration   | CATALOG_CONFIG_ERROR        | Catalog YAML names unknown tags/keys
                | EXPENSE_RECORD_ERROR        | Expense record YAML is malformed

===============================================================================
HANDLING PATTERNS
===============================================================================

1. CATCH SPECIFIC EXCEPTIONS:

    try:
        expense = Expense(expense_type=..., expense_sub_type=..., ...)
    except InvalidCategoryReferenceError as e:
        log.warning(
            "bad_category",
            extra={"type": e.expense_type, "subtype": e.expense_sub_type},
        )

2. A report filter with start_date after end_date is NOT an error. It
   yields an empty result and never raises.
"""


class ExpenseKernelError(Exception):
    """
    Base exception for all expense kernel errors.

    All subclasses carry a `code` class attribute for machine-readable
    error identification.
    """

    code: str = "EXPENSE_KERNEL_ERROR"


# Catalog exceptions


class CatalogError(ExpenseKernelError):
    """Base exception for category catalog errors."""

    code: str = "CATALOG_ERROR"


class InvalidCategoryReferenceError(CatalogError):
    """
    Expense type, or (type, subtype) pair, is not registered in the catalog.

    Raised by every catalog lookup instead of returning a default.
    """

    code: str = "INVALID_CATEGORY_REFERENCE"

    def __init__(self, expense_type, expense_sub_type=None):
        self.expense_type = getattr(expense_type, "value", expense_type)
        self.expense_sub_type = getattr(expense_sub_type, "value", expense_sub_type)
        if expense_sub_type is None:
            message = f"Expense type not registered: {self.expense_type}"
        else:
            message = (
                f"Expense subtype {self.expense_sub_type} is not registered "
                f"under type {self.expense_type}"
            )
        super().__init__(message)


# Configuration exceptions


class ConfigurationError(ExpenseKernelError):
    """Base exception for configuration loading errors."""

    code: str = "CONFIGURATION_ERROR"


class CatalogConfigError(ConfigurationError):
    """Catalog definition could not be parsed."""

    code: str = "CATALOG_CONFIG_ERROR"

    def __init__(self, entry: str, reason: str):
        self.entry = entry
        self.reason = reason
        super().__init__(f"Invalid catalog entry {entry}: {reason}")


class ExpenseRecordError(ConfigurationError):
    """Expense record could not be parsed."""

    code: str = "EXPENSE_RECORD_ERROR"

    def __init__(self, index: int, reason: str):
        self.index = index
        self.reason = reason
        super().__init__(f"Invalid expense record #{index}: {reason}")
