"""
expense_config -- YAML loading of category catalogs and expense records.

Architecture position:
    Configuration -- sits above ``expense_kernel``.  The kernel and the
    engines MUST NEVER import from ``expense_config``.
"""

from expense_config.loader import (
    load_catalog,
    load_expenses,
    load_yaml_file,
    parse_catalog,
    parse_expense,
)

__all__ = [
    "load_catalog",
    "load_expenses",
    "load_yaml_file",
    "parse_catalog",
    "parse_expense",
]
