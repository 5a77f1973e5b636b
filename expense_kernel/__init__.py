"""
Expense Kernel

Immutable expense records classified against a static category catalog:
- Closed expense type / subtype tags with display names and spend limits
- Over-budget detection per subtype
- Typed exceptions and structured JSON logging
"""

__version__ = "0.1.0"
