"""Error handling."""

from transcript_budget.errors.exceptions import BudgetError, ConfigurationError

__all__ = [
    "BudgetError",
    "ConfigurationError",
]
