"""Context window budget management.

Conservative token estimates, limit checks and budget-constrained entry
selection for conversation transcripts.

Standalone Usage:
    >>> from transcript_budget.context import BudgetManager, BudgetConfig
    >>> manager = BudgetManager(BudgetConfig(max_tokens=8192))
    >>> if manager.is_approaching_limit(transcript):
    ...     result = manager.trim(transcript, budget=4000)
    ...     transcript = result.entries

Module-level helpers use a shared default manager:
    >>> from transcript_budget.context import entries_within_token_budget
    >>> kept = entries_within_token_budget(transcript, 2000)
"""

from transcript_budget.context.config import BudgetConfig
from transcript_budget.context.manager import (
    BudgetManager,
    TrimResult,
    default_manager,
    entries_within_token_budget,
    estimated_token_count,
    is_approaching_limit,
    safe_estimated_token_count,
)
from transcript_budget.context.report import BudgetReport

__all__ = [
    "BudgetConfig",
    "BudgetManager",
    "BudgetReport",
    "TrimResult",
    "default_manager",
    "entries_within_token_budget",
    "estimated_token_count",
    "is_approaching_limit",
    "safe_estimated_token_count",
]
