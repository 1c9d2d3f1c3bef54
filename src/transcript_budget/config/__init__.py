"""Configuration system for transcript-budget.

Main exports:
- BudgetSettings: Root settings (env, .env, YAML)
- LoggingConfig: Logging configuration

Component configs live with their components:
- transcript_budget.tokens.EstimatorConfig
- transcript_budget.context.BudgetConfig
"""

from transcript_budget.config.logging_config import LoggingConfig
from transcript_budget.config.settings import BudgetSettings

__all__ = [
    "BudgetSettings",
    "LoggingConfig",
]
