"""Logging."""

from transcript_budget.observability.logging import LOGGER_NAME, setup_logging

__all__ = [
    "LOGGER_NAME",
    "setup_logging",
]
