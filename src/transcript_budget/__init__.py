"""
Transcript Budget - context window budgeting for language model conversations.

Estimates the token cost of conversation transcripts with a fixed
characters-per-token heuristic, adds a safety margin, and selects the
entries that fit a token budget while always keeping the instructions.

Quick Start:
    >>> from transcript_budget import Instructions, Prompt, Response, Transcript
    >>> transcript = Transcript([
    ...     Instructions.from_text("You are a helpful assistant."),
    ...     Prompt.from_text("What is 2 + 2?"),
    ...     Response.from_text("4"),
    ... ])
    >>> transcript.estimated_token_count
    12
    >>> transcript.safe_estimated_token_count
    115
    >>> transcript.is_approaching_limit()
    False

Trimming to a budget:
    >>> kept = transcript.entries_within_token_budget(10)
    >>> [entry.type for entry in kept]
    ['instructions', 'response']

With Settings:
    >>> from transcript_budget import BudgetManager, BudgetSettings
    >>> settings = BudgetSettings()  # Loads from env and .env
    >>> manager = BudgetManager.from_settings(settings)

Key Features:
    - Token estimation for text, structured values and tool calls
    - Conservative estimates with a configurable safety buffer
    - Limit-approach checks against a model context window
    - Sliding-window selection under a hard token budget
    - Rich-renderable budget reports
"""

from importlib.metadata import PackageNotFoundError, version

# Configuration
from transcript_budget.config import BudgetSettings, LoggingConfig

# Context budgeting
from transcript_budget.context import (
    BudgetConfig,
    BudgetManager,
    BudgetReport,
    TrimResult,
    entries_within_token_budget,
    estimated_token_count,
    is_approaching_limit,
    safe_estimated_token_count,
)

# Errors
from transcript_budget.errors import BudgetError, ConfigurationError

# Logging
from transcript_budget.observability import setup_logging

# Token estimation
from transcript_budget.tokens import EstimatorConfig, TokenEstimator, estimate_tokens

# Transcript model
from transcript_budget.transcript import (
    Entry,
    Instructions,
    Prompt,
    Response,
    Segment,
    StructuredSegment,
    TextSegment,
    ToolCall,
    ToolCalls,
    ToolOutput,
    Transcript,
    UnknownEntry,
    UnknownSegment,
)

__all__ = [
    # Transcript
    "Entry",
    "Instructions",
    "Prompt",
    "Response",
    "Segment",
    "StructuredSegment",
    "TextSegment",
    "ToolCall",
    "ToolCalls",
    "ToolOutput",
    "Transcript",
    "UnknownEntry",
    "UnknownSegment",
    # Tokens
    "EstimatorConfig",
    "TokenEstimator",
    "estimate_tokens",
    # Context
    "BudgetConfig",
    "BudgetManager",
    "BudgetReport",
    "TrimResult",
    "entries_within_token_budget",
    "estimated_token_count",
    "is_approaching_limit",
    "safe_estimated_token_count",
    # Config
    "BudgetSettings",
    "LoggingConfig",
    # Errors
    "BudgetError",
    "ConfigurationError",
    # Logging
    "setup_logging",
    # Version
    "__version__",
]

try:
    __version__ = version("transcript-budget")
except PackageNotFoundError:
    __version__ = "0.0.0.dev0"
