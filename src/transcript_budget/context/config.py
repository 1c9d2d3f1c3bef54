"""Context budget configuration."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_SAFETY_BUFFER = 0.25
DEFAULT_SYSTEM_OVERHEAD_TOKENS = 100
DEFAULT_LIMIT_THRESHOLD = 0.70
DEFAULT_MAX_TOKENS = 4096


class BudgetConfig(BaseModel):
    """Configuration for conservative estimates and limit checks.

    Attributes:
        safety_buffer: Fraction of the raw estimate added as a safety margin.
        system_overhead_tokens: Fixed tokens added for system overhead.
        limit_threshold: Fraction of ``max_tokens`` at which the limit is approached.
        max_tokens: Model context window size in tokens.
    """

    model_config = ConfigDict(frozen=True)

    safety_buffer: float = Field(
        default=DEFAULT_SAFETY_BUFFER,
        ge=0,
        description="Fraction of the raw estimate added as a safety margin",
    )
    system_overhead_tokens: int = Field(
        default=DEFAULT_SYSTEM_OVERHEAD_TOKENS,
        ge=0,
        description="Fixed tokens added for system overhead",
    )
    limit_threshold: float = Field(
        default=DEFAULT_LIMIT_THRESHOLD,
        gt=0,
        le=1,
        description="Fraction of max_tokens at which the limit is approached",
    )
    max_tokens: int = Field(
        default=DEFAULT_MAX_TOKENS,
        gt=0,
        description="Model context window size in tokens",
    )
