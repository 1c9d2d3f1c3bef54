"""Token estimation configuration."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_CHARACTERS_PER_TOKEN = 4.5
DEFAULT_TOOL_CALL_OVERHEAD = 5
DEFAULT_TOOL_OUTPUT_OVERHEAD = 3


class EstimatorConfig(BaseModel):
    """Calibration constants for character-based token estimation.

    Attributes:
        characters_per_token: Average characters per token.
        tool_call_overhead: Framing tokens added per tool call.
        tool_output_overhead: Framing tokens added once per tool output entry.
    """

    model_config = ConfigDict(frozen=True)

    characters_per_token: float = Field(
        default=DEFAULT_CHARACTERS_PER_TOKEN,
        gt=0,
        description="Average characters per token",
    )
    tool_call_overhead: int = Field(
        default=DEFAULT_TOOL_CALL_OVERHEAD,
        ge=0,
        description="Framing tokens added per tool call",
    )
    tool_output_overhead: int = Field(
        default=DEFAULT_TOOL_OUTPUT_OVERHEAD,
        ge=0,
        description="Framing tokens added once per tool output entry",
    )
