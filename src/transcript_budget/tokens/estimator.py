"""Character-ratio token estimation for transcript content.

Token counts are approximated as ``ceil(characters / characters_per_token)``
with a minimum of one token for any non-empty string. Characters are
counted as Unicode code points (``len`` of a Python ``str``), so a
combining sequence or an emoji built from several code points counts as
several characters.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from functools import lru_cache
from typing import Any

from pydantic import BaseModel

from transcript_budget.tokens.config import DEFAULT_CHARACTERS_PER_TOKEN, EstimatorConfig
from transcript_budget.tokens.serialization import Serializer, to_json_string
from transcript_budget.transcript.models import (
    ENTRY_TYPES,
    SEGMENT_TYPES,
    Instructions,
    Prompt,
    Response,
    StructuredSegment,
    TextSegment,
    ToolCall,
    ToolCalls,
    ToolOutput,
)


def estimate_tokens(
    text: str,
    characters_per_token: float = DEFAULT_CHARACTERS_PER_TOKEN,
) -> int:
    """Estimate the token count of a string.

    Args:
        text: Text to estimate.
        characters_per_token: Average characters per token.

    Returns:
        0 for an empty string, otherwise at least 1.

    Example:
        >>> estimate_tokens("Hello, world!")
        3
    """
    if not text:
        return 0
    return max(1, math.ceil(len(text) / characters_per_token))


class TokenEstimator:
    """Estimate token costs of segments, entries and transcripts.

    Holds only immutable configuration and a serializer, so a single
    instance can be shared freely between threads.

    Example:
        >>> estimator = TokenEstimator()
        >>> estimator.estimate_entry(ToolOutput.from_text("123456789"))
        5
    """

    def __init__(
        self,
        config: EstimatorConfig | None = None,
        serializer: Serializer | None = None,
    ) -> None:
        """Initialize the estimator.

        Args:
            config: Calibration constants. Uses defaults if not provided.
            serializer: Converts structured values to strings. Defaults to
                compact JSON via ``to_json_string``.
        """
        self._config = config or EstimatorConfig()
        self._serializer = serializer or to_json_string

    @property
    def config(self) -> EstimatorConfig:
        return self._config

    def estimate_tokens(self, text: str) -> int:
        """Estimate tokens for raw text."""
        return estimate_tokens(text, self._config.characters_per_token)

    def estimate_structured(self, value: Any) -> int:
        """Estimate tokens for a structured value via its serialized form."""
        return self.estimate_tokens(self._serializer(value))

    def estimate_segment(self, segment: Any) -> int:
        """Estimate tokens for a segment.

        Unknown segment kinds cost nothing.
        """
        if isinstance(segment, TextSegment):
            return self.estimate_tokens(segment.content)
        if isinstance(segment, StructuredSegment):
            return self.estimate_structured(segment.content)
        return 0

    def estimate_tool_call(self, call: ToolCall) -> int:
        """Estimate tokens for one tool call: name, serialized arguments and overhead."""
        return (
            self.estimate_tokens(call.name)
            + self.estimate_structured(call.arguments)
            + self._config.tool_call_overhead
        )

    def estimate_entry(self, entry: Any) -> int:
        """Estimate tokens for a transcript entry.

        - Instructions, prompts and responses: sum of segment tokens.
        - Tool calls: name + serialized arguments + per-call overhead, per call.
        - Tool output: sum of segment tokens + output overhead.
        - Unknown entry kinds: 0.

        Args:
            entry: Entry to estimate.

        Returns:
            Estimated token count.
        """
        if isinstance(entry, (Instructions, Prompt, Response)):
            return sum(self.estimate_segment(s) for s in entry.segments)

        if isinstance(entry, ToolCalls):
            return sum(self.estimate_tool_call(call) for call in entry.calls)

        if isinstance(entry, ToolOutput):
            segment_tokens = sum(self.estimate_segment(s) for s in entry.segments)
            return segment_tokens + self._config.tool_output_overhead

        return 0

    def estimate_transcript(self, entries: Iterable[Any]) -> int:
        """Estimate tokens for all entries, summed in order."""
        return sum(self.estimate_entry(entry) for entry in entries)

    def estimated_token_count(self, item: Any) -> int:
        """Estimate tokens for a string, segment, tool call, entry or entries.

        Iterables other than a ``Transcript`` are validated into one first,
        so entry dicts are costed like the entries they describe.

        Args:
            item: Value to estimate.

        Returns:
            Estimated token count.

        Raises:
            TypeError: If ``item`` is none of the supported kinds.
            pydantic.ValidationError: If an iterable holds values that are
                not entries.
        """
        if isinstance(item, str):
            return self.estimate_tokens(item)
        if isinstance(item, SEGMENT_TYPES):
            return self.estimate_segment(item)
        if isinstance(item, ToolCall):
            return self.estimate_tool_call(item)
        if isinstance(item, ENTRY_TYPES):
            return self.estimate_entry(item)
        if isinstance(item, (BaseModel, Mapping)) or not isinstance(item, Iterable):
            raise TypeError(f"Cannot estimate tokens for {type(item).__name__}")

        from transcript_budget.transcript.history import Transcript

        if not isinstance(item, Transcript):
            item = Transcript(item)
        return self.estimate_transcript(item)


@lru_cache(maxsize=1)
def default_estimator() -> TokenEstimator:
    """Shared estimator with default configuration."""
    return TokenEstimator()
