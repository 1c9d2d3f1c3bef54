"""Conversation transcript data model.

Entries and segments are frozen pydantic models discriminated by a ``type``
tag. A ``Transcript`` is an immutable, chronologically ordered sequence of
entries.

Example:
    >>> from transcript_budget.transcript import Instructions, Prompt, Transcript
    >>> transcript = Transcript([
    ...     Instructions.from_text("Answer briefly."),
    ...     Prompt.from_text("What is 2 + 2?"),
    ... ])
    >>> len(transcript)
    2
"""

from transcript_budget.transcript.history import Transcript
from transcript_budget.transcript.messages import entries_from_messages
from transcript_budget.transcript.models import (
    ENTRY_TYPES,
    SEGMENT_TYPES,
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
    UnknownEntry,
    UnknownSegment,
)

__all__ = [
    "ENTRY_TYPES",
    "SEGMENT_TYPES",
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
    "entries_from_messages",
]
