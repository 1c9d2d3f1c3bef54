"""Entry and segment types for conversation transcripts.

Entries and segments are tagged variants discriminated by their ``type``
field. Tags this package does not recognize validate into
``UnknownEntry`` / ``UnknownSegment`` instead of failing, so transcripts
produced by a newer protocol revision still load and cost zero tokens.

Segments:
    TextSegment: Plain text content.
    StructuredSegment: An opaque structured value (serialized for costing).
    UnknownSegment: Any unrecognized segment kind.

Entries:
    Instructions: System-level instructions for the model.
    Prompt: A user prompt.
    Response: A model response.
    ToolCalls: A batch of tool invocations issued by the model.
    ToolOutput: The output of a single tool invocation.
    UnknownEntry: Any unrecognized entry kind.
"""

from __future__ import annotations

import copy
from typing import Annotated, Any, Literal, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag, field_validator

_SEGMENT_TAGS = frozenset({"text", "structure"})
_ENTRY_TAGS = frozenset({"instructions", "prompt", "response", "tool_calls", "tool_output"})

_E = TypeVar("_E", bound="_SegmentEntry")


def _detach(value: Any) -> Any:
    """Deep-copy container payloads so later caller mutation cannot change the cost.

    Other objects are kept by reference.
    """
    if isinstance(value, (dict, list, set)):
        return copy.deepcopy(value)
    return value


class _Costed(BaseModel):
    """Frozen base for transcript values that have an estimated token cost."""

    model_config = ConfigDict(frozen=True)

    @property
    def estimated_token_count(self) -> int:
        """Estimated token cost using the default estimator."""
        from transcript_budget.tokens.estimator import default_estimator

        return default_estimator().estimated_token_count(self)


# === Segments ===


class TextSegment(_Costed):
    """Plain text segment."""

    type: Literal["text"] = "text"
    content: str = ""


class StructuredSegment(_Costed):
    """Structured segment carrying an opaque, serializable value."""

    type: Literal["structure"] = "structure"
    content: Any = None

    @field_validator("content")
    @classmethod
    def copy_content(cls, value: Any) -> Any:
        return _detach(value)


class UnknownSegment(_Costed):
    """Segment of a kind this package does not recognize."""

    model_config = ConfigDict(frozen=True, extra="allow")

    type: str = "unknown"


def _segment_tag(value: Any) -> str:
    if isinstance(value, UnknownSegment):
        return "unknown"
    kind = value.get("type") if isinstance(value, dict) else getattr(value, "type", None)
    return kind if kind in _SEGMENT_TAGS else "unknown"


Segment = Annotated[
    Union[
        Annotated[TextSegment, Tag("text")],
        Annotated[StructuredSegment, Tag("structure")],
        Annotated[UnknownSegment, Tag("unknown")],
    ],
    Discriminator(_segment_tag),
]


# === Tool calls ===


class ToolCall(_Costed):
    """A single tool invocation.

    Attributes:
        name: Name of the invoked tool.
        arguments: Structured arguments passed to the tool. Dict, list and set
            arguments are copied on construction.
        id: Optional call identifier linking the call to its output.
    """

    name: str = ""
    arguments: Any = Field(default_factory=dict)
    id: str = ""

    @field_validator("arguments")
    @classmethod
    def copy_arguments(cls, value: Any) -> Any:
        return _detach(value)


# === Entries ===


class _SegmentEntry(_Costed):
    """Entry whose payload is an ordered sequence of segments."""

    id: str = ""
    segments: tuple[Segment, ...] = ()

    @classmethod
    def from_text(cls: type[_E], text: str, **kwargs: Any) -> _E:
        """Build an entry holding a single text segment.

        Args:
            text: Text content of the segment.
            **kwargs: Additional entry fields (e.g. ``id``).

        Returns:
            A new entry of the calling class.
        """
        return cls(segments=(TextSegment(content=text),), **kwargs)

    @property
    def text(self) -> str:
        """Concatenated text of all text segments."""
        return "\n".join(s.content for s in self.segments if isinstance(s, TextSegment))


class Instructions(_SegmentEntry):
    """System instructions for the model."""

    type: Literal["instructions"] = "instructions"


class Prompt(_SegmentEntry):
    """A user prompt."""

    type: Literal["prompt"] = "prompt"


class Response(_SegmentEntry):
    """A model response."""

    type: Literal["response"] = "response"


class ToolOutput(_SegmentEntry):
    """Output produced by a tool.

    Attributes:
        tool_name: Name of the tool that produced the output.
        call_id: Identifier of the originating tool call.
    """

    type: Literal["tool_output"] = "tool_output"
    tool_name: str = ""
    call_id: str = ""


class ToolCalls(_Costed):
    """A batch of tool calls issued by the model."""

    type: Literal["tool_calls"] = "tool_calls"
    id: str = ""
    calls: tuple[ToolCall, ...] = ()


class UnknownEntry(_Costed):
    """Entry of a kind this package does not recognize."""

    model_config = ConfigDict(frozen=True, extra="allow")

    type: str = "unknown"
    id: str = ""


def _entry_tag(value: Any) -> str:
    if isinstance(value, UnknownEntry):
        return "unknown"
    kind = value.get("type") if isinstance(value, dict) else getattr(value, "type", None)
    return kind if kind in _ENTRY_TAGS else "unknown"


Entry = Annotated[
    Union[
        Annotated[Instructions, Tag("instructions")],
        Annotated[Prompt, Tag("prompt")],
        Annotated[Response, Tag("response")],
        Annotated[ToolCalls, Tag("tool_calls")],
        Annotated[ToolOutput, Tag("tool_output")],
        Annotated[UnknownEntry, Tag("unknown")],
    ],
    Discriminator(_entry_tag),
]

SEGMENT_TYPES = (TextSegment, StructuredSegment, UnknownSegment)
ENTRY_TYPES = (Instructions, Prompt, Response, ToolCalls, ToolOutput, UnknownEntry)
