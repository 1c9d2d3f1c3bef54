"""Conversion from chat-completion style message dicts to transcript entries.

Role mapping:
    system    -> Instructions
    user      -> Prompt
    assistant -> Response (text content) and/or ToolCalls (``tool_calls``)
    tool      -> ToolOutput

Messages with any other role become ``UnknownEntry`` values so they are
kept in order but cost nothing.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from typing import Any

from transcript_budget.transcript.models import (
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
)

logger = logging.getLogger(__name__)


def entries_from_messages(messages: Iterable[dict[str, Any]]) -> list[Any]:
    """Convert message dicts into transcript entries.

    Args:
        messages: Messages with ``role``, ``content`` and optional ``tool_calls``.

    Returns:
        Entries in the same chronological order as the messages.
    """
    entries: list[Any] = []

    for msg in messages:
        role = msg.get("role", "")
        segments = _content_segments(msg.get("content"))

        if role == "system":
            entries.append(Instructions(segments=segments))
        elif role == "user":
            entries.append(Prompt(segments=segments))
        elif role == "assistant":
            tool_calls = msg.get("tool_calls") or []
            if segments or not tool_calls:
                entries.append(Response(segments=segments))
            if tool_calls:
                entries.append(ToolCalls(calls=tuple(_tool_call(tc) for tc in tool_calls)))
        elif role == "tool":
            entries.append(
                ToolOutput(
                    segments=segments,
                    tool_name=msg.get("name") or "",
                    call_id=msg.get("tool_call_id") or "",
                )
            )
        else:
            logger.debug("Unrecognized message role %r, keeping as unknown entry", role)
            entries.append(UnknownEntry(type=role or "unknown"))

    return entries


def _content_segments(content: Any) -> tuple[Segment, ...]:
    """Split message content into segments.

    Strings become a single text segment. Lists of content blocks map
    ``{"type": "text"}`` blocks to text segments and anything else to
    structured segments.
    """
    if content is None or content == "":
        return ()
    if isinstance(content, str):
        return (TextSegment(content=content),)
    if isinstance(content, list):
        segments: list[Segment] = []
        for block in content:
            if isinstance(block, str):
                segments.append(TextSegment(content=block))
            elif isinstance(block, dict) and block.get("type") == "text":
                segments.append(TextSegment(content=block.get("text", "")))
            else:
                segments.append(StructuredSegment(content=block))
        return tuple(segments)
    return (StructuredSegment(content=content),)


def _tool_call(tc: dict[str, Any]) -> ToolCall:
    """Build a ToolCall from an OpenAI-style or flat tool call dict."""
    function = tc.get("function") or {}
    name = function.get("name") or tc.get("name") or ""
    arguments = function.get("arguments", tc.get("arguments", {}))

    # OpenAI encodes arguments as a JSON string
    if isinstance(arguments, str):
        try:
            arguments = json.loads(arguments)
        except json.JSONDecodeError:
            logger.debug("Tool call %r has non-JSON arguments, keeping raw string", name)

    return ToolCall(name=name, arguments=arguments, id=tc.get("id") or "")
