"""Shared test fixtures and configuration for transcript-budget tests."""

from __future__ import annotations

import math
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from transcript_budget.transcript import (
    Instructions,
    Prompt,
    Response,
    ToolCall,
    ToolCalls,
    ToolOutput,
    Transcript,
)


def _text_costing(tokens: int) -> str:
    return "x" * math.floor(tokens * 4.5)


@pytest.fixture
def text_costing() -> Callable[[int], str]:
    """Factory for strings whose default estimate is exactly the given token count.

    ``floor(tokens * 4.5)`` characters always round up to ``tokens``.

    Usage:
        def test_something(text_costing):
            prompt = Prompt.from_text(text_costing(10))  # costs 10 tokens
    """
    return _text_costing


@pytest.fixture
def sample_messages() -> list[dict[str, Any]]:
    """Provide sample chat-completion message history."""
    return [
        {"role": "system", "content": "You are a helpful assistant."},
        {"role": "user", "content": "Hello, can you help me?"},
        {"role": "assistant", "content": "Of course! What do you need help with?"},
        {"role": "user", "content": "I need to read a file."},
        {
            "role": "assistant",
            "content": "I'll help you read the file.",
            "tool_calls": [
                {
                    "id": "call_123",
                    "type": "function",
                    "function": {"name": "read_file", "arguments": '{"path": "test.txt"}'},
                }
            ],
        },
        {
            "role": "tool",
            "tool_call_id": "call_123",
            "name": "read_file",
            "content": "File contents here",
        },
        {"role": "assistant", "content": "The file contains: File contents here"},
    ]


@pytest.fixture
def sample_transcript() -> Transcript:
    """Provide a transcript with one entry of every known kind."""
    return Transcript(
        [
            Instructions.from_text("You are a helpful assistant."),
            Prompt.from_text("Read test.txt please."),
            ToolCalls(calls=(ToolCall(name="read_file", arguments={"path": "test.txt"}),)),
            ToolOutput.from_text("File contents here", tool_name="read_file"),
            Response.from_text("The file contains: File contents here"),
        ]
    )


@pytest.fixture
def mock_env(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Set up environment variables for settings tests.

    Returns the dict of set variables for assertions.
    """
    env_vars = {
        "TRANSCRIPT_BUDGET_BUDGET__MAX_TOKENS": "8192",
        "TRANSCRIPT_BUDGET_BUDGET__LIMIT_THRESHOLD": "0.8",
        "TRANSCRIPT_BUDGET_ESTIMATOR__CHARACTERS_PER_TOKEN": "4.0",
        "TRANSCRIPT_BUDGET_LOGGING__LEVEL": "DEBUG",
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    return env_vars


@pytest.fixture
def settings_yaml_file(tmp_path: Path) -> Path:
    """Create a temporary YAML settings file."""
    settings_file = tmp_path / "settings.yaml"
    settings_file.write_text(
        """
estimator:
  characters_per_token: 3.5
  tool_call_overhead: 8
budget:
  safety_buffer: 0.1
  system_overhead_tokens: 50
  max_tokens: 16384
logging:
  level: INFO
""",
        encoding="utf-8",
    )
    return settings_file
