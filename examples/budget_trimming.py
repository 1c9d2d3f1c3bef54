#!/usr/bin/env python3
"""Budget trimming example.

This example demonstrates:
- Building a transcript from chat-completion messages
- Checking a transcript against the context limit
- Trimming to a token budget while keeping the instructions
- Printing a budget report
"""

from rich import print as rprint

from transcript_budget import BudgetConfig, BudgetManager, Transcript, setup_logging

MESSAGES = [
    {"role": "system", "content": "You are a helpful coding assistant."},
    {"role": "user", "content": "Can you read the configuration file?"},
    {
        "role": "assistant",
        "content": None,
        "tool_calls": [
            {
                "id": "call_1",
                "type": "function",
                "function": {"name": "read_file", "arguments": '{"path": "config.yaml"}'},
            }
        ],
    },
    {
        "role": "tool",
        "tool_call_id": "call_1",
        "name": "read_file",
        "content": "budget:\n  max_tokens: 8192\n" * 20,
    },
    {"role": "assistant", "content": "The file sets max_tokens to 8192."},
    {"role": "user", "content": "Thanks! What else should I configure?"},
]


def main():
    setup_logging()

    transcript = Transcript.from_messages(MESSAGES)

    # Small context window for demo
    manager = BudgetManager(BudgetConfig(max_tokens=256))

    print(f"Entries: {len(transcript)}")
    print(f"Estimated tokens: {manager.estimated_token_count(transcript)}")
    print(f"Safe estimate: {manager.safe_estimated_token_count(transcript)}")

    if manager.is_approaching_limit(transcript):
        print("\nApproaching the context limit, trimming...")
        result = manager.trim(transcript, budget=60)
        print(f"  Removed {result.removed_count} entries")
        print(f"  Tokens: {result.tokens_before} -> {result.tokens_after}")
        print(f"  Kept: {[entry.type for entry in result.entries]}")
        transcript = result.entries

    print()
    rprint(manager.report(transcript))


if __name__ == "__main__":
    main()
