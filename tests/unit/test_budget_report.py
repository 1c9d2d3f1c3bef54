"""Tests for BudgetManager.report() and BudgetReport rendering."""

from __future__ import annotations

import pytest
from rich.console import Console

from transcript_budget.context import BudgetConfig, BudgetManager, BudgetReport
from transcript_budget.transcript import (
    Instructions,
    Prompt,
    ToolOutput,
    Transcript,
    UnknownEntry,
)


def _render(report: BudgetReport) -> str:
    console = Console(record=True, width=120)
    console.print(report)
    return console.export_text()


@pytest.fixture
def small_transcript() -> Transcript:
    """Provide a transcript with known per-kind costs."""
    return Transcript(
        [
            Instructions.from_text("x" * 45),  # 10
            Prompt.from_text("x" * 9),  # 2
            Prompt.from_text("x" * 9),  # 2
            ToolOutput.from_text("x" * 9),  # 5
            UnknownEntry(type="reasoning"),  # 0
        ]
    )


class TestReport:
    """Tests for building a BudgetReport."""

    def test_counts_by_kind(self, small_transcript: Transcript) -> None:
        report = BudgetManager().report(small_transcript)

        assert report.entry_count == 5
        assert report.entries_by_kind == {
            "instructions": 1,
            "prompt": 2,
            "tool_output": 1,
            "reasoning": 1,
        }
        assert report.tokens_by_kind == {
            "instructions": 10,
            "prompt": 4,
            "tool_output": 5,
            "reasoning": 0,
        }

    def test_estimates_and_limit(self, small_transcript: Transcript) -> None:
        report = BudgetManager().report(small_transcript)

        assert report.estimated_tokens == 19
        assert report.safe_estimated_tokens == 19 + 4 + 100
        assert report.limit_tokens == 2867
        assert report.max_tokens == 4096
        assert report.approaching_limit is False
        assert report.headroom_tokens == 2867 - 123

    def test_overrides(self, small_transcript: Transcript) -> None:
        """Threshold and max_tokens can be overridden per report."""
        report = BudgetManager().report(small_transcript, threshold=0.5, max_tokens=200)

        assert report.limit_tokens == 100
        assert report.max_tokens == 200
        assert report.approaching_limit is True
        assert report.headroom_tokens == -23

    def test_matches_manager_estimates(self, sample_transcript: Transcript) -> None:
        """Report totals agree with the direct estimates."""
        manager = BudgetManager(BudgetConfig(max_tokens=1000))
        report = manager.report(sample_transcript)

        assert report.estimated_tokens == manager.estimated_token_count(sample_transcript)
        assert report.safe_estimated_tokens == manager.safe_estimated_token_count(sample_transcript)
        assert report.approaching_limit == manager.is_approaching_limit(sample_transcript)

    def test_empty_transcript(self) -> None:
        report = BudgetManager().report(Transcript())

        assert report.entry_count == 0
        assert report.entries_by_kind == {}
        assert report.safe_estimated_tokens == 100


class TestBudgetReportRendering:
    """Tests for plain and Rich rendering."""

    def test_utilization(self) -> None:
        report = BudgetReport(safe_estimated_tokens=1024, max_tokens=4096)
        assert report.utilization == 0.25

    def test_utilization_without_max_tokens(self) -> None:
        assert BudgetReport().utilization == 0.0

    def test_str(self, small_transcript: Transcript) -> None:
        text = str(BudgetManager().report(small_transcript))

        assert text.startswith("Budget Report")
        assert "Estimated tokens: 19" in text
        assert "Safe estimate:    123" in text
        assert "Approaching limit: no" in text
        assert "prompt: 2 (4 tokens)" in text

    def test_rich_table(self, small_transcript: Transcript) -> None:
        output = _render(BudgetManager().report(small_transcript))

        assert "Budget Report" in output
        assert "instructions" in output
        assert "tool_output" in output
        assert "Total" in output
        assert "Safe estimate: 123" in output

    def test_rich_empty(self) -> None:
        output = _render(BudgetManager().report(Transcript()))
        assert "No entries recorded" in output
