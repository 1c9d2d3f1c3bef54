"""Budget report for a transcript."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rich.console import Console, ConsoleOptions, RenderResult


@dataclass
class BudgetReport:
    """Token budget summary for a transcript.

    Attributes:
        entry_count: Total number of entries.
        entries_by_kind: Count of entries grouped by entry type.
        tokens_by_kind: Estimated tokens grouped by entry type.
        estimated_tokens: Raw estimated token count.
        safe_estimated_tokens: Estimate including safety buffer and system overhead.
        limit_tokens: Token count above which the limit is approached.
        max_tokens: Model context window size.
        approaching_limit: Whether the safe estimate exceeds ``limit_tokens``.
    """

    entry_count: int = 0
    entries_by_kind: dict[str, int] = field(default_factory=dict)
    tokens_by_kind: dict[str, int] = field(default_factory=dict)
    estimated_tokens: int = 0
    safe_estimated_tokens: int = 0
    limit_tokens: int = 0
    max_tokens: int = 0
    approaching_limit: bool = False

    @property
    def headroom_tokens(self) -> int:
        """Tokens left before the limit threshold (negative once exceeded)."""
        return self.limit_tokens - self.safe_estimated_tokens

    @property
    def utilization(self) -> float:
        """Safe estimate as a fraction of ``max_tokens``.

        Returns:
            The fraction, or 0.0 if ``max_tokens`` is zero.
        """
        if self.max_tokens == 0:
            return 0.0
        return self.safe_estimated_tokens / self.max_tokens

    def __str__(self) -> str:
        lines = [
            "Budget Report",
            f"  Entries:          {self.entry_count}",
            f"  Estimated tokens: {self.estimated_tokens}",
            f"  Safe estimate:    {self.safe_estimated_tokens}",
            f"  Limit threshold:  {self.limit_tokens} of {self.max_tokens}",
            f"  Utilization:      {self.utilization:.1%}",
            f"  Approaching limit: {'yes' if self.approaching_limit else 'no'}",
        ]
        if self.entries_by_kind:
            lines.append("  Entries by kind:")
            for kind, count in sorted(self.entries_by_kind.items()):
                tokens = self.tokens_by_kind.get(kind, 0)
                lines.append(f"    {kind}: {count} ({tokens} tokens)")
        return "\n".join(lines)

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        """Render as a Rich table when passed to ``rich.print()`` or ``Console.print()``."""
        from rich.panel import Panel
        from rich.table import Table
        from rich.text import Text

        if self.entry_count == 0:
            yield Panel("No entries recorded", title="Budget Report", expand=False)
            return

        table = Table(title="Budget Report")
        table.add_column("Kind", style="bold cyan")
        table.add_column("Entries", justify="right")
        table.add_column("Tokens", justify="right")

        for kind in sorted(self.entries_by_kind):
            table.add_row(
                kind,
                str(self.entries_by_kind[kind]),
                f"{self.tokens_by_kind.get(kind, 0):,}",
            )

        table.add_section()
        table.add_row("Total", str(self.entry_count), f"{self.estimated_tokens:,}", style="bold")
        yield table

        style = "bold red" if self.approaching_limit else "green"
        yield Text(
            f"Safe estimate: {self.safe_estimated_tokens:,} / "
            f"limit {self.limit_tokens:,} ({self.utilization:.1%} of {self.max_tokens:,})",
            style=style,
        )
