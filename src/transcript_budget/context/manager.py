"""Context budget manager.

Computes conservative token estimates for a transcript, checks them
against a model's context limit and selects the entries that fit a
token budget.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, Any

from transcript_budget.context.config import BudgetConfig
from transcript_budget.context.report import BudgetReport
from transcript_budget.tokens.estimator import TokenEstimator
from transcript_budget.transcript.history import Transcript
from transcript_budget.transcript.models import Entry, Instructions

if TYPE_CHECKING:
    from transcript_budget.config.settings import BudgetSettings

logger = logging.getLogger(__name__)


@dataclass
class TrimResult:
    """Result of trimming a transcript to a token budget.

    Attributes:
        entries: The kept entries, in chronological order.
        removed_count: Number of entries dropped.
        tokens_before: Estimated tokens before trimming.
        tokens_after: Estimated tokens after trimming.
        budget: The requested token budget.
    """

    entries: Transcript
    removed_count: int
    tokens_before: int
    tokens_after: int
    budget: int

    @property
    def over_budget(self) -> bool:
        """True when the kept entries exceed the budget.

        Only the always-retained instructions entry (or a negative budget)
        can cause this.
        """
        return self.tokens_after > self.budget


class BudgetManager:
    """Token budget manager for conversation transcripts.

    All operations are pure reads of the transcript; nothing is mutated
    and no state is kept between calls. Transcript arguments may be any
    iterable of entries or entry dicts; they are validated into a
    ``Transcript`` first.

    Example:
        >>> manager = BudgetManager()
        >>> transcript = Transcript([...])
        >>> if manager.is_approaching_limit(transcript):
        ...     kept = manager.entries_within_token_budget(transcript, 2000)
    """

    def __init__(
        self,
        config: BudgetConfig | None = None,
        estimator: TokenEstimator | None = None,
    ) -> None:
        """Initialize the budget manager.

        Args:
            config: Safety margin and limit configuration. Uses defaults if not provided.
            estimator: Token estimator. Uses a default estimator if not provided.
        """
        self._config = config or BudgetConfig()
        self._estimator = estimator or TokenEstimator()

    @classmethod
    def from_settings(cls, settings: BudgetSettings) -> BudgetManager:
        """Build a manager from loaded settings.

        Args:
            settings: Settings providing estimator and budget configuration.

        Returns:
            A configured BudgetManager.
        """
        return cls(config=settings.budget, estimator=TokenEstimator(settings.estimator))

    @property
    def config(self) -> BudgetConfig:
        return self._config

    @property
    def estimator(self) -> TokenEstimator:
        return self._estimator

    def estimated_token_count(self, transcript: Iterable[Entry]) -> int:
        """Estimated token count of all entries."""
        return self._estimator.estimate_transcript(_as_transcript(transcript))

    def safe_estimated_token_count(self, transcript: Iterable[Entry]) -> int:
        """Estimated token count with safety buffer and system overhead.

        ``base + floor(base * safety_buffer) + system_overhead_tokens``

        Args:
            transcript: Entries to estimate.

        Returns:
            Conservative token estimate.
        """
        return self._safe_from_base(self.estimated_token_count(transcript))

    def limit_threshold_tokens(
        self,
        threshold: float | None = None,
        max_tokens: int | None = None,
    ) -> int:
        """Token count above which the limit is considered approached.

        Args:
            threshold: Fraction of ``max_tokens``. Defaults to config.
            max_tokens: Context window size. Defaults to config.

        Returns:
            ``floor(max_tokens * threshold)``.
        """
        if threshold is None:
            threshold = self._config.limit_threshold
        if max_tokens is None:
            max_tokens = self._config.max_tokens
        return math.floor(max_tokens * threshold)

    def is_approaching_limit(
        self,
        transcript: Iterable[Entry],
        threshold: float | None = None,
        max_tokens: int | None = None,
    ) -> bool:
        """Check whether the safe estimate exceeds the limit threshold.

        Args:
            transcript: Entries to check.
            threshold: Fraction of ``max_tokens`` that triggers (default: 0.70).
            max_tokens: Model context window size (default: 4096).

        Returns:
            True if the safe estimate exceeds ``floor(max_tokens * threshold)``.
        """
        current = self.safe_estimated_token_count(transcript)
        return current > self.limit_threshold_tokens(threshold, max_tokens)

    def entries_within_token_budget(self, transcript: Iterable[Entry], budget: int) -> list[Entry]:
        """Select the entries that fit within a token budget.

        Sliding window over the transcript:
        1. The first instructions entry is always kept, even when it alone
           exceeds the budget. Any later instructions entries are dropped.
        2. The remaining entries are walked from newest to oldest and kept
           while they fit. The walk stops at the first entry that does not
           fit; older entries are not considered after that.
        3. The result is the instructions entry followed by the kept
           entries in chronological order.

        Args:
            transcript: Entries to select from.
            budget: Maximum number of tokens.

        Returns:
            The selected entries.
        """
        entries = _as_transcript(transcript)
        token_count = 0

        instructions = next((e for e in entries if isinstance(e, Instructions)), None)
        if instructions is not None:
            token_count += self._estimator.estimate_entry(instructions)

        candidates = [e for e in entries if not isinstance(e, Instructions)]

        # Collected newest first
        accepted: list[Entry] = []
        for entry in reversed(candidates):
            entry_tokens = self._estimator.estimate_entry(entry)
            if token_count + entry_tokens > budget:
                break
            accepted.append(entry)
            token_count += entry_tokens
        accepted.reverse()

        logger.debug(
            "Selected %d of %d entries (%d tokens, budget %d)",
            len(accepted) + (instructions is not None),
            len(entries),
            token_count,
            budget,
        )

        if instructions is None:
            return accepted
        return [instructions, *accepted]

    def trim(self, transcript: Iterable[Entry], budget: int) -> TrimResult:
        """Trim a transcript to a token budget.

        Args:
            transcript: Entries to trim.
            budget: Maximum number of tokens.

        Returns:
            TrimResult with the kept entries and token bookkeeping.
        """
        entries = _as_transcript(transcript)
        kept = Transcript(self.entries_within_token_budget(entries, budget))

        result = TrimResult(
            entries=kept,
            removed_count=len(entries) - len(kept),
            tokens_before=self.estimated_token_count(entries),
            tokens_after=self.estimated_token_count(kept),
            budget=budget,
        )

        if result.over_budget:
            logger.warning(
                "Kept entries exceed the token budget (%d > %d)",
                result.tokens_after,
                budget,
            )
        else:
            logger.debug(
                "Trimmed %d entries: %d -> %d tokens",
                result.removed_count,
                result.tokens_before,
                result.tokens_after,
            )

        return result

    def report(
        self,
        transcript: Iterable[Entry],
        threshold: float | None = None,
        max_tokens: int | None = None,
    ) -> BudgetReport:
        """Summarize token usage of a transcript against the context limit.

        Args:
            transcript: Entries to summarize.
            threshold: Fraction of ``max_tokens`` that triggers. Defaults to config.
            max_tokens: Context window size. Defaults to config.

        Returns:
            BudgetReport with per-kind counts and limit information.
        """
        if max_tokens is None:
            max_tokens = self._config.max_tokens
        report = BudgetReport(max_tokens=max_tokens)

        for entry in _as_transcript(transcript):
            kind = entry.type
            tokens = self._estimator.estimate_entry(entry)
            report.entry_count += 1
            report.entries_by_kind[kind] = report.entries_by_kind.get(kind, 0) + 1
            report.tokens_by_kind[kind] = report.tokens_by_kind.get(kind, 0) + tokens
            report.estimated_tokens += tokens

        report.safe_estimated_tokens = self._safe_from_base(report.estimated_tokens)
        report.limit_tokens = self.limit_threshold_tokens(threshold, max_tokens)
        report.approaching_limit = report.safe_estimated_tokens > report.limit_tokens
        return report

    def _safe_from_base(self, base: int) -> int:
        buffer = math.floor(base * self._config.safety_buffer)
        return base + buffer + self._config.system_overhead_tokens


def _as_transcript(entries: Iterable[Any]) -> Transcript:
    """Validate entries (including entry dicts) into a Transcript."""
    if isinstance(entries, Transcript):
        return entries
    return Transcript(entries)


@lru_cache(maxsize=1)
def default_manager() -> BudgetManager:
    """Shared budget manager with default configuration."""
    return BudgetManager()


def estimated_token_count(item: Any) -> int:
    """Estimated token count of a string, segment, entry or transcript."""
    return default_manager().estimator.estimated_token_count(item)


def safe_estimated_token_count(transcript: Iterable[Entry]) -> int:
    """Conservative token estimate using the default manager."""
    return default_manager().safe_estimated_token_count(transcript)


def is_approaching_limit(
    transcript: Iterable[Entry],
    threshold: float | None = None,
    max_tokens: int | None = None,
) -> bool:
    """Limit check using the default manager."""
    return default_manager().is_approaching_limit(transcript, threshold, max_tokens)


def entries_within_token_budget(transcript: Iterable[Entry], budget: int) -> list[Entry]:
    """Budget selection using the default manager."""
    return default_manager().entries_within_token_budget(transcript, budget)
