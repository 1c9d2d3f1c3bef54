"""Immutable, ordered transcript of conversation entries."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import TYPE_CHECKING, Any, overload

from pydantic import TypeAdapter

from transcript_budget.transcript.models import Entry

if TYPE_CHECKING:
    from transcript_budget.context.manager import TrimResult

_ENTRIES_ADAPTER: TypeAdapter[tuple[Entry, ...]] = TypeAdapter(tuple[Entry, ...])


class Transcript(Sequence[Entry]):
    """Chronologically ordered, read-only sequence of entries.

    Accepts entry instances or plain dicts; dicts are validated into the
    matching entry type by their ``type`` tag.

    Example:
        >>> transcript = Transcript([
        ...     Instructions.from_text("You are a helpful assistant."),
        ...     Prompt.from_text("Hello!"),
        ... ])
        >>> transcript.estimated_token_count
        9
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Iterable[Any] = ()) -> None:
        self._entries: tuple[Entry, ...] = _ENTRIES_ADAPTER.validate_python(tuple(entries))

    @classmethod
    def from_messages(cls, messages: Iterable[dict[str, Any]]) -> Transcript:
        """Build a transcript from chat-completion style message dicts.

        Args:
            messages: Messages with ``role``, ``content`` and optional ``tool_calls``.

        Returns:
            A new Transcript.
        """
        from transcript_budget.transcript.messages import entries_from_messages

        return cls(entries_from_messages(messages))

    @property
    def entries(self) -> tuple[Entry, ...]:
        """The underlying entries."""
        return self._entries

    @overload
    def __getitem__(self, index: int) -> Entry: ...

    @overload
    def __getitem__(self, index: slice) -> Transcript: ...

    def __getitem__(self, index: int | slice) -> Entry | Transcript:
        if isinstance(index, slice):
            return Transcript(self._entries[index])
        return self._entries[index]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Transcript):
            return self._entries == other._entries
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Transcript({list(self._entries)!r})"

    # -- Token budgeting -------------------------------------------------

    @property
    def estimated_token_count(self) -> int:
        """Estimated token count of all entries."""
        from transcript_budget.context.manager import default_manager

        return default_manager().estimated_token_count(self)

    @property
    def safe_estimated_token_count(self) -> int:
        """Estimated token count including the safety buffer and system overhead."""
        from transcript_budget.context.manager import default_manager

        return default_manager().safe_estimated_token_count(self)

    def is_approaching_limit(
        self,
        threshold: float | None = None,
        max_tokens: int | None = None,
    ) -> bool:
        """Check whether the safe estimate exceeds ``threshold`` of ``max_tokens``.

        Args:
            threshold: Fraction of ``max_tokens`` that triggers. Defaults to 0.70.
            max_tokens: Model context limit. Defaults to 4096.

        Returns:
            True if the safe estimate exceeds the threshold.
        """
        from transcript_budget.context.manager import default_manager

        return default_manager().is_approaching_limit(self, threshold, max_tokens)

    def entries_within_token_budget(self, budget: int) -> list[Entry]:
        """Select entries that fit within ``budget`` tokens.

        See ``BudgetManager.entries_within_token_budget``.
        """
        from transcript_budget.context.manager import default_manager

        return default_manager().entries_within_token_budget(self, budget)

    def trim(self, budget: int) -> TrimResult:
        """Trim to ``budget`` tokens, returning the kept entries and bookkeeping."""
        from transcript_budget.context.manager import default_manager

        return default_manager().trim(self, budget)
