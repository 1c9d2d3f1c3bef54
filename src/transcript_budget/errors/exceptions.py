"""Exceptions raised by transcript-budget.

Token estimation and budget selection never raise on well-formed input;
errors here come from loading configuration.
"""

from __future__ import annotations

from typing import Any, ClassVar


class BudgetError(Exception):
    """Base exception for transcript-budget.

    Keyword details passed to the constructor are readable as attributes,
    falling back to the class ``_defaults`` (e.g. ``error.config_key``).

    Attributes:
        message: Human-readable error message.
        cause: Underlying exception, if any.
        details: Extra context given as keyword arguments.
    """

    _defaults: ClassVar[dict[str, Any]] = {}

    def __init__(self, message: str, *, cause: Exception | None = None, **details: Any) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.details = details

    def __getattr__(self, name: str) -> Any:
        # details is unset until __init__ runs
        lookup = {**self._defaults, **self.__dict__.get("details", {})}
        try:
            return lookup[name]
        except KeyError:
            raise AttributeError(f"'{type(self).__name__}' has no attribute '{name}'") from None

    def __str__(self) -> str:
        if self.cause is None:
            return self.message
        return f"{self.message} (caused by: {self.cause})"


class ConfigurationError(BudgetError):
    """A settings file could not be loaded.

    Raised by ``BudgetSettings.from_yaml`` when the file is unreadable, not
    valid YAML, not a mapping, or holds values that fail validation.

    Details: ``config_key`` (the file path), ``expected``, ``actual``.
    """

    _defaults: ClassVar[dict[str, Any]] = {"config_key": None, "expected": None, "actual": None}
