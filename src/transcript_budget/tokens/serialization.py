"""String serialization of structured content for token estimation."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from typing import Any

from pydantic import BaseModel

logger = logging.getLogger(__name__)

Serializer = Callable[[Any], str]


def to_json_string(value: Any) -> str:
    """Serialize a structured value to compact JSON.

    Pydantic models use their own JSON dump. Everything else goes through
    ``json.dumps`` with sorted keys and compact separators so the length of
    a given value is stable. Values JSON cannot represent fall back to
    ``str()``. Non-ASCII characters are kept as-is rather than escaped.

    Fallbacks, in order:

    1. Keys that cannot be sorted (e.g. ``{1: ..., "b": ...}``) are dumped
       in insertion order.
    2. Values ``json.dumps`` rejects (e.g. circular references) are costed
       by ``str(value)``, with a warning.
    3. If even ``str(value)`` fails a warning is logged and the empty
       string is returned.

    Args:
        value: Structured value to serialize.

    Returns:
        Serialized string, or ``""`` if the value cannot be represented.
    """
    try:
        if isinstance(value, BaseModel):
            return value.model_dump_json()
        try:
            return _dumps(value, sort_keys=True)
        except TypeError:
            # Mixed key types cannot be sorted
            return _dumps(value, sort_keys=False)
    except (TypeError, ValueError) as e:
        logger.warning(
            "Could not serialize %s as JSON for token estimation, using str(): %s",
            type(value).__name__,
            e,
        )

    try:
        return str(value)
    except (TypeError, ValueError) as e:
        logger.warning(
            "Could not serialize %s for token estimation, counting as empty: %s",
            type(value).__name__,
            e,
        )
        return ""


def _dumps(value: Any, *, sort_keys: bool) -> str:
    return json.dumps(
        value,
        sort_keys=sort_keys,
        separators=(",", ":"),
        ensure_ascii=False,
        default=str,
    )
