"""Input normalization shared by records, mutations and queries.

Nothing here rejects input: free text is trimmed, numbers are coerced and
clamped, and wrongly shaped collections collapse to empty lists.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from typing import Any

PROGRESS_MIN = 0
PROGRESS_MAX = 100


def clean_text(value: Any) -> str:
    """Trim surrounding whitespace; ``None`` becomes ``""``."""
    if value is None:
        return ""
    return str(value).strip()


def split_tags(value: Any) -> list[str]:
    """Split a comma-separated string (or an iterable of strings) into trimmed, non-empty tags."""
    if value is None:
        return []
    if isinstance(value, str):
        pieces: Iterable[Any] = value.split(",")
    elif isinstance(value, Iterable) and not isinstance(value, Mapping):
        pieces = value
    else:
        pieces = [value]
    return [tag for tag in (clean_text(p) for p in pieces) if tag]


def split_codes(value: Any) -> list[str]:
    """Like ``split_tags`` but upper-cased, for KSB codes."""
    return [tag.upper() for tag in split_tags(value)]


def round_half_up(number: float) -> int:
    return math.floor(number + 0.5)


def coerce_progress(value: Any) -> int:
    """Best-effort integer conversion.

    Ints pass through unchanged and floats round half-up. An infinity becomes a
    full-range step, so it saturates both as a value and as a delta. NaN and
    anything non-numeric is 0.
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return 0
    if math.isnan(number):
        return 0
    if math.isinf(number):
        span = PROGRESS_MAX - PROGRESS_MIN
        return span if number > 0 else -span
    return round_half_up(number)


def clamp_progress(value: Any) -> int:
    return max(PROGRESS_MIN, min(PROGRESS_MAX, coerce_progress(value)))


def ensure_list(value: Any) -> list:
    """Collections must be lists; any other value becomes an empty list."""
    return value if isinstance(value, list) else []


def record_id(item: Any) -> Any:
    """The ``id`` of a stored record, or None for items that are not mappings."""
    if isinstance(item, Mapping):
        return item.get("id")
    return None


def field_text(item: Any, key: str) -> str:
    """Read a text field from a stored record, tolerating missing keys and odd shapes."""
    if not isinstance(item, Mapping):
        return ""
    value = item.get(key)
    return "" if value is None else str(value)


def field_list(item: Any, key: str) -> list[str]:
    if not isinstance(item, Mapping):
        return []
    value = item.get(key)
    if not isinstance(value, list):
        return []
    return [str(v) for v in value]
