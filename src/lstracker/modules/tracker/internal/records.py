"""Lookups over stored collections. Items that are not mappings never match."""

from __future__ import annotations

from typing import Any, MutableMapping, Optional

from .normalize import record_id


def find_record(items: list, target_id: str) -> Optional[MutableMapping[str, Any]]:
    for item in items:
        if record_id(item) == target_id:
            return item
    return None


def without_record(items: list, target_id: str) -> tuple[list, bool]:
    """Return ``items`` minus every record with ``target_id`` and whether any was dropped."""
    kept = [item for item in items if record_id(item) != target_id]
    return kept, len(kept) != len(items)
