"""KSB library and evidence operations.

Evidence cites KSB codes by value. Deleting a KSB leaves evidence that
mentions its code untouched.
"""

from __future__ import annotations

from typing import Any

from lstracker.modules.tracker.internal import without_record

from .tracker import Tracker
from .types import Evidence, Ksb, Record


def add_ksb(tracker: Tracker, code: Any, text: Any = "") -> Record:
    record = Ksb(code=code, text=text).to_record()
    tracker.state.ksb_library.insert(0, record)
    tracker.commit()
    return record


def delete_ksb(tracker: Tracker, ksb_id: str) -> bool:
    tracker.state.ksb_library, removed = without_record(tracker.state.ksb_library, ksb_id)
    if removed:
        tracker.commit()
    return removed


def add_evidence(tracker: Tracker, title: Any, ksb_codes: Any = "", notes: Any = "") -> Record:
    record = Evidence(title=title, ksbs=ksb_codes, notes=notes).to_record()
    tracker.state.evidence.insert(0, record)
    tracker.commit()
    return record


def delete_evidence(tracker: Tracker, evidence_id: str) -> bool:
    tracker.state.evidence, removed = without_record(tracker.state.evidence, evidence_id)
    if removed:
        tracker.commit()
    return removed


__all__ = ["add_ksb", "delete_ksb", "add_evidence", "delete_evidence"]
