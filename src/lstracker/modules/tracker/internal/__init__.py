from .defaults import build_default_payload, default_payload
from .normalize import (
    clamp_progress,
    clean_text,
    coerce_progress,
    ensure_list,
    field_list,
    field_text,
    record_id,
    round_half_up,
    split_codes,
    split_tags,
)
from .records import find_record, without_record
from .storage import FileStorage, KeyValueStorage, MemoryStorage

__all__ = [
    "build_default_payload",
    "default_payload",
    "clamp_progress",
    "clean_text",
    "coerce_progress",
    "ensure_list",
    "field_list",
    "field_text",
    "record_id",
    "round_half_up",
    "split_codes",
    "split_tags",
    "find_record",
    "without_record",
    "FileStorage",
    "KeyValueStorage",
    "MemoryStorage",
]
