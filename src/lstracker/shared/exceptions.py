"""Exceptions shared across the tracker."""


class TrackerError(Exception):
    """Base class for tracker errors."""


class StorageCorruptError(TrackerError):
    """Persisted state exists but is not valid JSON or not a JSON object.

    Recovered inside ``StateStore.load`` by substituting the default dataset.
    """


class ImportParseError(TrackerError):
    """An import payload is not valid JSON or its top level is not an object."""


class StorageWriteError(TrackerError):
    """Writing the state to the storage backend failed.

    The in-memory state stays authoritative until the next successful save.
    """


__all__ = [
    "TrackerError",
    "StorageCorruptError",
    "ImportParseError",
    "StorageWriteError",
]
