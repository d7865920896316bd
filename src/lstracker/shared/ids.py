import secrets
import time
from datetime import datetime, timezone


def generate_id(prefix: str = "id") -> str:
    """Return ``<prefix>_<random hex>_<epoch ms hex>``.

    Not cryptographic; the random part plus the timestamp keep collisions
    negligible for a single user's data.
    """
    return f"{prefix}_{secrets.token_hex(6)}_{int(time.time() * 1000):x}"


def now_iso() -> str:
    """Current UTC time as an ISO-8601 string (millisecond precision, ``Z`` suffix)."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


__all__ = ["generate_id", "now_iso"]
