from __future__ import annotations

from datetime import datetime, timezone


def iso_timestamp(value: datetime) -> str:
    """UTC ISO 8601 with milliseconds and a ``Z`` suffix."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    text = value.astimezone(timezone.utc).isoformat(timespec="milliseconds")
    return text.replace("+00:00", "Z")
