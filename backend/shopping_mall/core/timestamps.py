"""Timestamp Normalization — ISO-8601 UTC rendering for the wire.

Invariants:
    - Output format: YYYY-MM-DDTHH:MM:SS.mmmZ (millisecond precision, trailing Z)
    - Naive datetimes (e.g. read back from SQLite) are interpreted as UTC
"""

from datetime import datetime, timezone


def as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def to_iso(value: datetime) -> str:
    return as_utc(value).isoformat(timespec="milliseconds").replace("+00:00", "Z")
