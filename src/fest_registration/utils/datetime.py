"""Date-time helpers for record timestamps."""

from datetime import datetime, timezone


def utcnow() -> datetime:
    """Return the current UTC time as a naive datetime, as stored by the database."""

    return datetime.now(timezone.utc).replace(tzinfo=None)
