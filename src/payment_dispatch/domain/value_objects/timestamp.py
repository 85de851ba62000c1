from __future__ import annotations

from datetime import UTC, datetime


def require_utc(value: datetime, name: str = "datetime") -> datetime:
    """Return value unchanged if it is a UTC datetime.

    Payment timestamps are compared and rendered as ISO-8601 with a
    +00:00 offset, so only tzinfo=UTC is accepted; a naive value or a
    different offset is rejected even if it denotes the same instant.

    Raises:
        ValueError: If value is not a datetime with tzinfo=UTC.
    """
    if not isinstance(value, datetime):
        raise ValueError(f"{name} must be a datetime with tzinfo=UTC, got {type(value).__name__}")

    if value.tzinfo is not UTC:
        raise ValueError(f"{name} must have tzinfo=UTC, got tzinfo={value.tzinfo}")

    return value
