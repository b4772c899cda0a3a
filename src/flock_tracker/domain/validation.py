"""Field checks shared by the record types.

The ``check_*`` helpers run inside ``__post_init__`` so that every record,
whether built by a factory, copied with ``replace`` or decoded from
storage, satisfies the same rules. The ``clean_*`` helpers normalize user
input before a record is built.
"""

import math
from datetime import UTC, datetime

from flock_tracker.domain.errors import InvalidRecordError


def clean_text(value: str, label: str) -> str:
    """Return the stripped value or raise if it is blank."""
    cleaned = value.strip()
    if not cleaned:
        raise InvalidRecordError(f"{label} must not be empty")
    return cleaned


def as_utc(value: datetime) -> datetime:
    """Treat a naive datetime as UTC; leave aware ones alone."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def check_text(value: str, label: str) -> None:
    if not value.strip():
        raise InvalidRecordError(f"{label} must not be empty")


def check_aware(value: datetime, label: str) -> None:
    if value.tzinfo is None or value.utcoffset() is None:
        raise InvalidRecordError(f"{label} must carry a timezone")


def check_non_negative(value: int, label: str) -> None:
    if value < 0:
        raise InvalidRecordError(f"{label} must not be negative, got {value}")


def check_positive(value: float, label: str) -> None:
    if not math.isfinite(value) or value <= 0:
        raise InvalidRecordError(f"{label} must be a positive number, got {value}")
