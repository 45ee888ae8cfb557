"""
UTC datetime utilities for consistent timezone handling.

All datetime values in the codec are timezone-aware UTC. Wire-shape times
are integer microseconds since epoch; numeric store values are
milliseconds. Use these helpers instead of datetime.now() or ad-hoc
timestamp arithmetic.
"""

from datetime import UTC, datetime, timedelta

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_ONE_MICROSECOND = timedelta(microseconds=1)


def utc_now() -> datetime:
    """
    Return the current UTC datetime with timezone info.

    Returns:
        Timezone-aware datetime in UTC
    """
    return datetime.now(UTC)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """
    Ensure a datetime is UTC-aware.

    - If None, returns None
    - If naive, assumes UTC and attaches timezone
    - If aware, converts to UTC

    Args:
        dt: A datetime that may be naive or aware

    Returns:
        UTC-aware datetime or None
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        # Naive datetime - assume it's UTC and attach timezone
        return dt.replace(tzinfo=UTC)

    return dt.astimezone(UTC)


def to_microseconds(dt: datetime) -> int:
    """
    Return microseconds since epoch for a datetime (exact, no float rounding).

    Args:
        dt: Naive (treated as UTC) or aware datetime

    Returns:
        Integer microseconds since 1970-01-01T00:00:00Z
    """
    return (ensure_utc(dt) - _EPOCH) // _ONE_MICROSECOND


def from_microseconds(micros: int | float) -> datetime:
    """
    Create a UTC-aware datetime from microseconds since epoch.

    Args:
        micros: Microseconds since epoch (floats are truncated)

    Returns:
        UTC-aware datetime
    """
    return _EPOCH + timedelta(microseconds=int(micros))


def from_timestamp_ms_utc(timestamp_ms: int | float) -> datetime:
    """
    Create a UTC-aware datetime from a millisecond Unix timestamp.
    Numeric timestamps written by JavaScript clients use milliseconds.

    Args:
        timestamp_ms: Unix timestamp in milliseconds

    Returns:
        UTC-aware datetime
    """
    return from_microseconds(timestamp_ms * 1000)


def to_iso_millis(dt: datetime) -> str:
    """
    Format a datetime as ISO 8601 UTC with millisecond precision.

    Matches JavaScript Date.toISOString(), e.g. "2024-01-01T00:00:00.000Z".

    Args:
        dt: Naive (treated as UTC) or aware datetime

    Returns:
        ISO 8601 string ending in "Z"
    """
    utc = ensure_utc(dt)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"


def parse_iso_utc(value: str) -> datetime | None:
    """
    Parse an ISO 8601 string into a UTC-aware datetime.

    Accepts a trailing "Z". Returns None when the string is not a valid
    timestamp instead of raising.

    Args:
        value: ISO 8601 string

    Returns:
        UTC-aware datetime or None
    """
    try:
        parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        return None
    return ensure_utc(parsed)
