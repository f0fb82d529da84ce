"""
UTC datetime utilities for document timestamps.

Content documents store creation and update times as ISO-8601 strings
(e.g. "2024-05-01T12:30:00.000Z"), the format the site's pages sort and
display. Use these helpers instead of formatting datetimes ad hoc.
"""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """
    Return the current UTC datetime with timezone info.

    Returns:
        Timezone-aware datetime in UTC
    """
    return datetime.now(UTC)


def to_iso_z(dt: datetime) -> str:
    """
    Format a datetime as an ISO-8601 UTC string with millisecond precision and a Z suffix.

    Naive datetimes are assumed to be UTC.

    Args:
        dt: Datetime to format

    Returns:
        String such as "2024-05-01T12:30:00.000Z"
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    dt = dt.astimezone(UTC)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"


def utc_now_iso() -> str:
    """Return the current UTC time as an ISO-8601 string (see to_iso_z)."""
    return to_iso_z(utc_now())
