"""
Datetime utilities.

Provides timezone-aware datetime functions.
"""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """
    Get current UTC datetime with timezone info.

    Returns:
        Current datetime in UTC with timezone awareness
    """
    return datetime.now(UTC)


def unix_time(moment: datetime | None = None) -> int:
    """
    Convert a datetime to whole seconds since the Unix epoch.

    Args:
        moment: Datetime to convert, defaults to now

    Returns:
        Unix timestamp in seconds
    """
    if moment is None:
        moment = utc_now()
    return int(moment.timestamp())
