"""
Hour-of-day extraction and the session rule lookup.

Everything here is pure and safe to call from any thread.
"""

import operator
from datetime import datetime, timezone

from ..core.constants import (
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    HOURS_PER_DAY,
    SESSION_BOUNDARIES,
    FALLBACK_SESSION,
    TradingSession,
)
from ..core.exceptions import InvalidTimestampError


def _as_timestamp(timestamp) -> int:
    """Coerce an integer-like value (int, numpy integer) to int."""
    if isinstance(timestamp, bool):
        raise InvalidTimestampError(
            "Timestamp must be an integer, not bool",
            timestamp=timestamp
        )
    try:
        value = operator.index(timestamp)
    except TypeError:
        raise InvalidTimestampError(
            "Timestamp must be integer seconds since the Unix epoch",
            timestamp=timestamp,
            type=type(timestamp).__name__
        ) from None
    if value < 0:
        raise InvalidTimestampError(
            "Timestamp must be non-negative",
            timestamp=value
        )
    return value


def hour_of_day(timestamp: int) -> int:
    """
    Extract the UTC hour of day from a Unix timestamp.

    Args:
        timestamp: Seconds since the Unix epoch

    Returns:
        Hour in the range 0-23
    """
    return (_as_timestamp(timestamp) % SECONDS_PER_DAY) // SECONDS_PER_HOUR


def session_for_hour(hour: int) -> TradingSession:
    """
    Map an hour of day to its trading session.

    Walks SESSION_BOUNDARIES in ascending order; the first inclusive upper
    bound that is >= hour wins.
    """
    try:
        if isinstance(hour, bool):
            raise TypeError
        hour = operator.index(hour)
    except TypeError:
        raise InvalidTimestampError(
            "Hour must be an integer",
            hour=hour,
            type=type(hour).__name__
        ) from None

    if not 0 <= hour < HOURS_PER_DAY:
        raise InvalidTimestampError("Hour must be in 0-23", hour=hour)

    for upper_hour, session in SESSION_BOUNDARIES:
        if hour <= upper_hour:
            return session

    return FALLBACK_SESSION


def timestamp_from_datetime(dt: datetime) -> int:
    """
    Convert a datetime to whole Unix seconds.

    Naive datetimes are taken as UTC wall-clock time. Sub-second
    precision is dropped.
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return _as_timestamp(int(dt.timestamp()))
