"""Constants and enumerations for trading session classification.

This module holds the single source of truth for the session rule: the
ordered boundary table consumed by both the scalar classifier and the
columnar annotator. Boundaries are fixed UTC standard-time hours; daylight
saving time is not considered.
"""

from enum import Enum
from typing import Tuple

from .exceptions import InvalidSessionLabelError


# ============================================================================
# Enumerations
# ============================================================================

class TradingSession(str, Enum):
    """Enumeration of trading session labels.

    Members compare equal to their display strings, so a member can be
    written straight into a string column or compared against user input:
    - TOKYO: Asian markets only
    - TOKYO_LONDON: Tokyo close overlapping the London open
    - LONDON: European markets only
    - LONDON_NEW_YORK: London/New York overlap (highest liquidity)
    - NEW_YORK: US markets only
    - UNDEFINED: Outside every named session
    """
    TOKYO = "Tokyo"
    TOKYO_LONDON = "Tokyo_London"
    LONDON = "London"
    LONDON_NEW_YORK = "London_NewYork"
    NEW_YORK = "NewYork"
    UNDEFINED = "Undefined"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> "TradingSession":
        """Convert a display string to a member.

        Matching is exact and case-sensitive.

        Raises:
            InvalidSessionLabelError: If ``text`` is not a known label
        """
        try:
            return cls(text)
        except ValueError:
            raise InvalidSessionLabelError(
                f"Unknown trading session label: {text!r}",
                expected=[member.value for member in cls]
            ) from None


# ============================================================================
# Time Constants
# ============================================================================

SECONDS_PER_DAY: int = 86_400
"""Number of seconds in a UTC day (leap seconds are not represented)."""

SECONDS_PER_HOUR: int = 3_600
"""Number of seconds in an hour."""

HOURS_PER_DAY: int = 24
"""Number of distinct hour-of-day values."""


# ============================================================================
# Trading Session Boundaries (UTC, standard time)
# ============================================================================

SESSION_BOUNDARIES: Tuple[Tuple[int, TradingSession], ...] = (
    (6, TradingSession.TOKYO),              # 00:00 - 07:00
    (8, TradingSession.TOKYO_LONDON),       # 07:00 - 09:00
    (12, TradingSession.LONDON),            # 09:00 - 13:00
    (15, TradingSession.LONDON_NEW_YORK),   # 13:00 - 16:00
    (21, TradingSession.NEW_YORK),          # 16:00 - 22:00
)
"""Ordered ``(inclusive_upper_hour, session)`` pairs.

Evaluated in ascending order, first match wins. Upper bounds must be
strictly increasing; hours above the last bound fall to FALLBACK_SESSION.
"""

FALLBACK_SESSION: TradingSession = TradingSession.UNDEFINED
"""Label for hours not covered by SESSION_BOUNDARIES (22:00 - 24:00)."""


# ============================================================================
# Column Names
# ============================================================================

DEFAULT_TIME_COLUMN: str = "time"
"""Name of the input column holding Unix timestamps in seconds."""

DEFAULT_SESSION_COLUMN: str = "Session"
"""Name of the derived column holding session labels."""
