"""
Session Classifier - Identifies and verifies trading sessions.

Based on UTC standard time (no daylight saving adjustment):
- Tokyo: 00:00-07:00 UTC
- Tokyo_London: 07:00-09:00 UTC
- London: 09:00-13:00 UTC
- London_NewYork: 13:00-16:00 UTC
- NewYork: 16:00-22:00 UTC
- Undefined: 22:00-24:00 UTC
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Union

from ..core.constants import TradingSession
from ..monitoring.logger import get_logger
from .hours import hour_of_day, session_for_hour, timestamp_from_datetime

logger = get_logger(__name__)


@dataclass(frozen=True)
class SessionClassifier:
    """
    Classifies a single Unix timestamp.

    The timestamp is validated on construction.

    Attributes:
        unix_timestamp: Seconds since the Unix epoch (UTC)
    """
    unix_timestamp: int

    def __post_init__(self):
        hour_of_day(self.unix_timestamp)

    @classmethod
    def from_datetime(cls, dt: datetime) -> "SessionClassifier":
        """Build a classifier from a datetime (naive means UTC)."""
        return cls(timestamp_from_datetime(dt))

    @property
    def hour(self) -> int:
        """UTC hour of day (0-23)."""
        return hour_of_day(self.unix_timestamp)

    def classify(self) -> TradingSession:
        """Determine session for the timestamp."""
        return session_for_hour(self.hour)

    def is_trading_hours(self) -> bool:
        """Check if timestamp falls inside a named session."""
        return self.classify() != TradingSession.UNDEFINED


@dataclass(frozen=True)
class SessionVerifier:
    """
    Checks a claimed session label against the classified one.

    The claim may be a plain string or a TradingSession member; comparison
    is exact and case-sensitive.
    """
    unix_timestamp: int
    session: Union[str, TradingSession]

    def verify(self) -> bool:
        """Return True if the claimed session matches the timestamp."""
        identified = SessionClassifier(self.unix_timestamp).classify()
        matched = self.session == identified.value

        if not matched:
            logger.debug(
                "Session mismatch",
                timestamp=self.unix_timestamp,
                claimed=self.session,
                identified=identified.value
            )

        return matched


def classify(unix_timestamp: int) -> TradingSession:
    """Classify a Unix timestamp into its trading session."""
    return SessionClassifier(unix_timestamp).classify()


def verify(unix_timestamp: int, session: Union[str, TradingSession]) -> bool:
    """Return True if ``session`` is the session of ``unix_timestamp``."""
    return SessionVerifier(unix_timestamp, session).verify()
