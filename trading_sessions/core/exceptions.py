"""Exception hierarchy for trading session classification.

All exceptions inherit from TradingSessionsError for easy catching and
handling. Errors raised by the dataframe engine itself (for example a
missing column) are not wrapped and reach the caller unchanged.
"""

from typing import Any, Dict


class TradingSessionsError(Exception):
    """Base exception for all trading session errors.

    All custom exceptions in this package inherit from this class,
    allowing callers to catch any library error in one place.
    """

    def __init__(self, message: str, **context: Any):
        """Initialize the exception with a message and optional context.

        Args:
            message: Error message describing what went wrong
            **context: Additional context information for logging and debugging
        """
        super().__init__(message)
        self.context: Dict[str, Any] = context

    def __str__(self) -> str:
        """Return string representation including context."""
        if self.context:
            ctx = ', '.join(f'{k}={v}' for k, v in self.context.items())
            return f"{super().__str__()} [{ctx}]"
        return super().__str__()


# ============================================================================
# Configuration Exceptions
# ============================================================================

class InvalidConfigError(TradingSessionsError):
    """Raised when configuration contains invalid values.

    For example a column name that is not a string, or a log level that the
    logging module does not know.
    """


class MissingConfigError(TradingSessionsError):
    """Raised when the configuration file cannot be found."""


# ============================================================================
# Data Exceptions
# ============================================================================

class InvalidTimestampError(TradingSessionsError):
    """Raised when a scalar timestamp is outside the supported domain.

    Timestamps are non-negative integer seconds since the Unix epoch.
    Floats, booleans and negative values are rejected rather than
    silently truncated.
    """


class InvalidSessionLabelError(TradingSessionsError):
    """Raised when a string cannot be converted to a TradingSession."""


class TimestampColumnError(TradingSessionsError):
    """Raised when the time column of a dataset is not integer typed.

    A float or string time column would either fail deep inside the
    dataframe engine or yield labels for truncated values, so the
    annotator refuses it up front.
    """
