"""
Trading Sessions - Classify Unix timestamps into global trading sessions.

All calculations use UTC standard time; daylight saving time is not
considered.
"""

from .core.constants import (
    TradingSession,
    SESSION_BOUNDARIES,
    FALLBACK_SESSION,
)
from .core.exceptions import (
    TradingSessionsError,
    InvalidTimestampError,
    InvalidSessionLabelError,
    TimestampColumnError,
    InvalidConfigError,
    MissingConfigError,
)
from .sessions import (
    hour_of_day,
    session_for_hour,
    timestamp_from_datetime,
    SessionClassifier,
    SessionVerifier,
    classify,
    verify,
    BulkSessionAnnotator,
    annotate,
    annotate_pandas,
    session_expression,
)
from .config import SessionsConfig, load_config

__version__ = "0.1.0"

__all__ = [
    "TradingSession",
    "SESSION_BOUNDARIES",
    "FALLBACK_SESSION",
    "TradingSessionsError",
    "InvalidTimestampError",
    "InvalidSessionLabelError",
    "TimestampColumnError",
    "InvalidConfigError",
    "MissingConfigError",
    "hour_of_day",
    "session_for_hour",
    "timestamp_from_datetime",
    "SessionClassifier",
    "SessionVerifier",
    "classify",
    "verify",
    "BulkSessionAnnotator",
    "annotate",
    "annotate_pandas",
    "session_expression",
    "SessionsConfig",
    "load_config",
]
