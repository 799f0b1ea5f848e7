"""
Session Layer - Trading session identification.

Main Components:
    SessionClassifier: Label a single Unix timestamp
    SessionVerifier: Check a claimed label against a timestamp
    BulkSessionAnnotator: Add a session column to a Polars frame
"""

from .hours import hour_of_day, session_for_hour, timestamp_from_datetime
from .classifier import SessionClassifier, SessionVerifier, classify, verify
from .annotator import (
    BulkSessionAnnotator,
    annotate,
    annotate_pandas,
    session_expression,
)

__all__ = [
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
]
