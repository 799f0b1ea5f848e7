"""
Bulk Session Annotator - Adds a session column to tabular data.

The boundary table is folded into a vectorized conditional expression, so
large frames are labelled without a per-row Python loop. Polars evaluation
is lazy: nothing is computed until the frame is collected.
"""

from typing import Union

import numpy as np
import pandas as pd
import polars as pl

from ..core.constants import (
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SESSION_BOUNDARIES,
    FALLBACK_SESSION,
    DEFAULT_TIME_COLUMN,
    DEFAULT_SESSION_COLUMN,
)
from ..core.exceptions import TimestampColumnError
from ..monitoring.logger import get_logger

logger = get_logger(__name__)

Frame = Union[pl.LazyFrame, pl.DataFrame]


def _raise_null_timestamps(time_column: str, null_rows: int) -> None:
    logger.error(
        "Time column contains nulls",
        column=time_column,
        null_rows=null_rows
    )
    raise TimestampColumnError(
        f"Column '{time_column}' contains null timestamps",
        column=time_column,
        null_rows=null_rows
    )


def session_expression(
    time_column: str = DEFAULT_TIME_COLUMN,
    session_column: str = DEFAULT_SESSION_COLUMN
) -> pl.Expr:
    """
    Build the Polars expression that labels ``time_column``.

    Args:
        time_column: Column with Unix timestamps in seconds
        session_column: Name given to the resulting label column

    Returns:
        when/then/otherwise chain aliased to ``session_column``. A null
        timestamp yields a null label, never the fallback session.
    """
    hour = (pl.col(time_column) % SECONDS_PER_DAY) // SECONDS_PER_HOUR

    chain = pl.when(pl.col(time_column).is_null()).then(pl.lit(None, dtype=pl.String))
    for upper_hour, session in SESSION_BOUNDARIES:
        chain = chain.when(hour <= upper_hour).then(pl.lit(session.value))

    return chain.otherwise(pl.lit(FALLBACK_SESSION.value)).alias(session_column)


class BulkSessionAnnotator:
    """
    Adds a session column to a Polars frame.

    Usage:
        annotator = BulkSessionAnnotator(df.lazy())
        annotator.apply_session_column()
        result = annotator.collect()
    """

    def __init__(
        self,
        frame: Frame,
        time_column: str = DEFAULT_TIME_COLUMN,
        session_column: str = DEFAULT_SESSION_COLUMN
    ):
        """
        Initialize annotator.

        Args:
            frame: LazyFrame or DataFrame holding ``time_column``
            time_column: Column with Unix timestamps in seconds
            session_column: Column to add or overwrite
        """
        self.lazyframe: pl.LazyFrame = frame.lazy()
        self.time_column = time_column
        self.session_column = session_column

    @classmethod
    def from_config(cls, frame: Frame, config) -> "BulkSessionAnnotator":
        """Build an annotator using the column names of a SessionsConfig."""
        return cls(
            frame,
            time_column=config.time_column,
            session_column=config.session_column
        )

    def apply_session_column(self) -> pl.LazyFrame:
        """
        Record the session column transformation on the held frame.

        A missing time column is reported by Polars when the frame is
        collected. Null timestamps become null labels, which ``collect``
        rejects.

        Raises:
            TimestampColumnError: If the time column is not integer typed
        """
        schema = self.lazyframe.collect_schema()
        dtype = schema.get(self.time_column)

        if dtype is not None and not dtype.is_integer():
            logger.error(
                "Time column is not integer typed",
                column=self.time_column,
                dtype=dtype
            )
            raise TimestampColumnError(
                f"Column '{self.time_column}' must hold integer Unix seconds",
                column=self.time_column,
                dtype=dtype
            )

        self.lazyframe = self.lazyframe.with_columns(
            session_expression(self.time_column, self.session_column)
        )

        logger.debug(
            "Session column applied",
            time_column=self.time_column,
            session_column=self.session_column
        )

        return self.lazyframe

    def collect(self) -> pl.DataFrame:
        """
        Materialize the held frame.

        Raises:
            TimestampColumnError: If any row has a null timestamp
        """
        result = self.lazyframe.collect()

        if self.session_column in result.columns:
            null_rows = result[self.session_column].null_count()
            if null_rows:
                _raise_null_timestamps(self.time_column, null_rows)

        return result


def annotate(
    frame: Frame,
    time_column: str = DEFAULT_TIME_COLUMN,
    session_column: str = DEFAULT_SESSION_COLUMN
) -> pl.LazyFrame:
    """
    Return ``frame`` as a LazyFrame with the session column applied.

    The result is lazy; call ``.collect()`` to compute it.
    """
    annotator = BulkSessionAnnotator(frame, time_column, session_column)
    return annotator.apply_session_column()


def annotate_pandas(
    df: pd.DataFrame,
    time_column: str = DEFAULT_TIME_COLUMN,
    session_column: str = DEFAULT_SESSION_COLUMN
) -> pd.DataFrame:
    """
    Return a copy of a pandas DataFrame with the session column added.

    Uses the same boundary table as the Polars path through numpy.select,
    which picks the first matching condition per row. A missing time
    column raises pandas' KeyError.

    Raises:
        TimestampColumnError: If the time column is not integer typed
            or contains nulls
    """
    times = df[time_column]

    if not pd.api.types.is_integer_dtype(times):
        logger.error(
            "Time column is not integer typed",
            column=time_column,
            dtype=times.dtype
        )
        raise TimestampColumnError(
            f"Column '{time_column}' must hold integer Unix seconds",
            column=time_column,
            dtype=times.dtype
        )

    null_rows = int(times.isna().sum())
    if null_rows:
        _raise_null_timestamps(time_column, null_rows)

    hour = (times.to_numpy(dtype=np.int64) % SECONDS_PER_DAY) // SECONDS_PER_HOUR

    conditions = [hour <= upper_hour for upper_hour, _ in SESSION_BOUNDARIES]
    choices = [session.value for _, session in SESSION_BOUNDARIES]

    result = df.copy()
    result[session_column] = np.select(
        conditions, choices, default=FALLBACK_SESSION.value
    )

    logger.debug(
        "Session column applied",
        time_column=time_column,
        session_column=session_column,
        rows=len(result)
    )

    return result
