"""Structured logging for trading session classification."""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

PACKAGE_LOGGER = "trading_sessions"


class SessionsLogger:
    """
    Structured logger with keyword argument support.

    Keyword arguments are appended to the message as ``key=value`` pairs.
    """

    def __init__(self, name: str):
        """
        Initialize logger.

        Args:
            name: Logger name (typically __name__)
        """
        self.logger = logging.getLogger(name)

    def _format_message(self, msg: str, **kwargs) -> str:
        """Format message with keyword arguments."""
        if kwargs:
            extra = ' | '.join(f'{k}={v}' for k, v in kwargs.items())
            return f"{msg} | {extra}"
        return msg

    def debug(self, msg: str, **kwargs) -> None:
        """Log debug message."""
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(self._format_message(msg, **kwargs))

    def info(self, msg: str, **kwargs) -> None:
        """Log info message."""
        self.logger.info(self._format_message(msg, **kwargs))

    def warning(self, msg: str, **kwargs) -> None:
        """Log warning message."""
        self.logger.warning(self._format_message(msg, **kwargs))

    def error(self, msg: str, exc_info: bool = False, **kwargs) -> None:
        """Log error message."""
        self.logger.error(self._format_message(msg, **kwargs), exc_info=exc_info)


_loggers = {}


def get_logger(name: str) -> SessionsLogger:
    """
    Get or create a session logger.

    Args:
        name: Logger name (typically __name__)

    Returns:
        SessionsLogger instance
    """
    if name not in _loggers:
        _loggers[name] = SessionsLogger(name)
    return _loggers[name]


def setup_logger(
    log_file: Optional[Union[str, Path]] = None,
    level: Union[str, int] = logging.INFO
) -> logging.Logger:
    """
    Attach handlers to the package logger.

    A stdout handler is always installed; a rotating file handler is added
    when ``log_file`` is given. Calling this again replaces the handlers.

    Args:
        log_file: Optional path of the log file (parent dirs are created)
        level: Logging level name or number

    Returns:
        The configured package logger
    """
    if isinstance(level, str):
        level = level.upper()

    root = logging.getLogger(PACKAGE_LOGGER)
    root.setLevel(level)

    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=10*1024*1024, # 10MB
            backupCount=5
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    return root
