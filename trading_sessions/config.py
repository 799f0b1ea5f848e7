"""
Configuration loading.

Only column names and logging are configurable; session boundaries are
fixed constants.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .core.constants import DEFAULT_TIME_COLUMN, DEFAULT_SESSION_COLUMN
from .core.exceptions import InvalidConfigError, MissingConfigError
from .monitoring.logger import setup_logger

DEFAULT_CONFIG_FILE = "config/config.yaml"


@dataclass(frozen=True)
class SessionsConfig:
    """
    Runtime settings.

    Attributes:
        time_column: Input column with Unix timestamps in seconds
        session_column: Output column for session labels
        log_level: Logging level name (e.g. "INFO")
        log_file: Optional log file path
    """
    time_column: str = DEFAULT_TIME_COLUMN
    session_column: str = DEFAULT_SESSION_COLUMN
    log_level: str = "INFO"
    log_file: Optional[str] = None

    def __post_init__(self):
        for key in ("time_column", "session_column"):
            value = getattr(self, key)
            if not isinstance(value, str) or not value:
                raise InvalidConfigError(
                    "Column name must be a non-empty string",
                    key=key,
                    value=value
                )

        if self.time_column == self.session_column:
            raise InvalidConfigError(
                "Time and session columns must differ",
                column=self.time_column
            )

        if not isinstance(logging.getLevelName(str(self.log_level).upper()), int):
            raise InvalidConfigError(
                "Unknown log level",
                log_level=self.log_level
            )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SessionsConfig":
        """Build config from a parsed YAML mapping."""
        columns = data.get('columns') or {}
        monitoring = data.get('monitoring') or {}

        if not isinstance(columns, dict) or not isinstance(monitoring, dict):
            raise InvalidConfigError(
                "'columns' and 'monitoring' must be mappings"
            )

        return cls(
            time_column=columns.get('time', DEFAULT_TIME_COLUMN),
            session_column=columns.get('session', DEFAULT_SESSION_COLUMN),
            log_level=monitoring.get('log_level', 'INFO'),
            log_file=monitoring.get('log_file')
        )

    def configure_logging(self) -> logging.Logger:
        """Install log handlers according to the monitoring settings."""
        return setup_logger(log_file=self.log_file, level=self.log_level.upper())


def load_config(path: Union[str, Path] = DEFAULT_CONFIG_FILE) -> SessionsConfig:
    """
    Load configuration from a YAML file.

    An empty file yields the defaults.

    Raises:
        MissingConfigError: If the file does not exist
        InvalidConfigError: If the document is not a mapping or holds bad values
    """
    config_path = Path(path)
    if not config_path.exists():
        raise MissingConfigError(
            "Configuration file not found",
            path=str(config_path)
        )

    with open(config_path, 'r') as f:
        data = yaml.safe_load(f)

    if data is None:
        return SessionsConfig()

    if not isinstance(data, dict):
        raise InvalidConfigError(
            "Configuration must be a mapping",
            path=str(config_path)
        )

    return SessionsConfig.from_dict(data)
