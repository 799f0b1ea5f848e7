"""
Unit tests for configuration loading and logging setup.
"""

import logging
from pathlib import Path

import pytest

from trading_sessions.config import SessionsConfig, load_config
from trading_sessions.core.exceptions import InvalidConfigError, MissingConfigError
from trading_sessions.monitoring.logger import PACKAGE_LOGGER, get_logger, setup_logger

REPO_CONFIG = Path(__file__).resolve().parents[2] / "config" / "config.yaml"


@pytest.fixture
def reset_package_logger():
    """Remove handlers installed by setup_logger after the test."""
    yield
    root = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    root.setLevel(logging.NOTSET)


def _write(tmp_path, text: str) -> Path:
    path = tmp_path / "config.yaml"
    path.write_text(text)
    return path


def test_defaults():
    """Test default settings."""
    config = SessionsConfig()

    assert config.time_column == "time"
    assert config.session_column == "Session"
    assert config.log_level == "INFO"
    assert config.log_file is None


def test_load_repo_config():
    """The shipped config file loads to the defaults."""
    assert load_config(REPO_CONFIG) == SessionsConfig()


def test_load_custom_columns(tmp_path):
    """Test column and monitoring overrides."""
    path = _write(tmp_path, """
columns:
  time: ts
  session: label
monitoring:
  log_level: debug
  log_file: logs/sessions.log
""")
    config = load_config(path)

    assert config.time_column == "ts"
    assert config.session_column == "label"
    assert config.log_level == "debug"
    assert config.log_file == "logs/sessions.log"


def test_partial_and_empty_files(tmp_path):
    """Missing sections fall back to defaults."""
    assert load_config(_write(tmp_path, "")) == SessionsConfig()
    assert load_config(_write(tmp_path, "columns:\n  time: ts\n")).session_column == "Session"


def test_missing_file(tmp_path):
    """A missing file is reported with its path."""
    with pytest.raises(MissingConfigError) as exc_info:
        load_config(tmp_path / "nope.yaml")

    assert "nope.yaml" in str(exc_info.value)


@pytest.mark.parametrize("text", [
    "- just\n- a list\n",
    "columns: [time]\n",
    "columns:\n  time: 5\n",
    "columns:\n  time: ''\n",
    "columns:\n  time: same\n  session: same\n",
    "monitoring:\n  log_level: LOUD\n",
])
def test_invalid_config(tmp_path, text):
    """Malformed documents and bad values are rejected."""
    with pytest.raises(InvalidConfigError):
        load_config(_write(tmp_path, text))


def test_configure_logging_writes_file(tmp_path, reset_package_logger):
    """Configured log file receives package log records."""
    log_file = tmp_path / "logs" / "sessions.log"
    config = SessionsConfig(log_level="debug", log_file=str(log_file))

    root = config.configure_logging()
    get_logger("trading_sessions.test").info("Hello", rows=3)
    for handler in root.handlers:
        handler.flush()

    assert root.level == logging.DEBUG
    assert log_file.exists()
    assert "Hello | rows=3" in log_file.read_text()


def test_setup_logger_replaces_handlers(reset_package_logger):
    """Repeated setup does not stack handlers."""
    setup_logger()
    root = setup_logger(level="WARNING")

    assert len(root.handlers) == 1
    assert root.level == logging.WARNING


def test_setup_logger_accepts_lowercase_level(reset_package_logger):
    """Level names are case-insensitive, as in the config file."""
    root = setup_logger(level="debug")

    assert root.level == logging.DEBUG
