"""
Pytest configuration and shared fixtures.
"""

import logging

import pytest


@pytest.fixture(autouse=True)
def setup_logging(caplog):
    """
    Setup logging for all tests.

    Package loggers are captured at DEBUG so tests can assert on them.
    """
    caplog.set_level(logging.DEBUG, logger="trading_sessions")


@pytest.fixture
def sample_times():
    """Known timestamps: Tokyo (04:00), London (10:00), London_NewYork (14:00)."""
    return [1708574400, 1708596000, 1708696800]
