"""
Pytest configuration and shared fixtures for stringhelpers tests.
"""

import logging

import pytest

from stringhelpers.utils.log import get_logger


@pytest.fixture
def sample_texts() -> list[str]:
    """Strings covering the usual boundary cases."""
    return [
        "",
        "t",
        "test",
        "www",
        "test.test",
        "...",
        "a.b..c.",
        "  padded\t\n",
        "MiXeD 123",
        "12.34",
        "aaaa",
    ]


@pytest.fixture
def join_segments():
    """Factory fixture that rebuilds a string from split segments."""

    def _join(segments: list[str], delimiter: str) -> str:
        return delimiter.join(segments)

    return _join


@pytest.fixture
def debug_logging(caplog):
    """Capture DEBUG records from the package logger."""
    logger = get_logger()
    previous = logger.level
    logger.setLevel(logging.DEBUG)
    caplog.set_level(logging.DEBUG, logger=logger.name)
    yield caplog
    logger.setLevel(previous)
