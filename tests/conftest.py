"""
Pytest configuration and shared fixtures for linegrep tests.
"""

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch):
    """Keep the caller's LINEGREP_* variables out of the tests."""
    monkeypatch.delenv("LINEGREP_DEBUG", raising=False)
    monkeypatch.delenv("LINEGREP_MAX_STEPS", raising=False)


@pytest.fixture(autouse=True)
def _reset_loguru():
    """Drop sinks added by a test so they never outlive its captured streams."""
    yield
    logger.remove()
