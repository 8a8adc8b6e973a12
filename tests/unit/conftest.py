"""
Pytest configuration for unit tests.

Isolates each test from DATEMATH_* environment settings and provides the
fixed reference instant used across the suite.
"""

import os
from datetime import datetime

import pytest

from datemath.config import reset_config
from tests.unit.helpers import REFERENCE


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch):
    """Drop DATEMATH_* variables and the cached config around every test."""
    for name in list(os.environ):
        if name.startswith("DATEMATH_"):
            monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def reference() -> datetime:
    """Monday 2018-06-18 08:39:07 UTC."""
    return REFERENCE
