"""Pytest configuration and fixtures for Datekit tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so datekit can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from datekit.clock import FixedClock  # noqa: E402
from datekit.config import reset_settings  # noqa: E402
from datekit.units.timezone import Timezone  # noqa: E402

# 2019-06-04 08:25:15 UTC
FIXED_NOW_MILLIS = 1_559_636_715_000


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch):
    """Run every test with settings read from a clean environment."""
    for name in (
        "DATEKIT_TIMEZONE",
        "DATEKIT_FIRST_DAY_OF_WEEK",
        "DATEKIT_MINIMAL_DAYS_IN_FIRST_WEEK",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def utc() -> Timezone:
    return Timezone.utc()


@pytest.fixture
def shanghai() -> Timezone:
    return Timezone.of("Asia/Shanghai")


@pytest.fixture
def new_york() -> Timezone:
    return Timezone.of("America/New_York")


@pytest.fixture
def fixed_clock() -> FixedClock:
    return FixedClock(FIXED_NOW_MILLIS)
