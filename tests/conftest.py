"""Pytest configuration and fixtures for datebasic tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so datebasic can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(autouse=True)
def utc_local_zone(monkeypatch: pytest.MonkeyPatch) -> None:
    """Read local fields in UTC unless a test picks another zone."""
    monkeypatch.setenv("DATEBASIC_TZ", "UTC")


@pytest.fixture
def seoul(monkeypatch: pytest.MonkeyPatch) -> None:
    """Read local fields in Asia/Seoul (UTC+9, no DST)."""
    monkeypatch.setenv("DATEBASIC_TZ", "Asia/Seoul")


@pytest.fixture
def new_york(monkeypatch: pytest.MonkeyPatch) -> None:
    """Read local fields in America/New_York (DST observed)."""
    monkeypatch.setenv("DATEBASIC_TZ", "America/New_York")
