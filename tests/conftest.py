"""
Pytest configuration and shared fixtures for LoadWatch tests.
"""

from __future__ import annotations

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from loadwatch.config.models.progress_settings import ProgressSettings
from tests.helpers import TEST_DELAY_MS, RecordingIndicator


@pytest.fixture
def indicator() -> RecordingIndicator:
    """Create an indicator that records calls."""
    return RecordingIndicator()


@pytest.fixture
def settings() -> ProgressSettings:
    """Progress settings with a short end delay."""
    return ProgressSettings(delay_ms=TEST_DELAY_MS)


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Run each test away from any real configuration or .env file."""
    monkeypatch.chdir(tmp_path)
    for key in ("LOADWATCH_PROGRESS__DELAY_MS", "LOADWATCH_LOGGING__LEVEL"):
        monkeypatch.delenv(key, raising=False)
