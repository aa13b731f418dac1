"""Configuration domain models."""

from __future__ import annotations

from .app_settings import LoggingSettings
from .progress_settings import ProgressSettings
from .settings import Settings

__all__ = [
    "LoggingSettings",
    "ProgressSettings",
    "Settings",
]
