"""LoadWatch configuration package.

Usage:
    from loadwatch.config import load_settings
    settings = load_settings()
    settings.progress.delay_ms
"""

from __future__ import annotations

from .loader import configure_logging, get_config, load_settings, reload_config
from .models import LoggingSettings, ProgressSettings, Settings

__all__ = [
    "LoggingSettings",
    "ProgressSettings",
    "Settings",
    "configure_logging",
    "get_config",
    "load_settings",
    "reload_config",
]
