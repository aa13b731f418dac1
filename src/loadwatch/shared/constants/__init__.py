"""
LoadWatch Constants Module

This module provides centralized constants for LoadWatch.
All default option values and message templates are defined here to ensure
a single source of truth.
"""

from .logging import LogConfig, LogMessages
from .progress import ProgressDefaults, ProgressMessages

__all__ = [
    "LogConfig",
    "LogMessages",
    "ProgressDefaults",
    "ProgressMessages",
]
