"""
Logging Configuration Constants

This module contains all constants related to logging configuration
and log message templates.
"""


class LogConfig:
    """Log configuration constants."""

    ROOT_LOGGER = "loadwatch"
    DEFAULT_LEVEL = "INFO"
    TIME_FORMAT = "[%H:%M:%S]"
    ENCODING = "utf-8"


class LogMessages:
    """Log message templates (%-style, passed to the logger lazily)."""

    SESSION_STARTED = "Progress session started: %d/%d loaded"
    SESSION_RESUMED = "Progress session resumed before end fired: %d/%d loaded"
    SESSION_ENDING = "All %d watched items loaded; ending in %d ms"
    SESSION_ENDED = "Progress session ended: %d items"
    ENTRY_OVERWRITTEN = "Watch-list name collision, overwriting entry: %s"
    IGNORED_END_ON_IDLE = "Ignoring end-load for %s: entry never began loading"
