"""LoadWatch core.

Discovery, watching, aggregation and notification of container load
progress. Depends on PySide6.QtCore only.
"""

from .aggregator import ProgressAggregator
from .capabilities import DefaultCapabilityAdapter
from .data_source import DataSource
from .discovery import DiscoveredItem, discover_loadables
from .models import (
    LoadState,
    ProgressSession,
    ProgressSnapshot,
    WatchEntry,
    WatchList,
    format_progress_text,
    progress_fraction,
)
from .notifier import LoggingProgressIndicator, ProgressNotifier
from .protocols import CapabilityAdapter, IndicatorOptions, LoadSignals, ProgressIndicator
from .tracker import ContainerLoadTracker
from .watcher import LoadWatcher

__all__ = [
    "CapabilityAdapter",
    "ContainerLoadTracker",
    "DataSource",
    "DefaultCapabilityAdapter",
    "DiscoveredItem",
    "IndicatorOptions",
    "LoadSignals",
    "LoadState",
    "LoadWatcher",
    "LoggingProgressIndicator",
    "ProgressAggregator",
    "ProgressIndicator",
    "ProgressNotifier",
    "ProgressSession",
    "ProgressSnapshot",
    "WatchEntry",
    "WatchList",
    "discover_loadables",
    "format_progress_text",
    "progress_fraction",
]
