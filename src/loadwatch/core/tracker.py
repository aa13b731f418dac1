"""
Container load tracker.

ContainerLoadTracker wires discovery, watcher, aggregator and notifier for
one host container. Every tracker owns its own watch-list, session and
timer; nothing is shared between trackers.

Example:
    >>> tracker = ContainerLoadTracker(form)
    >>> tracker.end_progress.connect(on_form_loaded)
    >>> tracker.on_container_ready()
"""

from __future__ import annotations

import logging
from typing import Any

from PySide6.QtCore import QObject, Signal

from loadwatch.config.models.progress_settings import ProgressSettings
from loadwatch.core.aggregator import ProgressAggregator
from loadwatch.core.capabilities import DefaultCapabilityAdapter
from loadwatch.core.discovery import discover_loadables
from loadwatch.core.models import ProgressSnapshot, WatchList
from loadwatch.core.notifier import ProgressNotifier
from loadwatch.core.protocols import CapabilityAdapter, ProgressIndicator
from loadwatch.core.watcher import LoadWatcher

logger = logging.getLogger(__name__)


class ContainerLoadTracker(QObject):
    """Tracks every loadable under one container with a single indicator."""

    # Signals (forwarded from the notifier)
    start_progress: Signal = Signal(int, int)  # (total, completed)
    progress_update: Signal = Signal(int, int)  # (total, completed)
    end_progress: Signal = Signal(int)  # (total)

    def __init__(
        self,
        container: Any,
        settings: ProgressSettings | None = None,
        indicator: ProgressIndicator | None = None,
        adapter: CapabilityAdapter | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)

        self._container = container
        self._adapter: CapabilityAdapter = adapter or DefaultCapabilityAdapter()
        self._watching = False
        self._watched_count = 0

        self._notifier = ProgressNotifier(settings, indicator, parent=self)
        self._aggregator = ProgressAggregator(self._notifier, WatchList())
        self._watcher = LoadWatcher(self._aggregator)

        self._notifier.start_progress.connect(self.start_progress)
        self._notifier.progress_update.connect(self.progress_update)
        self._notifier.end_progress.connect(self.end_progress)

    @property
    def container(self) -> Any:
        return self._container

    @property
    def notifier(self) -> ProgressNotifier:
        return self._notifier

    @property
    def aggregator(self) -> ProgressAggregator:
        return self._aggregator

    @property
    def watch_list(self) -> WatchList:
        return self._aggregator.watch_list

    @property
    def is_watching(self) -> bool:
        return self._watching

    def snapshot(self) -> ProgressSnapshot:
        return self._aggregator.snapshot()

    def on_container_ready(self) -> int:
        """Discover the container's loadables and start watching them.

        Runs once per tracker; later calls are ignored.

        Returns:
            Number of items being watched.
        """
        if self._watching:
            logger.debug("Container already being watched; ignoring ready event")
            return self._watched_count

        self._watching = True
        items = discover_loadables(self._container, self._adapter)
        self._watched_count = self._watcher.watch(items)
        logger.info("Watching %d loadable item(s)", self._watched_count)
        return self._watched_count

    def dispose(self) -> None:
        """Stop watching: drop subscriptions and any pending end."""
        self._watcher.detach()
        self._notifier.cancel_end()
        logger.debug("Tracker disposed")


__all__ = ["ContainerLoadTracker"]
