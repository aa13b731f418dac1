"""
Signal subscriptions for discovered loadables.

LoadWatcher connects the begin/end signals of every discovered data source
to the aggregator and keeps the connections so they can be released when
the owning tracker goes away.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from loadwatch.core.aggregator import ProgressAggregator
from loadwatch.core.discovery import DiscoveredItem
from loadwatch.core.protocols import BoundSignal

logger = logging.getLogger(__name__)


class LoadWatcher:
    """Forwards begin/end signals of data sources to the aggregator."""

    def __init__(self, aggregator: ProgressAggregator) -> None:
        self._aggregator = aggregator
        self._connections: list[tuple[BoundSignal, Callable[[], None]]] = []

    def watch(self, items: Iterable[DiscoveredItem]) -> int:
        """Register every item in the watch-list and subscribe to it.

        Args:
            items: Items produced by discovery

        Returns:
            Number of items subscribed.
        """
        count = 0
        for item in items:
            self._aggregator.watch_list.register(item.name)
            self._subscribe(item)
            count += 1
        return count

    def _subscribe(self, item: DiscoveredItem) -> None:
        name = item.name

        def on_begin_load() -> None:
            self._aggregator.mark_loading(name)

        def on_end_load() -> None:
            self._aggregator.mark_done(name)

        item.source.begin_load.connect(on_begin_load)
        item.source.end_load.connect(on_end_load)
        self._connections.append((item.source.begin_load, on_begin_load))
        self._connections.append((item.source.end_load, on_end_load))
        logger.debug("Watching data source of '%s'", name)

    def detach(self) -> None:
        """Disconnect every subscription made by watch()."""
        for signal, slot in self._connections:
            try:
                signal.disconnect(slot)
            except (RuntimeError, TypeError) as e:
                # Source already destroyed or connection already gone
                logger.debug("Could not disconnect slot: %s", e)
        self._connections.clear()


__all__ = ["LoadWatcher"]
