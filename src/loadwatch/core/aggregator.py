"""
Progress aggregation state machine.

ProgressAggregator owns the watch-list and the progress session of one
tracker. recompute() is the only transition function; it is called after
every entry mutation and drives the notifier.

Transitions:
    inactive -> active: first recompute with loading items
                        (start_progress + progress_update)
    active -> active: any recompute (progress_update)
    active -> ending: all items done (end scheduled after the delay)
    ending -> active: an item reloads inside the delay window
                      (pending end cancelled, no second start_progress)
    ending -> inactive: the delayed end_progress fires
"""

from __future__ import annotations

import logging

from loadwatch.core.models import (
    LoadState,
    ProgressSession,
    ProgressSnapshot,
    WatchList,
)
from loadwatch.core.notifier import ProgressNotifier
from loadwatch.shared.constants import LogMessages

logger = logging.getLogger(__name__)


class ProgressAggregator:
    """Computes totals and decides session boundaries."""

    def __init__(self, notifier: ProgressNotifier, watch_list: WatchList | None = None) -> None:
        self._notifier = notifier
        self._watch_list = watch_list if watch_list is not None else WatchList()
        self._session = ProgressSession()

    @property
    def watch_list(self) -> WatchList:
        return self._watch_list

    @property
    def session(self) -> ProgressSession:
        return self._session

    def snapshot(self) -> ProgressSnapshot:
        """Return the current totals of the watch-list."""
        return self._watch_list.totals()

    def mark_loading(self, name: str) -> None:
        """Record a begin-load for name and recompute."""
        self._watch_list.set_state(name, LoadState.LOADING)
        self.recompute()

    def mark_done(self, name: str) -> None:
        """Record an end-load for name and recompute.

        An end-load for an entry that never began loading is ignored.
        """
        if self._watch_list.state_of(name) is LoadState.IDLE:
            logger.debug(LogMessages.IGNORED_END_ON_IDLE, name)
            return
        self._watch_list.set_state(name, LoadState.DONE)
        self.recompute()

    def recompute(self) -> ProgressSnapshot:
        """Recompute totals and emit the resulting lifecycle events."""
        snapshot = self._watch_list.totals()
        total, completed = snapshot.total, snapshot.completed
        session = self._session
        session.total = total
        session.completed = completed

        if total > 0 and not session.active and completed < total:
            session.active = True
            if self._notifier.cancel_end():
                logger.info(LogMessages.SESSION_RESUMED, completed, total)
            else:
                logger.info(LogMessages.SESSION_STARTED, completed, total)
                self._notifier.start(total, completed)

        if session.active:
            self._notifier.update(total, completed)

            if completed == total:
                session.active = False
                self._notifier.schedule_end(total)

        return snapshot


__all__ = ["ProgressAggregator"]
