"""
Watch-list data model for LoadWatch.

This module contains the per-item load state, the watch-list that maps item
names to their state, the progress session owned by one aggregator, and the
pure helpers that turn totals into the displayed fraction and text.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from loadwatch.shared.constants import LogMessages, ProgressMessages
from loadwatch.shared.errors import ErrorCode, ErrorContext, WatchListError

logger = logging.getLogger(__name__)


class LoadState(str, Enum):
    """Load state of a watched item.

    IDLE is the state of an entry that has not signalled yet; it does not
    count towards the session totals.
    """

    IDLE = "idle"
    LOADING = "loading"
    DONE = "done"


@dataclass
class WatchEntry:
    """Tracked state of one loadable item."""

    state: LoadState = LoadState.IDLE


@dataclass(frozen=True)
class ProgressSnapshot:
    """Aggregate totals of a watch-list at one point in time."""

    total: int = 0
    completed: int = 0

    @property
    def fraction(self) -> float:
        """Offset fraction shown by the indicator."""
        return progress_fraction(self.total, self.completed)

    @property
    def is_complete(self) -> bool:
        """True when at least one item was watched and all are done."""
        return self.total > 0 and self.completed == self.total


@dataclass
class ProgressSession:
    """State of the progress session owned by one aggregator.

    Attributes:
        active: True between session start and the scheduling of its end
        total: Entries with a defined state at the last recompute
        completed: Entries in DONE at the last recompute
    """

    active: bool = False
    total: int = 0
    completed: int = 0


class WatchList:
    """Mapping of item name to WatchEntry.

    Names are unique; registering a name twice replaces the earlier entry
    with a fresh IDLE one. Entries are never removed.
    """

    def __init__(self) -> None:
        self._entries: dict[str, WatchEntry] = {}

    def register(self, name: str) -> WatchEntry:
        """Register a name, replacing any existing entry of that name."""
        if name in self._entries:
            logger.warning(LogMessages.ENTRY_OVERWRITTEN, name)
        entry = WatchEntry()
        self._entries[name] = entry
        return entry

    def set_state(self, name: str, state: LoadState) -> None:
        """Set the state of a registered entry.

        Raises:
            WatchListError: If the name was never registered or the state
                is not a LoadState.
        """
        if not isinstance(state, LoadState):
            raise WatchListError(
                ErrorCode.INVALID_STATE,
                f"Expected LoadState, got {type(state).__name__}",
                context=ErrorContext(operation="set_state", item_name=name),
            )
        entry = self._entries.get(name)
        if entry is None:
            raise WatchListError(
                ErrorCode.UNKNOWN_ENTRY,
                f"No watch-list entry named '{name}'",
                context=ErrorContext(operation="set_state", item_name=name),
            )
        entry.state = state

    def state_of(self, name: str) -> LoadState:
        """Return the current state of a registered entry."""
        entry = self._entries.get(name)
        if entry is None:
            raise WatchListError(
                ErrorCode.UNKNOWN_ENTRY,
                f"No watch-list entry named '{name}'",
                context=ErrorContext(operation="state_of", item_name=name),
            )
        return entry.state

    def totals(self) -> ProgressSnapshot:
        """Count entries with a defined state and entries that are done."""
        total = 0
        completed = 0
        for entry in self._entries.values():
            if entry.state is LoadState.IDLE:
                continue
            total += 1
            if entry.state is LoadState.DONE:
                completed += 1
        return ProgressSnapshot(total=total, completed=completed)

    def names(self) -> list[str]:
        """Return the registered names."""
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)


def progress_fraction(total: int, completed: int) -> float:
    """Return the displayed fraction for a session.

    Both counts are offset by one, so a fresh session (0 completed) never
    shows 0% and the bar keeps moving from the first update on.

    Example:
        >>> progress_fraction(2, 0)
        0.3333333333333333
        >>> progress_fraction(2, 2)
        1.0
    """
    return (completed + 1) / (total + 1)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return math.floor(value + 0.5)


def format_progress_text(fraction: float, completeness_text: str) -> str:
    """Build the bar text, e.g. ``'67% completed'``."""
    return ProgressMessages.PERCENT_TEXT.format(
        percent=round_half_up(fraction * 100),
        completeness_text=completeness_text,
    )


__all__ = [
    "LoadState",
    "ProgressSession",
    "ProgressSnapshot",
    "WatchEntry",
    "WatchList",
    "format_progress_text",
    "progress_fraction",
    "round_half_up",
]
