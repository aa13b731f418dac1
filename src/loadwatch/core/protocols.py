"""Capability protocols consumed by the LoadWatch core.

This module defines the Protocol interfaces that decouple the core from any
concrete container, loadable or progress-indicator implementation. Each host
environment implements CapabilityAdapter once; the core only talks to these
protocols.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from loadwatch.config.models.progress_settings import ProgressSettings


class BoundSignal(Protocol):
    """A connectable signal (Qt SignalInstance or compatible)."""

    def connect(self, slot: Callable[..., Any]) -> Any: ...

    def disconnect(self, slot: Callable[..., Any]) -> Any: ...


@runtime_checkable
class LoadSignals(Protocol):
    """Data source of a loadable item.

    Exactly two signals, fired with no required payload:
        begin_load: the item started (re)loading
        end_load: the item finished loading
    """

    begin_load: BoundSignal
    end_load: BoundSignal


class CapabilityAdapter(Protocol):
    """Host-specific view of a container tree.

    Example:
        >>> adapter: CapabilityAdapter = DefaultCapabilityAdapter()
        >>> if adapter.is_loadable(node):
        ...     source = adapter.data_source(node)
    """

    def resolve_root(self, node: Any) -> Any:
        """Return the node discovery should start from (e.g. a form)."""

    def children(self, node: Any) -> Sequence[Any]:
        """Return the ordered child items of a node (empty if none)."""

    def is_loadable(self, node: Any) -> bool:
        """Return True if the node exposes a data source."""

    def data_source(self, node: Any) -> LoadSignals:
        """Return the data source of a loadable node."""

    def name_of(self, node: Any) -> str:
        """Return the unique watch-list name of a loadable node."""


@dataclass(frozen=True)
class IndicatorOptions:
    """Options passed to ProgressIndicator.show()."""

    title: str
    message: str
    progress_text: str
    width: int
    progress: bool
    closable: bool
    anim_el: str | None = None

    @classmethod
    def from_settings(cls, settings: ProgressSettings) -> IndicatorOptions:
        return cls(
            title=settings.title,
            message=settings.message,
            progress_text=settings.progress_text,
            width=settings.width,
            progress=settings.progress,
            closable=settings.closable,
            anim_el=settings.anim_el,
        )


class ProgressIndicator(Protocol):
    """Visual progress indicator driven by the notifier."""

    def show(self, options: IndicatorOptions) -> None:
        """Show the indicator with the given options."""

    def update_progress(self, fraction: float, text: str) -> None:
        """Update the displayed fraction (0.0-1.0) and bar text."""

    def hide(self) -> None:
        """Hide the indicator."""


__all__ = [
    "BoundSignal",
    "CapabilityAdapter",
    "IndicatorOptions",
    "LoadSignals",
    "ProgressIndicator",
]
