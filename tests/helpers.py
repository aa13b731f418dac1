"""Shared test doubles for LoadWatch tests."""

from __future__ import annotations

from typing import Any

from loadwatch.core.data_source import DataSource
from loadwatch.core.protocols import IndicatorOptions

# Short enough to keep the suite fast, long enough to act inside the window
TEST_DELAY_MS = 50


class RecordingIndicator:
    """ProgressIndicator that records every call."""

    def __init__(self) -> None:
        self.calls: list[tuple[Any, ...]] = []
        self.visible = False

    def show(self, options: IndicatorOptions) -> None:
        self.calls.append(("show", options))
        self.visible = True

    def update_progress(self, fraction: float, text: str) -> None:
        self.calls.append(("update_progress", fraction, text))

    def hide(self) -> None:
        self.calls.append(("hide",))
        self.visible = False

    def names(self) -> list[str]:
        return [call[0] for call in self.calls]


class Leaf:
    """Loadable item exposing its data source as an attribute."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.data_source = DataSource(name)


class AccessorLeaf:
    """Loadable item exposing its data source through accessors."""

    def __init__(self, name: str) -> None:
        self._name = name
        self._source = DataSource(name)

    def get_name(self) -> str:
        return self._name

    def get_data_source(self) -> DataSource:
        return self._source


class Unnamed:
    """Loadable item with neither a name nor a name accessor."""

    def __init__(self) -> None:
        self.data_source = DataSource()


class Panel:
    """Container with an ordered item sequence."""

    def __init__(self, *items: Any, name: str = "panel") -> None:
        self.name = name
        self.items = list(items)


class Label:
    """Item with neither children nor a data source."""

    def __init__(self, text: str = "") -> None:
        self.text = text


class FormHost:
    """Component wrapping a form, like a form panel."""

    def __init__(self, form: Any) -> None:
        self._form = form

    def get_form(self) -> Any:
        return self._form


class EventRecorder:
    """Collects tracker lifecycle signals in order."""

    def __init__(self, emitter: Any) -> None:
        self.events: list[tuple[Any, ...]] = []
        emitter.start_progress.connect(lambda t, c: self.events.append(("start", t, c)))
        emitter.progress_update.connect(lambda t, c: self.events.append(("update", t, c)))
        emitter.end_progress.connect(lambda t: self.events.append(("end", t)))

    def of_kind(self, kind: str) -> list[tuple[Any, ...]]:
        return [event for event in self.events if event[0] == kind]
