"""Capability adapter for Qt widget trees.

Containers are widgets whose layout holds other widgets (plus the page
containers QTabWidget, QStackedWidget and QScrollArea). A widget is loadable
when it carries a DataSource, through any of:

- a ``data_source`` attribute
- a ``dataSource()`` accessor
- the Qt dynamic property ``"dataSource"``

Widget internals (the popup of a QComboBox, the viewport of a view) are not
part of any layout and are therefore never treated as children.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from PySide6.QtWidgets import (
    QLayout,
    QScrollArea,
    QStackedWidget,
    QTabWidget,
    QWidget,
)

from loadwatch.core.protocols import LoadSignals
from loadwatch.shared.errors import CapabilityError, ErrorCode, ErrorContext

DATA_SOURCE_PROPERTY = "dataSource"


class WidgetCapabilityAdapter:
    """Adapter for QWidget containers and loadable widgets."""

    def resolve_root(self, node: Any) -> Any:
        form = getattr(node, "form", None)
        if callable(form):
            resolved = form()
            if resolved is not None:
                return resolved
        return node

    def children(self, node: Any) -> Sequence[Any]:
        if isinstance(node, QTabWidget):
            return [node.widget(i) for i in range(node.count())]
        if isinstance(node, QStackedWidget):
            return [node.widget(i) for i in range(node.count())]
        if isinstance(node, QScrollArea):
            inner = node.widget()
            return [inner] if inner is not None else []
        if isinstance(node, QWidget) and node.layout() is not None:
            return _layout_widgets(node.layout())
        return []

    def is_loadable(self, node: Any) -> bool:
        return _find_source(node) is not None

    def data_source(self, node: Any) -> LoadSignals:
        source = _find_source(node)
        if source is None:
            raise CapabilityError(
                ErrorCode.CAPABILITY_MISSING,
                f"{type(node).__name__} does not carry a data source",
                context=ErrorContext(operation="data_source"),
            )
        return source

    def name_of(self, node: Any) -> str:
        if isinstance(node, QWidget) and node.objectName():
            return node.objectName()
        source = _find_source(node)
        source_name = getattr(source, "objectName", None)
        if callable(source_name) and source_name():
            return source_name()
        # Unnamed widgets get a per-object name so they never collide
        return f"{type(node).__name__}@{id(node):x}"


def _find_source(node: Any) -> LoadSignals | None:
    source = getattr(node, "data_source", None)
    if source is None:
        accessor = getattr(node, "dataSource", None)
        if callable(accessor):
            source = accessor()
    if source is None and isinstance(node, QWidget):
        source = node.property(DATA_SOURCE_PROPERTY)
    if isinstance(source, LoadSignals):
        return source
    return None


def _layout_widgets(layout: QLayout) -> list[QWidget]:
    """Widgets of a layout in item order, descending into nested layouts."""
    widgets: list[QWidget] = []
    stack = [layout.itemAt(i) for i in reversed(range(layout.count()))]
    while stack:
        item = stack.pop()
        if item.widget() is not None:
            widgets.append(item.widget())
        elif item.layout() is not None:
            nested = item.layout()
            stack.extend(nested.itemAt(i) for i in reversed(range(nested.count())))
    return widgets


__all__ = ["DATA_SOURCE_PROPERTY", "WidgetCapabilityAdapter"]
