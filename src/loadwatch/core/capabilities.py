"""Capability adapter for plain Python component trees.

DefaultCapabilityAdapter understands objects shaped like the original
widget toolkit's components:

- containers expose ``child_items()`` or an ``items`` sequence
- loadables expose a ``data_source`` attribute or ``get_data_source()``
- names come from ``name`` or ``get_name()``, else from the object identity
- a component wrapping a form exposes ``get_form()``
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from loadwatch.core.protocols import LoadSignals
from loadwatch.shared.errors import CapabilityError, ErrorCode, ErrorContext


class DefaultCapabilityAdapter:
    """Duck-typed adapter for plain Python objects."""

    def resolve_root(self, node: Any) -> Any:
        get_form = getattr(node, "get_form", None)
        if callable(get_form):
            return get_form()
        return node

    def children(self, node: Any) -> Sequence[Any]:
        child_items = getattr(node, "child_items", None)
        if callable(child_items):
            return list(child_items())
        items = getattr(node, "items", None)
        if isinstance(items, Sequence) and not isinstance(items, (str, bytes)):
            return list(items)
        return []

    def is_loadable(self, node: Any) -> bool:
        return self._find_source(node) is not None

    def data_source(self, node: Any) -> LoadSignals:
        source = self._find_source(node)
        if source is None:
            raise CapabilityError(
                ErrorCode.CAPABILITY_MISSING,
                f"{type(node).__name__} does not expose a data source",
                context=ErrorContext(operation="data_source"),
            )
        return source

    def name_of(self, node: Any) -> str:
        get_name = getattr(node, "get_name", None)
        name = get_name() if callable(get_name) else getattr(node, "name", None)
        if name:
            return str(name)
        # Unnamed items get a per-object name so they never collide
        return f"{type(node).__name__}@{id(node):x}"

    @staticmethod
    def _find_source(node: Any) -> LoadSignals | None:
        source = getattr(node, "data_source", None)
        if source is None:
            accessor = getattr(node, "get_data_source", None)
            if callable(accessor):
                source = accessor()
        if isinstance(source, LoadSignals):
            return source
        return None


__all__ = ["DefaultCapabilityAdapter"]
