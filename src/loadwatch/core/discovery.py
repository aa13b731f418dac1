"""
Discovery of loadable items in a container tree.

The walk is a pre-order traversal driven by an explicit stack. A loadable
root is registered on its own; otherwise nested containers are flattened
and only their loadable leaves are returned.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from loadwatch.core.protocols import CapabilityAdapter, LoadSignals

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DiscoveredItem:
    """A loadable leaf found by discovery."""

    name: str
    node: Any
    source: LoadSignals


def discover_loadables(root: Any, adapter: CapabilityAdapter) -> list[DiscoveredItem]:
    """Find every loadable leaf under root.

    Rules:
        - If the (resolved) root is loadable, only the root is returned.
        - A child with a non-empty child sequence is expanded, never
          registered, even if it is loadable itself.
        - A childless loadable child is returned under its name.
        - Anything else is skipped silently.
        - A node reached twice (cyclic or shared subtree) is walked once.

    Args:
        root: Root container (or loadable) to inspect
        adapter: Host capability adapter

    Returns:
        Loadable leaves in pre-order.
    """
    root = adapter.resolve_root(root)

    if adapter.is_loadable(root):
        return [_discovered(root, adapter)]

    found: list[DiscoveredItem] = []
    visited: set[int] = {id(root)}
    # Reversed so that popping yields children in their original order
    stack: list[Any] = list(reversed(adapter.children(root)))

    while stack:
        node = stack.pop()
        if id(node) in visited:
            logger.debug("Skipping already visited node %r", node)
            continue
        visited.add(id(node))

        children = adapter.children(node)
        if children:
            stack.extend(reversed(children))
        elif adapter.is_loadable(node):
            found.append(_discovered(node, adapter))
        else:
            logger.debug("Skipping node without children or data source: %r", node)

    logger.debug("Discovered %d loadable item(s)", len(found))
    return found


def _discovered(node: Any, adapter: CapabilityAdapter) -> DiscoveredItem:
    return DiscoveredItem(
        name=adapter.name_of(node),
        node=node,
        source=adapter.data_source(node),
    )


__all__ = ["DiscoveredItem", "discover_loadables"]
