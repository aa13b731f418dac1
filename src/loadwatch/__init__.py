"""
LoadWatch - Unified load progress for composite Qt views

Discovers every data source attached to a container tree, watches their
begin/end load signals and drives a single progress indicator through a
start / update / end lifecycle.
"""

__version__ = "0.1.0"

from .core import (
    ContainerLoadTracker,
    DataSource,
    LoadState,
    ProgressSnapshot,
)

__all__ = [
    "ContainerLoadTracker",
    "DataSource",
    "LoadState",
    "ProgressSnapshot",
]
