"""
Observable data source for LoadWatch.

DataSource is the concrete two-signal contract a loadable item exposes:
``begin_load`` when a load starts and ``end_load`` when it finishes.
Anything that loads data asynchronously (a model fetching rows, a worker
filling a combo box) owns one and calls begin()/end() around its load.
"""

from __future__ import annotations

import logging

from PySide6.QtCore import QObject, Signal

logger = logging.getLogger(__name__)


class DataSource(QObject):
    """Emits begin/end signals around an asynchronous load."""

    # Signals
    begin_load: Signal = Signal()  # Emitted when a load starts
    end_load: Signal = Signal()  # Emitted when a load finishes

    def __init__(self, name: str = "", parent: QObject | None = None) -> None:
        super().__init__(parent)
        if name:
            self.setObjectName(name)
        self._loading = False

    @property
    def loading(self) -> bool:
        """True between begin() and end()."""
        return self._loading

    def begin(self) -> None:
        """Mark the start of a load and emit begin_load."""
        self._loading = True
        logger.debug("Data source '%s' began loading", self.objectName())
        self.begin_load.emit()

    def end(self) -> None:
        """Mark the end of a load and emit end_load."""
        self._loading = False
        logger.debug("Data source '%s' finished loading", self.objectName())
        self.end_load.emit()


__all__ = ["DataSource"]
