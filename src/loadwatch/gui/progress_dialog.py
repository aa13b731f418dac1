"""
Load Progress Dialog for LoadWatch

This module contains the LoadProgressDialog class, a modal progress dialog
showing the combined progress of every data source of a container, and
DialogProgressIndicator, which drives it through the ProgressIndicator
protocol.
"""

from __future__ import annotations

import logging

from PySide6.QtCore import Qt
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import QProgressBar, QProgressDialog, QWidget

from loadwatch.core.models import round_half_up
from loadwatch.core.protocols import IndicatorOptions

logger = logging.getLogger(__name__)

CLOSE_BUTTON_TEXT = "Close"


class LoadProgressDialog(QProgressDialog):
    """
    Modal dialog showing the combined load progress of a container.

    The bar text carries the percentage ("67% completed"); the label above
    the bar carries the configured message.
    """

    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)

        self._closable = False
        self._show_progress = True

        self._bar = QProgressBar(self)
        self._bar.setRange(0, 100)
        self._bar.setTextVisible(True)
        self._bar.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.setBar(self._bar)

        self.setModal(True)
        self.setAutoClose(False)
        self.setAutoReset(False)
        self.setMinimumDuration(0)
        # Stops the show-after-delay timer QProgressDialog starts on creation
        self.reset()

        self.canceled.connect(self._on_close_clicked)

    @property
    def closable(self) -> bool:
        return self._closable

    @property
    def bar_text(self) -> str:
        """Text currently rendered inside the bar."""
        return self._bar.format()

    def apply_options(self, options: IndicatorOptions) -> None:
        """Configure title, texts, geometry and behaviour from options."""
        self.setWindowTitle(options.title)
        self.setLabelText(options.message)
        self.setMinimumWidth(options.width)
        self.resize(options.width, self.sizeHint().height())

        self._show_progress = options.progress
        if options.progress:
            self.setRange(0, 100)
            self._bar.setValue(0)
        else:
            # Busy indicator
            self.setRange(0, 0)
        self._bar.setFormat(options.progress_text)

        self._closable = options.closable
        if options.closable:
            self.setCancelButtonText(CLOSE_BUTTON_TEXT)
        else:
            self.setCancelButton(None)
        self.setWindowFlag(Qt.WindowType.WindowCloseButtonHint, options.closable)

        if options.anim_el:
            self._anchor_to(options.anim_el)

    def set_fraction(self, fraction: float, text: str) -> None:
        """Show fraction (0.0-1.0) and text in the bar."""
        if self._show_progress:
            self._bar.setValue(min(100, max(0, round_half_up(fraction * 100))))
        self._bar.setFormat(text)

    def reject(self) -> None:
        """Ignore Escape unless the dialog is closable."""
        if self._closable:
            super().reject()

    def closeEvent(self, event: QCloseEvent) -> None:  # noqa: N802
        if self._closable:
            super().closeEvent(event)
        else:
            event.ignore()

    def _anchor_to(self, object_name: str) -> None:
        """Center the dialog over the parent's child widget named object_name."""
        parent = self.parentWidget()
        if parent is None:
            return
        anchor = parent.findChild(QWidget, object_name)
        if anchor is None:
            logger.debug("Anchor widget '%s' not found", object_name)
            return
        center = anchor.mapToGlobal(anchor.rect().center())
        self.move(center - self.rect().center())

    def _on_close_clicked(self) -> None:
        logger.info("Load progress dialog closed by user")
        self.hide()


class DialogProgressIndicator:
    """ProgressIndicator backed by a LoadProgressDialog."""

    def __init__(self, parent: QWidget | None = None) -> None:
        self._dialog = LoadProgressDialog(parent)

    @property
    def dialog(self) -> LoadProgressDialog:
        return self._dialog

    def show(self, options: IndicatorOptions) -> None:
        self._dialog.apply_options(options)
        self._dialog.show()

    def update_progress(self, fraction: float, text: str) -> None:
        self._dialog.set_fraction(fraction, text)

    def hide(self) -> None:
        self._dialog.hide()


__all__ = ["DialogProgressIndicator", "LoadProgressDialog"]
