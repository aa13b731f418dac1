"""
Progress lifecycle notifier.

ProgressNotifier renders session transitions through a ProgressIndicator and
re-emits them as Qt signals. It owns the single-shot timer that debounces
the end of a session, so a pending end can be cancelled when an item starts
loading again inside the delay window.
"""

from __future__ import annotations

import logging

from PySide6.QtCore import QObject, QTimer, Signal

from loadwatch.config.models.progress_settings import ProgressSettings
from loadwatch.core.models import format_progress_text, progress_fraction
from loadwatch.core.protocols import IndicatorOptions, ProgressIndicator
from loadwatch.shared.constants import LogMessages

logger = logging.getLogger(__name__)


class LoggingProgressIndicator:
    """Headless indicator that records the lifecycle in the log."""

    def show(self, options: IndicatorOptions) -> None:
        logger.info("%s: %s", options.title, options.message)

    def update_progress(self, fraction: float, text: str) -> None:
        logger.debug("Progress %.3f (%s)", fraction, text)

    def hide(self) -> None:
        logger.debug("Progress indicator hidden")


class ProgressNotifier(QObject):
    """Emits startprogress / progressupdate / endprogress.

    Signals:
        start_progress(total, completed): a session started
        progress_update(total, completed): totals changed while active
        end_progress(total): the debounced end of a session
    """

    # Signals
    start_progress: Signal = Signal(int, int)
    progress_update: Signal = Signal(int, int)
    end_progress: Signal = Signal(int)

    def __init__(
        self,
        settings: ProgressSettings | None = None,
        indicator: ProgressIndicator | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)

        self._settings = settings or ProgressSettings()
        self._indicator: ProgressIndicator = indicator or LoggingProgressIndicator()
        self._pending_total = 0

        self._end_timer = QTimer(self)
        self._end_timer.setSingleShot(True)
        self._end_timer.setInterval(self._settings.delay_ms)
        self._end_timer.timeout.connect(self._on_end_timeout)

    @property
    def settings(self) -> ProgressSettings:
        return self._settings

    @property
    def indicator(self) -> ProgressIndicator:
        return self._indicator

    @property
    def end_pending(self) -> bool:
        """True while a scheduled end has not fired or been cancelled."""
        return self._end_timer.isActive()

    def start(self, total: int, completed: int) -> None:
        """Show the indicator and emit start_progress."""
        self._indicator.show(IndicatorOptions.from_settings(self._settings))
        self.start_progress.emit(total, completed)

    def update(self, total: int, completed: int) -> None:
        """Update the indicator and emit progress_update."""
        fraction = progress_fraction(total, completed)
        text = format_progress_text(fraction, self._settings.completeness_text)
        self._indicator.update_progress(fraction, text)
        self.progress_update.emit(total, completed)

    def schedule_end(self, total: int) -> None:
        """Schedule end_progress after the configured delay.

        A pending end is replaced, so only one end fires per session.
        """
        self._pending_total = total
        logger.debug(LogMessages.SESSION_ENDING, total, self._settings.delay_ms)
        self._end_timer.start()

    def cancel_end(self) -> bool:
        """Cancel a pending end.

        Returns:
            True if an end was pending and has been cancelled.
        """
        if not self._end_timer.isActive():
            return False
        self._end_timer.stop()
        return True

    def _on_end_timeout(self) -> None:
        self._indicator.hide()
        logger.info(LogMessages.SESSION_ENDED, self._pending_total)
        self.end_progress.emit(self._pending_total)


__all__ = ["LoggingProgressIndicator", "ProgressNotifier"]
