"""Container load progress plugin.

ContainerLoadProgress attaches a ContainerLoadTracker to a QWidget
container. The container is considered ready on its first show event;
discovery runs then, once. The plugin is a child of the container, so it
lives and dies with it.

Example:
    >>> plugin = attach_load_progress(form_widget)
    >>> plugin.tracker.end_progress.connect(on_form_loaded)
    >>> form_widget.show()  # discovery runs here
"""

from __future__ import annotations

import logging

from PySide6.QtCore import QEvent, QObject
from PySide6.QtWidgets import QWidget

from loadwatch.config import get_config
from loadwatch.config.models.progress_settings import ProgressSettings
from loadwatch.core.protocols import CapabilityAdapter, ProgressIndicator
from loadwatch.core.tracker import ContainerLoadTracker
from loadwatch.gui.progress_dialog import DialogProgressIndicator
from loadwatch.gui.widget_capabilities import WidgetCapabilityAdapter
from loadwatch.shared.errors import ConfigurationError
from loadwatch.shared.logging import log_operation_error

logger = logging.getLogger(__name__)


class ContainerLoadProgress(QObject):
    """Shows one progress dialog for every data source inside a container."""

    def __init__(
        self,
        container: QWidget,
        settings: ProgressSettings | None = None,
        indicator: ProgressIndicator | None = None,
        adapter: CapabilityAdapter | None = None,
    ) -> None:
        super().__init__(container)

        self._container = container
        self._tracker = ContainerLoadTracker(
            container,
            settings=settings or _configured_progress(),
            indicator=indicator or DialogProgressIndicator(container),
            adapter=adapter or WidgetCapabilityAdapter(),
            parent=self,
        )

        container.destroyed.connect(self._on_container_destroyed)

        if container.isVisible():
            self._tracker.on_container_ready()
        else:
            container.installEventFilter(self)

        logger.debug("ContainerLoadProgress attached to %s", type(container).__name__)

    @property
    def tracker(self) -> ContainerLoadTracker:
        return self._tracker

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:  # noqa: N802
        if watched is self._container and event.type() == QEvent.Type.Show:
            self._container.removeEventFilter(self)
            self._tracker.on_container_ready()
        return super().eventFilter(watched, event)

    def _on_container_destroyed(self) -> None:
        self._tracker.dispose()


def _configured_progress() -> ProgressSettings:
    try:
        return get_config().progress
    except ConfigurationError as e:
        log_operation_error(logger, e, operation="attach_load_progress")
        raise


def attach_load_progress(
    container: QWidget,
    settings: ProgressSettings | None = None,
    indicator: ProgressIndicator | None = None,
) -> ContainerLoadProgress:
    """Attach a load progress plugin to container and return it."""
    return ContainerLoadProgress(container, settings=settings, indicator=indicator)


__all__ = ["ContainerLoadProgress", "attach_load_progress"]
