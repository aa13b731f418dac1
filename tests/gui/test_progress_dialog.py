"""Tests for LoadProgressDialog and DialogProgressIndicator."""

import pytest
from PySide6.QtWidgets import QPushButton, QVBoxLayout, QWidget
from pytestqt.qtbot import QtBot

from loadwatch.config.models.progress_settings import ProgressSettings
from loadwatch.core.protocols import IndicatorOptions
from loadwatch.gui.progress_dialog import DialogProgressIndicator, LoadProgressDialog


@pytest.fixture
def host(qtbot: QtBot) -> QWidget:
    widget = QWidget()
    qtbot.addWidget(widget)
    return widget


@pytest.fixture
def options() -> IndicatorOptions:
    return IndicatorOptions.from_settings(ProgressSettings())


class TestLoadProgressDialog:
    """Test cases for LoadProgressDialog."""

    def test_initially_hidden(self, host) -> None:
        dialog = LoadProgressDialog(host)

        assert dialog.isVisible() is False
        assert dialog.isModal() is True

    def test_apply_options(self, host, options) -> None:
        # Arrange
        dialog = LoadProgressDialog(host)

        # Act
        dialog.apply_options(options)

        # Assert
        assert dialog.windowTitle() == "Please wait"
        assert dialog.labelText() == "Loading items..."
        assert dialog.bar_text == "Initializing..."
        assert dialog.minimumWidth() == 300
        assert dialog.maximum() == 100
        assert dialog.closable is False

    def test_busy_mode_when_progress_disabled(self, host) -> None:
        dialog = LoadProgressDialog(host)
        options = IndicatorOptions.from_settings(ProgressSettings(progress=False))

        dialog.apply_options(options)

        assert (dialog.minimum(), dialog.maximum()) == (0, 0)

    def test_set_fraction_updates_value_and_text(self, host, options) -> None:
        dialog = LoadProgressDialog(host)
        dialog.apply_options(options)

        dialog.set_fraction(2 / 3, "67% completed")

        assert dialog.value() == 67
        assert dialog.bar_text == "67% completed"

    def test_not_closable_ignores_reject(self, qtbot, host, options) -> None:
        dialog = LoadProgressDialog(host)
        dialog.apply_options(options)
        dialog.show()

        dialog.reject()

        assert dialog.isVisible() is True
        dialog.hide()

    def test_closable_dialog_can_be_closed(self, qtbot, host) -> None:
        dialog = LoadProgressDialog(host)
        dialog.apply_options(IndicatorOptions.from_settings(ProgressSettings(closable=True)))
        dialog.show()

        dialog.reject()

        assert dialog.closable is True
        assert dialog.isVisible() is False

    def test_anchor_widget_positions_dialog(self, qtbot, host) -> None:
        # Arrange
        layout = QVBoxLayout(host)
        anchor = QPushButton("Load")
        anchor.setObjectName("loadButton")
        layout.addWidget(anchor)
        host.show()
        qtbot.waitExposed(host)
        dialog = LoadProgressDialog(host)

        # Act
        dialog.apply_options(
            IndicatorOptions.from_settings(ProgressSettings(animEl="loadButton"))
        )

        # Assert
        anchor_center = anchor.mapToGlobal(anchor.rect().center())
        assert dialog.pos() == anchor_center - dialog.rect().center()

    def test_missing_anchor_is_ignored(self, host, options) -> None:
        dialog = LoadProgressDialog(host)

        dialog.apply_options(options)  # "elId" does not exist

        assert dialog.windowTitle() == "Please wait"


class TestDialogProgressIndicator:
    """Test cases for DialogProgressIndicator."""

    def test_lifecycle(self, qtbot, host, options) -> None:
        indicator = DialogProgressIndicator(host)

        indicator.show(options)
        assert indicator.dialog.isVisible() is True

        indicator.update_progress(0.5, "50% completed")
        assert indicator.dialog.value() == 50

        indicator.hide()
        assert indicator.dialog.isVisible() is False
