"""LoadWatch widget layer.

Qt widget integration: the QWidget capability adapter, the progress dialog
and the container plugin.
"""

from .plugin import ContainerLoadProgress, attach_load_progress
from .progress_dialog import DialogProgressIndicator, LoadProgressDialog
from .widget_capabilities import DATA_SOURCE_PROPERTY, WidgetCapabilityAdapter

__all__ = [
    "DATA_SOURCE_PROPERTY",
    "ContainerLoadProgress",
    "DialogProgressIndicator",
    "LoadProgressDialog",
    "WidgetCapabilityAdapter",
    "attach_load_progress",
]
