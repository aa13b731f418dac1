"""
Progress Indicator Constants

This module contains the default options of the progress indicator and
the fixed text fragments it renders.
"""


class ProgressDefaults:
    """Default progress indicator options."""

    TITLE = "Please wait"
    MESSAGE = "Loading items..."
    PROGRESS_TEXT = "Initializing..."
    COMPLETENESS_TEXT = "completed"
    WIDTH = 300
    SHOW_PROGRESS = True
    CLOSABLE = False
    ANIM_EL = "elId"
    DELAY_MS = 200


class ProgressMessages:
    """Progress text templates."""

    PERCENT_TEXT = "{percent}% {completeness_text}"
