"""Progress indicator configuration model.

This module contains the configuration model for the unified progress
indicator: dialog texts, geometry, behaviour flags and the debounce delay
inserted before the end of a session.
"""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from loadwatch.shared.constants import ProgressDefaults


class ProgressSettings(BaseModel):
    """Progress indicator configuration.

    Every option accepts both its snake_case name and the camelCase name
    used by the original widget plugin (``progressText``, ``animEl``...).
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    title: str = Field(default=ProgressDefaults.TITLE, description="Dialog title")
    message: str = Field(
        default=ProgressDefaults.MESSAGE,
        description="Message shown above the progress bar",
    )
    progress_text: str = Field(
        default=ProgressDefaults.PROGRESS_TEXT,
        validation_alias=AliasChoices("progress_text", "progressText"),
        description="Text shown inside the bar before the first update",
    )
    completeness_text: str = Field(
        default=ProgressDefaults.COMPLETENESS_TEXT,
        validation_alias=AliasChoices("completeness_text", "completenessText"),
        description="Suffix appended to the percentage, e.g. '50% completed'",
    )
    width: int = Field(
        default=ProgressDefaults.WIDTH,
        gt=0,
        description="Dialog width in pixels",
    )
    progress: bool = Field(
        default=ProgressDefaults.SHOW_PROGRESS,
        description="Show numeric progress instead of a busy indicator",
    )
    closable: bool = Field(
        default=ProgressDefaults.CLOSABLE,
        description="Allow the user to close the dialog",
    )
    anim_el: str | None = Field(
        default=ProgressDefaults.ANIM_EL,
        validation_alias=AliasChoices("anim_el", "animEl"),
        description="Object name of the widget the dialog is anchored to",
    )
    delay_ms: int = Field(
        default=ProgressDefaults.DELAY_MS,
        ge=0,
        validation_alias=AliasChoices("delay_ms", "delay"),
        description="Delay between the last load finishing and the end event",
    )


__all__ = ["ProgressSettings"]
