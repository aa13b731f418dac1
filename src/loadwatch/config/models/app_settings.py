"""Logging configuration model."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from loadwatch.shared.constants import LogConfig


class LoggingSettings(BaseModel):
    """Logging configuration.

    This class manages logging behavior including level, file output
    and console rendering.
    """

    level: str = Field(default=LogConfig.DEFAULT_LEVEL, description="Logging level")
    file: str | None = Field(default=None, description="Optional JSON log file path")
    rich_console: bool = Field(
        default=True,
        description="Render console logs with rich instead of JSON lines",
    )

    @field_validator("level")
    @classmethod
    def _validate_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            msg = f"Unknown logging level: {value}"
            raise ValueError(msg)
        return level


__all__ = ["LoggingSettings"]
