"""Settings loader and cached settings access.

This module handles:
- Environment variable loading from .env files
- Configuration file loading from TOML
- Thread-safe cached Settings instance
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pydantic import ValidationError

from loadwatch.config.models.settings import Settings
from loadwatch.shared.errors import ConfigurationError, ErrorCode, ErrorContext
from loadwatch.shared.logging import setup_structured_logger

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATHS: tuple[Path, ...] = (
    Path("config/loadwatch.toml"),
    Path("loadwatch.toml"),
)


class SettingsLoader:
    """Thread-safe cache for the process-wide Settings.

    Uses double-checked locking to keep the common path lock-free.
    """

    def __init__(self) -> None:
        self._instance: Settings | None = None
        self._lock = threading.RLock()

    def get_config(self) -> Settings:
        """Get the cached settings, loading them on first use."""
        if self._instance is None:
            with self._lock:
                if self._instance is None:
                    self._instance = load_settings()

        return self._instance

    def reload_config(self) -> Settings:
        """Reload the cached settings from configuration files."""
        with self._lock:
            self._instance = load_settings()

        return self._instance


def _load_env_file(env_file: Path = Path(".env")) -> None:
    """Load a .env file into the process environment if it exists."""
    if env_file.exists():
        load_dotenv(env_file, override=False)
        logger.debug("Loaded environment from %s", env_file)


def load_settings(
    config_path: str | Path | None = None,
    **overrides: Any,
) -> Settings:
    """Load settings from TOML configuration file or environment.

    Args:
        config_path: Optional path to a TOML configuration file. If None,
            the default locations are tried, then environment variables.
        **overrides: Top-level sections replacing the loaded ones, e.g.
            ``progress={"delay_ms": 0}``.

    Returns:
        Validated Settings instance

    Raises:
        ConfigurationError: If an explicit file is missing or a value fails
            validation.
    """
    _load_env_file()

    try:
        if config_path is not None:
            settings = Settings.from_toml_file(config_path)
        else:
            settings = _load_from_default_locations()

        if overrides:
            merged = settings.model_dump()
            for section, values in overrides.items():
                if isinstance(values, dict) and isinstance(merged.get(section), dict):
                    merged[section] = {**merged[section], **values}
                else:
                    merged[section] = values
            settings = Settings(**merged)
    except FileNotFoundError as e:
        raise ConfigurationError(
            ErrorCode.CONFIG_MISSING,
            str(e),
            context=ErrorContext(
                operation="load_settings",
                additional_data={"config_path": str(config_path)},
            ),
            original_error=e,
        ) from e
    except ValidationError as e:
        raise ConfigurationError(
            ErrorCode.CONFIG_INVALID,
            f"Invalid configuration: {e.error_count()} validation error(s)",
            context=ErrorContext(operation="load_settings"),
            original_error=e,
        ) from e

    return settings


def _load_from_default_locations() -> Settings:
    for path in DEFAULT_CONFIG_PATHS:
        if path.exists():
            logger.debug("Loading configuration from %s", path)
            return Settings.from_toml_file(path)

    return Settings()


_loader = SettingsLoader()


def get_config() -> Settings:
    """Get the process-wide settings, loading them if necessary."""
    return _loader.get_config()


def reload_config() -> Settings:
    """Reload the process-wide settings from configuration files."""
    return _loader.reload_config()


def configure_logging(settings: Settings | None = None) -> logging.Logger:
    """Set up the "loadwatch" logger from the logging section of settings.

    Args:
        settings: Settings to use, or None for the cached process-wide ones

    Returns:
        The configured package logger
    """
    logging_settings = (settings or get_config()).logging
    return setup_structured_logger(
        level=logging_settings.level,
        log_file=logging_settings.file,
        use_rich_console=logging_settings.rich_console,
    )


__all__ = [
    "DEFAULT_CONFIG_PATHS",
    "SettingsLoader",
    "configure_logging",
    "get_config",
    "load_settings",
    "reload_config",
]
