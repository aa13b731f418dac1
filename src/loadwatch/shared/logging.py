"""
Structured logging for LoadWatch.

This module provides helpers that set up rich console logging and record
structured logs, including context information when errors occur.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

from loadwatch.shared.constants.logging import LogConfig
from loadwatch.shared.errors import ErrorContext, LoadWatchError


class StructuredFormatter(logging.Formatter):
    """
    Formatter that writes log records as JSON objects.
    """

    def format(self, record: logging.LogRecord) -> str:
        """
        Format a log record as JSON.

        Args:
            record: Log record

        Returns:
            JSON-formatted log string
        """
        log_entry = {
            "timestamp": datetime.fromtimestamp(
                record.created,
                tz=timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if hasattr(record, "error_code"):
            log_entry["error_code"] = record.error_code

        if hasattr(record, "context"):
            log_entry["context"] = record.context

        if hasattr(record, "operation"):
            log_entry["operation"] = record.operation

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, ensure_ascii=False)


def _create_rich_console() -> Console:
    """
    Create the Rich console with the LoadWatch theme.

    Returns:
        Configured Rich Console instance
    """
    custom_theme = Theme(
        {
            "logging.level.debug": "cyan",
            "logging.level.info": "green",
            "logging.level.warning": "yellow",
            "logging.level.error": "red bold",
            "logging.level.critical": "red bold reverse",
            "log.time": "dim cyan",
            "log.message": "white",
            "log.path": "dim blue",
        }
    )
    return Console(theme=custom_theme, stderr=True)


def setup_structured_logger(
    name: str = LogConfig.ROOT_LOGGER,
    level: str = LogConfig.DEFAULT_LEVEL,
    log_file: str | None = None,
    *,
    use_rich_console: bool = True,
) -> logging.Logger:
    """
    Set up a logger for structured logging.

    Args:
        name: Logger name (default: "loadwatch")
        level: Log level (default: "INFO")
        log_file: Optional log file path, always written as JSON
        use_rich_console: Use the Rich console handler (default: True)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Replace handlers from an earlier setup
    if logger.handlers:
        logger.handlers.clear()

    log_level = getattr(logging, level.upper())
    logger.setLevel(log_level)

    if use_rich_console:
        handler: logging.Handler = RichHandler(
            console=_create_rich_console(),
            show_time=True,
            show_level=True,
            show_path=True,
            markup=False,
            rich_tracebacks=True,
            tracebacks_show_locals=False,
            log_time_format=LogConfig.TIME_FORMAT,
        )
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(StructuredFormatter())
    handler.setLevel(log_level)
    logger.addHandler(handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding=LogConfig.ENCODING)
        file_handler.setFormatter(StructuredFormatter())
        logger.addHandler(file_handler)

    logger.propagate = False

    return logger


def log_operation_error(
    logger: logging.Logger,
    error: LoadWatchError,
    operation: str | None = None,
    additional_context: dict[str, Any] | ErrorContext | None = None,
) -> None:
    """
    Record a structured error log for a LoadWatchError.

    Args:
        logger: Logger instance
        error: LoadWatchError instance
        operation: Operation name (optional)
        additional_context: Extra context merged over the error's own
    """
    context_dict: dict[str, Any] = dict(error.context.safe_dict())

    if additional_context:
        if isinstance(additional_context, ErrorContext):
            context_dict.update(additional_context.safe_dict())
        else:
            context_dict.update(additional_context)

    logger.error(
        error.message,
        extra={
            "error_code": error.code.name,
            "context": context_dict,
            "operation": operation or error.context.operation,
        },
        exc_info=error.original_error is not None,
    )


__all__ = [
    "StructuredFormatter",
    "log_operation_error",
    "setup_structured_logger",
]
