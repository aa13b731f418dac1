"""LoadWatch Error Handling Module

This module defines the error handling system for LoadWatch, providing
structured error classes with context information.

The error hierarchy follows these principles:
- One Source of Truth: All error codes are defined in ErrorCode enum
- Structured Context: ErrorContext provides additional information
- Proper Exception Chaining: Original exceptions are preserved

Signal handlers in the core never raise; these errors surface only from
configuration loading and from misuse of the core API at construction time.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Union

# Type alias for primitive context values (str, int, float, bool only)
PrimitiveContextValue = Union[str, int, float, bool]


class ErrorCode(str, Enum):
    """Error codes for LoadWatch.

    This enum serves as the single source of truth for all error codes
    used throughout the package.
    """

    # Configuration Errors
    CONFIG_INVALID = "CONFIG_INVALID"
    CONFIG_MISSING = "CONFIG_MISSING"

    # Capability Errors
    CAPABILITY_MISSING = "CAPABILITY_MISSING"

    # Watch-list Errors
    UNKNOWN_ENTRY = "UNKNOWN_ENTRY"
    INVALID_STATE = "INVALID_STATE"


def _coerce_primitives(value: Any | None) -> dict[str, PrimitiveContextValue] | None:
    """Coerce additional_data values to primitives.

    Args:
        value: Input dictionary or None

    Returns:
        Dictionary with primitive values only, or None

    Raises:
        TypeError: If value is not a dict or contains unconvertible types
    """
    if value is None:
        return None

    if not isinstance(value, dict):
        error_msg = f"additional_data must be dict, got {type(value).__name__}"
        raise TypeError(error_msg)

    coerced: dict[str, PrimitiveContextValue] = {}
    for key, val in value.items():
        if isinstance(val, (str, int, float, bool)):
            coerced[key] = val
        elif isinstance(val, Path):
            coerced[key] = str(val)
        elif isinstance(val, Enum):
            coerced[key] = val.value
        else:
            error_msg = (
                f"Cannot coerce {type(val).__name__} to primitive type. "
                f"Only str, int, float, bool, Path, Enum are allowed."
            )
            raise TypeError(error_msg)

    return coerced


@dataclass(frozen=True)
class ErrorContext:
    """Context information for errors.

    Attributes:
        operation: Optional operation name that caused the error
        item_name: Optional watch-list entry name involved in the error
        additional_data: Optional dict with primitive values only
    """

    operation: str | None = None
    item_name: str | None = None
    additional_data: dict[str, PrimitiveContextValue] | None = None

    def __post_init__(self) -> None:
        """Post-initialization validation and coercion."""
        if self.additional_data is not None:
            coerced = _coerce_primitives(self.additional_data)
            object.__setattr__(self, "additional_data", coerced)

    def safe_dict(self) -> dict[str, Any]:
        """Export context as dict for logging.

        Returns:
            Dictionary with the set fields and a guaranteed additional_data key.
        """
        data: dict[str, Any] = {}
        if self.operation is not None:
            data["operation"] = self.operation
        if self.item_name is not None:
            data["item_name"] = self.item_name
        data["additional_data"] = self.additional_data or {}
        return data


class LoadWatchError(Exception):
    """Base exception class for all LoadWatch errors."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        context: ErrorContext | None = None,
        original_error: Exception | None = None,
    ) -> None:
        """Initialize LoadWatchError.

        Args:
            code: Error code from ErrorCode enum
            message: Human-readable error message
            context: Additional context information
            original_error: Original exception that caused this error
        """
        self.code = code
        self.message = message
        self.context = context or ErrorContext()
        self.original_error = original_error

        super().__init__(f"{code.value}: {message}")

    def __str__(self) -> str:
        """Return string representation of the error."""
        return f"{self.code.value}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging.

        Returns:
            Dictionary representation of the error with code, message,
            context, and original_error (if present)
        """
        return {
            "code": self.code.value,
            "message": self.message,
            "context": self.context.safe_dict(),
            "original_error": str(self.original_error) if self.original_error else None,
        }


class ConfigurationError(LoadWatchError):
    """Configuration loading or validation errors.

    Examples:
    - Explicit configuration file does not exist
    - Negative delay or non-positive dialog width
    """


class CapabilityError(LoadWatchError):
    """Capability adapter misuse.

    Raised when an adapter is asked for the data source of a node that
    does not expose the loadable capability.
    """


class WatchListError(LoadWatchError):
    """Watch-list misuse.

    Raised when a state is set for a name that was never registered,
    or when the value is not a LoadState.
    """


__all__ = [
    "CapabilityError",
    "ConfigurationError",
    "ErrorCode",
    "ErrorContext",
    "LoadWatchError",
    "PrimitiveContextValue",
    "WatchListError",
]
