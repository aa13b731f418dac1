"""LoadWatch Shared Module.

This package contains shared constants, error handling and logging used across LoadWatch.
"""

__all__ = ["constants", "errors", "logging"]
