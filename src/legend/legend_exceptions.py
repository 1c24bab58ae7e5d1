"""Custom exceptions for legend script operations."""

from typing import Any


class LegendError(Exception):
    """Base exception for legend script operations."""

    def __init__(self, message: str, error_details: dict[str, Any] | None = None):
        """
        Initialize the exception.

        Args:
            message: Error message
            error_details: Optional dictionary with detailed error information
        """
        super().__init__(message)
        self.error_details = error_details


class LegendParseError(LegendError):
    """Raised when strict script parsing meets an unrecognised line."""


class LegendResolutionError(LegendError):
    """Raised when a resolver picks a line that was not offered to it."""


class LegendSettingsError(LegendError):
    """Raised when settings cannot be loaded or are invalid."""
