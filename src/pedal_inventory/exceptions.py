"""Centralized exception classes for pedal-inventory.

Storage errors never reach the user: loads fall back to defaults and saves
are best-effort. Validation errors are the only user-visible failures.
"""


class PedalInventoryError(Exception):
    """Base exception for all pedal-inventory errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(self, message: str, details: str | None = None):
        """Initialize the exception.

        Args:
            message: User-friendly error message.
            details: Additional technical details for debugging.
        """
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}\n  Details: {self.details}"
        return self.message


class ConfigurationError(PedalInventoryError):
    """Raised when configuration is missing or invalid."""

    pass


class CatalogError(ConfigurationError):
    """Raised when the component catalog file cannot be read or parsed."""

    pass


class ValidationError(PedalInventoryError, ValueError):
    """Raised when user input validation fails."""

    pass


class StorageError(PedalInventoryError):
    """Base class for key-value storage failures."""

    pass


class StorageUnavailableError(StorageError):
    """Raised when a value cannot be retrieved from storage."""

    pass


class StorageParseError(StorageError):
    """Raised when a stored value cannot be decoded."""

    pass


class StorageWriteError(StorageError):
    """Raised when a value cannot be written to storage."""

    pass
