"""Custom exceptions for ONIX generation."""


class ONIXGenError(Exception):
    """Base exception for all ONIX generation errors."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class ConfigurationError(ONIXGenError):
    """Raised when render options cannot produce a valid document.

    These are caller errors (unknown dialect, missing variant) and abort the
    whole batch before any output is returned.
    """

    def __init__(self, message: str, option: str | None = None, *args, **kwargs):
        self.option = option
        super().__init__(message, *args, **kwargs)
