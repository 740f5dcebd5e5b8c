"""Errors raised by the sanitizer."""

INVALID_INPUT_MESSAGE = "Invalid input: Contains potentially dangerous content"


class SanitizationError(Exception):
    """Base exception for sanitization errors."""
    pass


class ValidationError(SanitizationError, ValueError):
    """Input still looks dangerous after sanitization.

    Subclasses ValueError so pydantic validators report it as a field error.
    """

    def __init__(self, message: str = INVALID_INPUT_MESSAGE):
        super().__init__(message)
        self.message = message
