"""Exceptions raised by the URL shortener core."""


class ShortenerError(Exception):
    """Base class for URL shortener errors."""

    error_code = "shortener_error"


class EmptyInputError(ShortenerError, ValueError):
    """Raised when a code or target is empty or whitespace-only."""

    error_code = "empty_input"


class InvalidTargetError(ShortenerError, ValueError):
    """Raised when a target URL fails validation."""

    error_code = "invalid_url"


class CodeNotFoundError(ShortenerError, LookupError):
    """Raised when a short code has no stored target."""

    error_code = "not_found"

    def __init__(self, short_code: str):
        super().__init__(f"Short code '{short_code}' not found")
        self.short_code = short_code


class GenerationExhaustedError(ShortenerError, RuntimeError):
    """Raised when every candidate code collided with an existing entry."""

    error_code = "generation_exhausted"

    def __init__(self, attempts: int):
        super().__init__(
            f"Unable to generate unique short code after {attempts} attempts"
        )
        self.attempts = attempts
