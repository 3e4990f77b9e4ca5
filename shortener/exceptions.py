"""Exception hierarchy for URL shortener."""


class ShortenerError(Exception):
    """Base exception for all application-specific errors."""

    error_code = "app:shortener_error"


class ValidationError(ShortenerError):
    """Raised when a create payload is missing or malformed."""

    error_code = "app:validation_error"


class NotFoundError(ShortenerError):
    """Raised when a short code does not resolve to any link."""

    error_code = "app:not_found_error"


class StorageError(ShortenerError):
    """Raised when the link store fails.

    Examples include connection issues, timeouts and constraint violations.
    """

    error_code = "store:storage_error"


class DuplicateCodeError(StorageError):
    """Raised when saving a link whose short code is already taken."""

    error_code = "store:duplicate_code_error"


class CodeGenerationError(StorageError):
    """Raised when no free short code could be found."""

    error_code = "store:code_generation_error"
