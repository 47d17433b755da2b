class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid, before any store mutation."""


class StorageUnavailableError(DomainError):
    """Raised by a storage backend when its medium cannot be reached."""
