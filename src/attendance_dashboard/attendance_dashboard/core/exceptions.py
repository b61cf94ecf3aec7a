class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a referenced semester or record does not exist."""


class StorageError(Exception):
    """Raised by a storage backend when it cannot load or save the dataset."""


class BackendNotConfiguredError(StorageError):
    """Raised when the managed database is used without URL/key configured."""
