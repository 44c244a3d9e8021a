class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class NotFoundError(DomainError):
    """Raised when the requested student or record does not exist."""


class RemoteFetchError(DomainError):
    """Raised when the spreadsheet source is unreachable or returns malformed data."""


class StorageError(DomainError):
    """Raised when the media store cannot save or list files."""


class DeliveryError(DomainError):
    """Raised when an email could not be handed to the SMTP relay."""
