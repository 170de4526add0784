class DomainError(Exception):
    """Base exception for business rule violations."""


class InvalidInputError(DomainError, ValueError):
    """Raised when a count, name or persisted line is not acceptable."""
