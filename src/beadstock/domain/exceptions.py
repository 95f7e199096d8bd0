"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Malformed or missing input, or a violated invariant."""


class InsufficientStockError(ValidationError):
    """A decrease would drive a quantity below zero."""


class ConflictError(DomainException):
    """An item with the same code already exists."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class StoreUnavailableError(DomainException):
    """The persistent store cannot be reached."""


class SeedError(DomainException):
    """The seed asset with canonical codes cannot be used."""


class SeedNotFoundError(SeedError):
    """The seed asset is missing."""


class SeedUnreadableError(SeedError):
    """The seed asset exists but cannot be read or decoded."""
