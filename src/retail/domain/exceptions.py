"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class DuplicateKeyError(DomainException):
    """An entity with the same ID is already registered."""


class InvalidQuantityError(ValidationError):
    """A quantity or price was zero/negative where that is not allowed."""


class InsufficientStockError(ValidationError):
    """More units were requested than are currently on hand."""


class InvalidDiscountError(ValidationError):
    """The discount kind is not one of the supported kinds."""
