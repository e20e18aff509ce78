"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidAmountError(ValidationError):
    """A monetary amount is negative or not an exact decimal."""


class CurrencyMismatchError(ValidationError):
    """Arithmetic was attempted between different currencies."""


class InvalidQuantityError(ValidationError):
    """A quantity or multiplier is zero or negative."""


class InvalidDiscountError(ValidationError):
    """A discount percentage is outside the allowed range."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""
