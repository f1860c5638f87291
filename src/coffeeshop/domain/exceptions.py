"""Domain-level exceptions.

Every refused operation is expressed as a subclass of DomainException so
the CLI layer can catch them uniformly and display a message.  All of them
are raised before any state is changed.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidArgumentError(ValidationError):
    """A raw parameter could not be parsed (bad number, bad boolean text...)."""


class InvalidProductTypeError(ValidationError):
    """The product type tag does not name a known category."""


class InsufficientStockError(DomainException):
    """A stock adjustment would take stock below zero."""


class OutOfStockError(InsufficientStockError):
    """The requested order quantity exceeds what is in stock."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class UnauthorizedError(DomainException):
    """The acting user's role does not allow the operation."""
