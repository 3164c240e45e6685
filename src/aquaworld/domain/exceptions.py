"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the calling layer (CLI, HTTP, GraphQL) can catch them uniformly and map
each kind to its own user-facing response.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class NotFoundError(DomainException):
    """A referenced product, order or payment does not exist."""


class InvalidInputError(DomainException):
    """The request is structurally invalid (e.g. an empty item list)."""


class InsufficientStockError(DomainException):
    """A reservation asked for more units than the product has in stock."""


class InvalidTransitionError(DomainException):
    """The requested order status change is not allowed from the current state."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class ConflictError(DomainException):
    """The resource already exists (e.g. a second payment for one order)."""
