"""Domain-level exceptions.

All errors raised by the storefront core are subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.

Note that the cart itself never raises: removing something that is not in
the cart is a silent no-op, not an error.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class CatalogUnavailableError(DomainException):
    """The product catalog could not be loaded."""


class CheckoutInProgressError(DomainException):
    """An order is already being placed for this cart."""
