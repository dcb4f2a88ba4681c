"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class NotFoundError(DomainException):
    """A requested product, cart item, user or order does not exist."""


class EmptyCartError(DomainException):
    """Checkout was attempted on a cart with no items."""


class AuthenticationError(DomainException):
    """The visitor is not logged in, or the credentials are wrong."""


class PermissionDeniedError(DomainException):
    """The visitor is logged in but may not access the resource."""


class StorageError(DomainException):
    """The underlying persistence failed."""


class CartClearPendingError(StorageError):
    """An order was created but its source cart could not be cleared.

    Clearing is idempotent, so the caller recovers by clearing the
    cart again.
    """

    def __init__(self, order_id: int, message: str) -> None:
        super().__init__(message)
        self.order_id = order_id
