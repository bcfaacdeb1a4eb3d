"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.

Failures of order placement form their own ``OrderError`` family.  Each
carries a ``retryable`` flag telling the caller whether submitting the same
request again can succeed without changing it.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class StorageError(DomainException):
    """The storage engine could not read or write its data."""


class InsufficientStockError(DomainException):
    """The ledger cannot cover a reservation for one product."""

    def __init__(self, product_id: int, requested: int, available: int) -> None:
        super().__init__(
            f"Insufficient stock for product {product_id} "
            f"(requested {requested}, available {available})"
        )
        self.product_id = product_id
        self.requested = requested
        self.available = available


# ---------------------------------------------------------------------------
# Order placement failures
# ---------------------------------------------------------------------------


class OrderError(DomainException):
    """Base class for failures of a single order placement."""

    retryable = False


class EmptyOrderError(OrderError):
    """The order was submitted without any line items."""

    def __init__(self) -> None:
        super().__init__("Order must contain at least one item")


class StockUnavailableError(OrderError):
    """One line item could not be reserved; nothing was kept."""

    def __init__(self, product_id: int, requested: int, available: int) -> None:
        super().__init__(
            f"Stock unavailable for product {product_id} "
            f"(requested {requested}, available {available})"
        )
        self.product_id = product_id
        self.requested = requested
        self.available = available


class ReservationTimeoutError(OrderError):
    """A product's stock lock could not be taken within the wait bound."""

    retryable = True

    def __init__(self, product_id: int, timeout: float) -> None:
        super().__init__(
            f"Timed out after {timeout:g}s waiting for stock lock "
            f"on product {product_id}"
        )
        self.product_id = product_id
        self.timeout = timeout


class PersistenceFailedError(OrderError):
    """The durable commit failed; no partial state remains."""

    retryable = True
