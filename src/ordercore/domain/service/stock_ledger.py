"""Domain service: Stock Ledger.

The ledger is the only writer of a product's ``stock_quantity``.  Stock
leaves the shelf at ``reserve()`` time; ``release()`` puts it back and
``commit()`` makes the decrement final once the order is durable.

Every product has its own lock, so reservations for different products
never wait on each other while reservations for the same product are
applied one at a time.  Waiting for a lock is bounded: a caller that
cannot get in before the timeout gets ``ReservationTimeoutError``
instead of queueing forever.
"""

from __future__ import annotations

import itertools
import logging
import threading
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from ordercore.domain.exceptions import (
    EntityNotFoundError,
    InsufficientStockError,
    ReservationTimeoutError,
    ValidationError,
)
from ordercore.domain.model.catalog import validate_unit_price
from ordercore.domain.model.value_objects import Money, Quantity
from ordercore.domain.repository.catalog_repository import ProductRepository

logger = logging.getLogger(__name__)

DEFAULT_LOCK_TIMEOUT = 5.0


class ReservationStatus(Enum):
    PENDING = "PENDING"
    COMMITTED = "COMMITTED"
    RELEASED = "RELEASED"


@dataclass
class Reservation:
    """An in-flight stock decrement issued by the ledger.

    ``unit_price`` is the product's price read under the same lock as the
    decrement, so price and stock are observed together.
    """

    id: int
    product_id: int
    quantity: int
    unit_price: Money
    status: ReservationStatus = ReservationStatus.PENDING


class _StockEntry:
    """Live state of one product.  Guarded by ``lock``."""

    __slots__ = ("lock", "stock_quantity", "price")

    def __init__(self, stock_quantity: int, price: Money) -> None:
        self.lock = threading.Lock()
        self.stock_quantity = stock_quantity
        self.price = price


class StockLedger:

    def __init__(
        self,
        product_repo: ProductRepository,
        lock_timeout: float = DEFAULT_LOCK_TIMEOUT,
    ) -> None:
        if lock_timeout <= 0:
            raise ValidationError("Lock timeout must be positive")
        self._product_repo = product_repo
        self._lock_timeout = lock_timeout
        self._entries: dict[int, _StockEntry] = {}
        self._registry_lock = threading.Lock()
        self._ids = itertools.count(1)

    @property
    def lock_timeout(self) -> float:
        return self._lock_timeout

    # --- Reservations ---------------------------------------------------------

    def reserve(
        self,
        product_id: int,
        quantity: int,
        timeout: float | None = None,
    ) -> Reservation:
        """Take *quantity* units of a product off the shelf.

        Raises InsufficientStockError if fewer units are available,
        ReservationTimeoutError if the product's lock is not obtained in
        time, EntityNotFoundError for an unknown product.
        """
        qty = Quantity(quantity).value
        with self._locked(product_id, timeout) as entry:
            if qty > entry.stock_quantity:
                raise InsufficientStockError(product_id, qty, entry.stock_quantity)
            entry.stock_quantity -= qty
            reservation = Reservation(
                id=next(self._ids),
                product_id=product_id,
                quantity=qty,
                unit_price=entry.price,
            )
            remaining = entry.stock_quantity

        logger.debug(
            "Reserved %d of product %d (reservation %d, %d left)",
            qty, product_id, reservation.id, remaining,
        )
        return reservation

    def release(self, reservation: Reservation) -> None:
        """Return a pending reservation's units to stock.

        This is the compensating action for a failed order, so it waits
        for the lock without a bound.
        """
        entry = self._entry(reservation.product_id)
        with entry.lock:
            self._assert_pending(reservation, "release")
            entry.stock_quantity += reservation.quantity
            reservation.status = ReservationStatus.RELEASED
        logger.debug(
            "Released reservation %d (%d of product %d)",
            reservation.id, reservation.quantity, reservation.product_id,
        )

    def commit(self, reservation: Reservation) -> None:
        """Mark a reservation final.  Stock already left at reserve time."""
        entry = self._entry(reservation.product_id)
        with entry.lock:
            self._assert_pending(reservation, "commit")
            reservation.status = ReservationStatus.COMMITTED

    # --- Stock administration -------------------------------------------------

    def available(self, product_id: int) -> int:
        return self._entry(product_id).stock_quantity

    def restock(self, product_id: int, quantity: int, timeout: float | None = None) -> int:
        """Add units to a product's stock and persist the new level."""
        qty = Quantity(quantity).value
        with self._locked(product_id, timeout) as entry:
            self._product_repo.adjust_stock(product_id, qty)
            entry.stock_quantity += qty
            level = entry.stock_quantity
        logger.info("Restocked product %d with %d (now %d available)", product_id, qty, level)
        return level

    def update_price(self, product_id: int, price: Money, timeout: float | None = None) -> None:
        """Change a product's live price.

        Reservations of the same product see either the old or the new
        price, never a price read apart from its stock decrement.
        """
        validate_unit_price(price)
        with self._locked(product_id, timeout) as entry:
            self._product_repo.update_price(product_id, price)
            entry.price = price
        logger.info("Price of product %d set to %s", product_id, price)

    @contextmanager
    def hold(self, product_id: int, timeout: float | None = None) -> Iterator[None]:
        """Hold a product's lock, excluding every other ledger operation on it."""
        with self._locked(product_id, timeout):
            yield

    # --- Internal helpers -----------------------------------------------------

    @contextmanager
    def _locked(self, product_id: int, timeout: float | None) -> Iterator[_StockEntry]:
        entry = self._entry(product_id)
        wait = self._lock_timeout if timeout is None else timeout
        if not entry.lock.acquire(timeout=wait):
            logger.warning("Stock lock on product %d not acquired within %gs", product_id, wait)
            raise ReservationTimeoutError(product_id, wait)
        try:
            yield entry
        finally:
            entry.lock.release()

    def _entry(self, product_id: int) -> _StockEntry:
        with self._registry_lock:
            entry = self._entries.get(product_id)
        if entry is not None:
            return entry

        # The repository read happens outside the registry lock.
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product {product_id} not found")
        with self._registry_lock:
            return self._entries.setdefault(
                product_id, _StockEntry(product.stock_quantity, product.price)
            )

    @staticmethod
    def _assert_pending(reservation: Reservation, action: str) -> None:
        if reservation.status is not ReservationStatus.PENDING:
            raise ValidationError(
                f"Cannot {action} reservation {reservation.id}: "
                f"it is already {reservation.status.value}"
            )
