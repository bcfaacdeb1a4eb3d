"""Abstract repositories for the catalog aggregates.

Defined in the domain layer so the domain never depends on
infrastructure.  Concrete implementations live in the infrastructure
layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ordercore.domain.model.catalog import Category, Customer, Product
from ordercore.domain.model.value_objects import Money


class CategoryRepository(ABC):

    @abstractmethod
    def next_id(self) -> int:
        """Generate the next unique category ID."""

    @abstractmethod
    def get_by_id(self, category_id: int) -> Category | None:
        """Return a category by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Category]:
        """Return every category."""

    @abstractmethod
    def add(self, category: Category) -> None:
        """Persist a new category."""


class ProductRepository(ABC):
    """Catalog access for products.

    Stock levels are written only through ``adjust_stock`` (by the
    StockLedger) and through the order commit.
    """

    @abstractmethod
    def next_id(self) -> int:
        """Generate the next unique product ID."""

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def get_by_name(self, name: str) -> Product | None:
        """Return a product by its exact name, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def add(self, product: Product) -> None:
        """Persist a new product."""

    @abstractmethod
    def update_price(self, product_id: int, price: Money) -> None:
        """Change the live price of a product."""

    @abstractmethod
    def adjust_stock(self, product_id: int, delta: int) -> int:
        """Add *delta* (may be negative) to the stored stock; return the new level."""


class CustomerRepository(ABC):

    @abstractmethod
    def next_id(self) -> int:
        """Generate the next unique customer ID."""

    @abstractmethod
    def get_by_id(self, customer_id: int) -> Customer | None:
        """Return a customer by its ID, or None if not found."""

    @abstractmethod
    def get_by_email(self, email: str) -> Customer | None:
        """Return a customer by email (case-insensitive), or None."""

    @abstractmethod
    def add(self, customer: Customer) -> None:
        """Persist a new customer."""
