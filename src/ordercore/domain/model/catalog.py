"""Catalog aggregates: Category, Product and Customer.

These live independently of orders and are referenced by them.  The
column limits mirror the relational schema the catalog is stored in.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from ordercore.domain.exceptions import ValidationError
from ordercore.domain.model.value_objects import Money

# NUMERIC(5,2)
MAX_UNIT_PRICE = Money(Decimal("999.99"))

CATEGORY_NAME_MAX = 50
PRODUCT_NAME_MAX = 50
PRODUCT_DESCRIPTION_MAX = 100
CUSTOMER_NAME_MAX = 20
EMAIL_MAX = 255


def _require_text(value: str, label: str, max_length: int) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{label} is required")
    value = value.strip()
    if len(value) > max_length:
        raise ValidationError(f"{label} must be at most {max_length} characters")
    return value


def validate_unit_price(price: Money) -> None:
    if price > MAX_UNIT_PRICE:
        raise ValidationError(f"Product price {price} exceeds maximum {MAX_UNIT_PRICE}")


@dataclass
class Category:

    id: int
    name: str

    @staticmethod
    def create(category_id: int, name: str) -> Category:
        return Category(
            id=category_id,
            name=_require_text(name, "Category name", CATEGORY_NAME_MAX),
        )


@dataclass
class Product:
    """A product in the catalog.

    ``stock_quantity`` here is the last durably committed level.  The live
    counter belongs to the StockLedger, which is the only writer of it.
    """

    id: int
    category_id: int
    name: str
    description: str
    price: Money
    stock_quantity: int = 0

    @staticmethod
    def create(
        product_id: int,
        category_id: int,
        name: str,
        description: str,
        price: Money,
        stock_quantity: int = 0,
    ) -> Product:
        """Create a new product, enforcing the catalog constraints."""
        validate_unit_price(price)
        if stock_quantity < 0:
            raise ValidationError("Stock quantity cannot be negative")
        return Product(
            id=product_id,
            category_id=category_id,
            name=_require_text(name, "Product name", PRODUCT_NAME_MAX),
            description=_require_text(
                description, "Product description", PRODUCT_DESCRIPTION_MAX
            ),
            price=price,
            stock_quantity=stock_quantity,
        )


@dataclass
class Customer:
    """A registered customer.  ``password_hash`` is never the plain text."""

    id: int
    first_name: str
    last_name: str
    email: str
    password_hash: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @staticmethod
    def create(
        customer_id: int,
        first_name: str,
        last_name: str,
        email: str,
        password_hash: str,
    ) -> Customer:
        email = _require_text(email, "Email", EMAIL_MAX).lower()
        if "@" not in email:
            raise ValidationError(f"Invalid email address: {email!r}")
        return Customer(
            id=customer_id,
            first_name=_require_text(first_name, "First name", CUSTOMER_NAME_MAX),
            last_name=_require_text(last_name, "Last name", CUSTOMER_NAME_MAX),
            email=email,
            password_hash=password_hash,
        )
