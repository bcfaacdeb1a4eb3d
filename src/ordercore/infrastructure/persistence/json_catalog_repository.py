"""JSON-document-backed implementations of the catalog repositories."""

from __future__ import annotations

from decimal import Decimal

from ordercore.domain.exceptions import EntityNotFoundError, StorageError
from ordercore.domain.model.catalog import Category, Customer, Product
from ordercore.domain.model.value_objects import Money
from ordercore.domain.repository.catalog_repository import (
    CategoryRepository,
    CustomerRepository,
    ProductRepository,
)
from ordercore.infrastructure.persistence.json_store import JsonDocumentStore, next_id


def _find(rows: list[dict], row_id: int) -> dict | None:
    for raw in rows:
        if raw["id"] == row_id:
            return raw
    return None


class JsonCategoryRepository(CategoryRepository):

    def __init__(self, store: JsonDocumentStore) -> None:
        self._store = store

    def next_id(self) -> int:
        return next_id(self._store.read()["categories"])

    def get_by_id(self, category_id: int) -> Category | None:
        raw = _find(self._store.read()["categories"], category_id)
        return None if raw is None else Category(id=raw["id"], name=raw["name"])

    def list_all(self) -> list[Category]:
        return [
            Category(id=raw["id"], name=raw["name"])
            for raw in self._store.read()["categories"]
        ]

    def add(self, category: Category) -> None:
        with self._store.transaction() as doc:
            if _find(doc["categories"], category.id) is not None:
                raise StorageError(f"Category {category.id} already exists")
            doc["categories"].append({"id": category.id, "name": category.name})


class JsonProductRepository(ProductRepository):

    def __init__(self, store: JsonDocumentStore) -> None:
        self._store = store

    # --- ProductRepository interface ------------------------------------------

    def next_id(self) -> int:
        return next_id(self._store.read()["products"])

    def get_by_id(self, product_id: int) -> Product | None:
        raw = _find(self._store.read()["products"], product_id)
        return None if raw is None else self._to_domain(raw)

    def get_by_name(self, name: str) -> Product | None:
        for raw in self._store.read()["products"]:
            if raw["name"] == name:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Product]:
        return [self._to_domain(raw) for raw in self._store.read()["products"]]

    def add(self, product: Product) -> None:
        with self._store.transaction() as doc:
            if _find(doc["products"], product.id) is not None:
                raise StorageError(f"Product {product.id} already exists")
            doc["products"].append(self._to_raw(product))

    def update_price(self, product_id: int, price: Money) -> None:
        with self._store.transaction() as doc:
            raw = self._require(doc, product_id)
            raw["price"] = str(price.amount)
            raw["currency"] = price.currency

    def adjust_stock(self, product_id: int, delta: int) -> int:
        with self._store.transaction() as doc:
            raw = self._require(doc, product_id)
            level = raw["stock_quantity"] + delta
            if level < 0:
                raise StorageError(
                    f"Stock of product {product_id} cannot go below zero"
                )
            raw["stock_quantity"] = level
        return level

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _require(doc: dict, product_id: int) -> dict:
        raw = _find(doc["products"], product_id)
        if raw is None:
            raise EntityNotFoundError(f"Product {product_id} not found")
        return raw

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "category_id": product.category_id,
            "name": product.name,
            "description": product.description,
            "price": str(product.price.amount),
            "currency": product.price.currency,
            "stock_quantity": product.stock_quantity,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            category_id=raw["category_id"],
            name=raw["name"],
            description=raw["description"],
            price=Money(Decimal(raw["price"]), raw.get("currency", "USD")),
            stock_quantity=raw["stock_quantity"],
        )


class JsonCustomerRepository(CustomerRepository):

    def __init__(self, store: JsonDocumentStore) -> None:
        self._store = store

    def next_id(self) -> int:
        return next_id(self._store.read()["customers"])

    def get_by_id(self, customer_id: int) -> Customer | None:
        raw = _find(self._store.read()["customers"], customer_id)
        return None if raw is None else self._to_domain(raw)

    def get_by_email(self, email: str) -> Customer | None:
        wanted = email.lower()
        for raw in self._store.read()["customers"]:
            if raw["email"].lower() == wanted:
                return self._to_domain(raw)
        return None

    def add(self, customer: Customer) -> None:
        with self._store.transaction() as doc:
            if _find(doc["customers"], customer.id) is not None:
                raise StorageError(f"Customer {customer.id} already exists")
            doc["customers"].append(
                {
                    "id": customer.id,
                    "first_name": customer.first_name,
                    "last_name": customer.last_name,
                    "email": customer.email,
                    "password": customer.password_hash,
                }
            )

    @staticmethod
    def _to_domain(raw: dict) -> Customer:
        return Customer(
            id=raw["id"],
            first_name=raw["first_name"],
            last_name=raw["last_name"],
            email=raw["email"],
            password_hash=raw["password"],
        )
