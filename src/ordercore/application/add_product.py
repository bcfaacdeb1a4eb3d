"""Application service: Add Product use case."""

from __future__ import annotations

from ordercore.domain.exceptions import EntityNotFoundError, ValidationError
from ordercore.domain.model.catalog import Product
from ordercore.domain.model.value_objects import Money
from ordercore.domain.repository.catalog_repository import (
    CategoryRepository,
    ProductRepository,
)


class AddProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        category_repo: CategoryRepository,
    ) -> None:
        self._product_repo = product_repo
        self._category_repo = category_repo

    def handle(
        self,
        category_id: int,
        name: str,
        description: str,
        price: str,
        stock_quantity: int = 0,
    ) -> Product:
        """Add a new product to the catalog with its opening stock."""
        if self._category_repo.get_by_id(category_id) is None:
            raise EntityNotFoundError(f"Category {category_id} not found")

        if name and self._product_repo.get_by_name(name.strip()) is not None:
            raise ValidationError(f"Product '{name.strip()}' already exists")

        product = Product.create(
            product_id=self._product_repo.next_id(),
            category_id=category_id,
            name=name,
            description=description,
            price=Money.of(price),
            stock_quantity=stock_quantity,
        )
        self._product_repo.add(product)
        return product
