"""Application service: Add Category use case."""

from __future__ import annotations

from ordercore.domain.model.catalog import Category
from ordercore.domain.repository.catalog_repository import CategoryRepository


class AddCategoryHandler:

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    def handle(self, name: str) -> Category:
        category = Category.create(self._category_repo.next_id(), name)
        self._category_repo.add(category)
        return category
