"""Application service: List Categories use case (query)."""

from __future__ import annotations

from ordercore.domain.model.catalog import Category
from ordercore.domain.repository.catalog_repository import CategoryRepository


class ListCategoriesHandler:

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    def handle(self) -> list[Category]:
        return sorted(self._category_repo.list_all(), key=lambda c: c.id)
