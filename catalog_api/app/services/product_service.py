"""
Business logic for catalogue products.

Products only need the generic CRUD rules plus a category lookup,
which is served from the repository's secondary index.
"""

from typing import List

from catalog_api.app.repositories.indexed import IndexedRepository
from catalog_api.app.schemas.product import Product

from .base import CrudService


class ProductService(CrudService[Product]):
    """Service for managing products."""

    def __init__(self, repository: IndexedRepository[Product]) -> None:
        super().__init__(repository)

    def list_by_category(self, category: str) -> List[Product]:
        return self.repository.find_by_category(category)

    def list_categories(self) -> List[str]:
        return sorted(self.repository.index_keys())
