"""Application service: catalog browsing queries."""

from __future__ import annotations

from storefront.domain.exceptions import NotFoundError
from storefront.domain.model.product import Product
from storefront.domain.repository.product_repository import ProductRepository

FEATURED_LIMIT = 4


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> list[Product]:
        return self._product_repo.list_all()

    def featured(self, limit: int = FEATURED_LIMIT) -> list[Product]:
        """The newest products, as shown on the home page."""
        products = sorted(
            self._product_repo.list_all(), key=lambda p: p.created_at, reverse=True
        )
        return products[:limit]


class ShowProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> Product:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise NotFoundError(f"Product with ID '{product_id}' not found")
        return product
