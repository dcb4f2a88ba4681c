"""Application service: Update Product use case."""

from __future__ import annotations

import structlog

from storefront.domain.exceptions import NotFoundError, ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: str,
        new_price: str | None = None,
        new_stock: int | None = None,
    ) -> Product:
        """Update a product's price and/or stock.

        This does NOT affect any existing orders; they captured a
        price snapshot at creation time.
        """
        if new_price is None and new_stock is None:
            raise ValidationError("Nothing to update")

        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise NotFoundError(f"Product with ID '{product_id}' not found")

        if new_price is not None:
            product.update_price(Money.of(new_price))
        if new_stock is not None:
            product.update_stock(new_stock)
        self._product_repo.save(product)

        logger.info("product_updated", product_id=product.id)
        return product
