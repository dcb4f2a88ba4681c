"""Application service: Add Product use case."""

from __future__ import annotations

import structlog

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        name: str,
        price: str,
        category: str,
        stock: int = 0,
        description: str = "",
        image: str = "",
    ) -> Product:
        """Add a new product to the catalog."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        if not category or not category.strip():
            raise ValidationError("Product category is required")

        product = Product(
            id=self._product_repo.next_id(),
            name=name.strip(),
            price=Money.of(price),
            stock=stock,
            category=category.strip(),
            description=(description or "").strip(),
            image=(image or "").strip(),
        )
        self._product_repo.save(product)

        logger.info("product_added", product_id=product.id, price=str(product.price.amount))
        return product
