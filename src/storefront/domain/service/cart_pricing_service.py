"""Domain service: Cart Pricing.

Recomputes a cart's total from scratch. Every cart mutation goes
through ``reprice`` with the full item list; there is no incremental
or delta path. Prices always come from the catalog at the moment of
recomputation, never from an earlier value stored with the cart.
"""

from __future__ import annotations

from storefront.domain.exceptions import NotFoundError
from storefront.domain.model.cart import Cart
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository


class CartPricingService:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def resolve_products(self, cart: Cart) -> dict[str, Product]:
        """Batch-load every product referenced by the cart.

        Fails fast with NotFoundError if any product no longer exists,
        before the caller has changed anything.
        """
        product_ids = cart.product_ids
        if not product_ids:
            return {}

        products = self._product_repo.get_many(product_ids)
        missing = [pid for pid in product_ids if pid not in products]
        if missing:
            raise NotFoundError(f"Product not found: {', '.join(missing)}")
        return products

    def compute_total(self, cart: Cart) -> Money:
        products = self.resolve_products(cart)
        total = Money.zero()
        for item in cart.items:
            total = total + products[item.product_id].price * item.quantity.value
        return total

    def reprice(self, cart: Cart) -> Cart:
        """Return the same items with a freshly computed total."""
        return cart.with_total(self.compute_total(cart))
