"""Application service: Cart Engine.

Applies add / update / remove / clear to a cart regardless of where it
is stored. Each mutation follows the same steps:

1. Validate the input.
2. Load the current snapshot from the store for the cart source.
3. Build the new snapshot and recompute its total from current
   catalog prices (full recomputation, never a delta).
4. Write the new snapshot back.

Steps 1-3 do not touch storage, so a failure there (bad quantity,
unknown product, pricing lookup) leaves the stored cart untouched.
"""

from __future__ import annotations

import structlog

from storefront.application.cart_store import CartStore
from storefront.application.dto import CartUpdate
from storefront.domain.exceptions import NotFoundError
from storefront.domain.model.cart import Cart
from storefront.domain.model.cart_source import CartSource, PersistedCart
from storefront.domain.model.value_objects import Quantity
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.cart_pricing_service import CartPricingService

logger = structlog.get_logger(__name__)


class CartEngine:

    def __init__(
        self,
        product_repo: ProductRepository,
        user_store: CartStore,
        cookie_store: CartStore,
    ) -> None:
        self._product_repo = product_repo
        self._pricing = CartPricingService(product_repo)
        self._user_store = user_store
        self._cookie_store = cookie_store

    # --- Queries --------------------------------------------------------------

    def load(self, source: CartSource) -> Cart:
        """Return the stored snapshot as is, without repricing.

        The ``total`` of a cookie cart is whatever the client sent back, so
        treat it as an unverified cache. Mutations, the cart view and
        checkout all recompute it from the catalog before using it.
        """
        return self._store_for(source).load(source)

    @staticmethod
    def get_count(cart: Cart) -> int:
        """Sum of all item quantities, for display badges."""
        return cart.count

    # --- Mutations ------------------------------------------------------------

    def add_item(self, source: CartSource, product_id: str, quantity: int = 1) -> CartUpdate:
        """Add units of a product; quantities accumulate onto an existing line."""
        qty = Quantity(quantity)
        if self._product_repo.get_by_id(product_id) is None:
            raise NotFoundError(f"Product not found: '{product_id}'")

        cart = self.load(source)
        updated = self._pricing.reprice(cart.with_item_added(product_id, qty))
        cookie = self._store_for(source).save(source, updated)

        logger.info(
            "cart_item_added",
            source=_describe(source),
            product_id=product_id,
            quantity=qty.value,
            count=updated.count,
            total=str(updated.total.amount),
        )
        return CartUpdate(cart=updated, cookie=cookie)

    def update_quantity(
        self, source: CartSource, product_id: str, new_quantity: int
    ) -> CartUpdate:
        """Set a line's quantity exactly to *new_quantity*."""
        qty = Quantity(new_quantity)

        cart = self.load(source)
        updated = self._pricing.reprice(cart.with_quantity(product_id, qty))
        cookie = self._store_for(source).save(source, updated)

        logger.info(
            "cart_quantity_updated",
            source=_describe(source),
            product_id=product_id,
            quantity=qty.value,
            total=str(updated.total.amount),
        )
        return CartUpdate(cart=updated, cookie=cookie)

    def remove_item(self, source: CartSource, product_id: str) -> CartUpdate:
        """Remove a line. Removing a product that is not in the cart is a no-op."""
        cart = self.load(source)
        if not cart.contains(product_id):
            return CartUpdate(cart=cart)

        updated = self._pricing.reprice(cart.without_item(product_id))
        cookie = self._store_for(source).save(source, updated)

        logger.info(
            "cart_item_removed",
            source=_describe(source),
            product_id=product_id,
            total=str(updated.total.amount),
        )
        return CartUpdate(cart=updated, cookie=cookie)

    def clear(self, source: CartSource) -> CartUpdate:
        """Reset to no items and a zero total. Idempotent."""
        cookie = self._store_for(source).clear(source)
        logger.info("cart_cleared", source=_describe(source))
        return CartUpdate(cart=Cart.empty(), cookie=cookie)

    # --- Internal helpers -----------------------------------------------------

    def _store_for(self, source: CartSource) -> CartStore:
        if isinstance(source, PersistedCart):
            return self._user_store
        return self._cookie_store


def _describe(source: CartSource) -> str:
    if isinstance(source, PersistedCart):
        return f"user:{source.user_id}"
    return "cookie"
