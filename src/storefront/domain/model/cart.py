"""Cart snapshot and its line items.

A Cart is an immutable value: every mutation helper returns a new
snapshot and leaves the original untouched, so a failed operation can
never leave a half-applied cart behind.

The ``total`` field is a cache of ``sum(price * quantity)`` over the
items. The helpers here only change items; the caller is expected to
reprice the result (see ``CartPricingService``) before storing it.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from storefront.domain.exceptions import NotFoundError
from storefront.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class CartItem:
    product_id: str
    quantity: Quantity


@dataclass(frozen=True)
class Cart:
    """A set of line items, at most one per product, plus a cached total."""

    items: tuple[CartItem, ...] = ()
    total: Money = field(default_factory=Money.zero)

    @staticmethod
    def empty() -> Cart:
        return Cart()

    # --- Queries --------------------------------------------------------------

    @property
    def count(self) -> int:
        """Total number of units across all lines (the badge count)."""
        return sum(item.quantity.value for item in self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def product_ids(self) -> list[str]:
        return [item.product_id for item in self.items]

    def contains(self, product_id: str) -> bool:
        return self.find(product_id) is not None

    def find(self, product_id: str) -> CartItem | None:
        for item in self.items:
            if item.product_id == product_id:
                return item
        return None

    # --- Snapshot transformations ---------------------------------------------

    def with_item_added(self, product_id: str, quantity: Quantity) -> Cart:
        """Add units of a product. Quantities accumulate onto an existing line."""
        if not self.contains(product_id):
            return replace(self, items=self.items + (CartItem(product_id, quantity),))

        items = tuple(
            CartItem(item.product_id, item.quantity + quantity)
            if item.product_id == product_id
            else item
            for item in self.items
        )
        return replace(self, items=items)

    def with_quantity(self, product_id: str, quantity: Quantity) -> Cart:
        """Set the quantity of an existing line (absolute, not a delta)."""
        if not self.contains(product_id):
            raise NotFoundError(f"Product '{product_id}' is not in the cart")

        items = tuple(
            CartItem(item.product_id, quantity) if item.product_id == product_id else item
            for item in self.items
        )
        return replace(self, items=items)

    def without_item(self, product_id: str) -> Cart:
        items = tuple(item for item in self.items if item.product_id != product_id)
        return replace(self, items=items)

    def with_total(self, total: Money) -> Cart:
        return replace(self, total=total)
