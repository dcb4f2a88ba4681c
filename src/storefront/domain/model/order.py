"""Order aggregate.

An Order is a frozen record of a checkout: what was bought, at which
price, where it ships and how it is paid. Nothing in this codebase
changes an order after it is created.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money, Quantity, ShippingAddress


class PaymentMethod(Enum):
    CREDIT_CARD = "credit_card"
    PAYPAL = "paypal"
    CASH_ON_DELIVERY = "cash_on_delivery"

    @staticmethod
    def parse(raw: str) -> PaymentMethod:
        """Resolve a payment method identifier such as ``"paypal"``."""
        normalized = (raw or "").strip().lower().replace("-", "_")
        for method in PaymentMethod:
            if method.value == normalized:
                return method
        choices = ", ".join(m.value for m in PaymentMethod)
        raise ValidationError(
            f"Unknown payment method {raw!r} (expected one of: {choices})"
        )


@dataclass(frozen=True)
class OrderItem:
    """Captures the price of a product at order-creation time.

    The price is never recomputed from the catalog, so an order total
    stays historically accurate when catalog prices change later.
    """

    product_id: str
    product_name: str
    quantity: Quantity
    price: Money  # locked at order-creation time

    @property
    def line_total(self) -> Money:
        return self.price * self.quantity.value


@dataclass(frozen=True)
class Order:
    """Aggregate root for placed orders.

    Use ``Order.create()`` for new orders; it enforces the business
    rules. The plain constructor lets the repository reconstitute
    persisted orders without re-validating them.
    """

    id: int | None
    owner_id: int
    items: tuple[OrderItem, ...]
    total: Money
    shipping_address: ShippingAddress
    payment_method: PaymentMethod
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(
        owner_id: int,
        items: list[OrderItem],
        shipping_address: ShippingAddress,
        payment_method: PaymentMethod,
    ) -> Order:
        """Create a new order; the total is the sum of the line totals."""
        if not items:
            raise ValidationError("Order must contain at least one item")

        seen: set[str] = set()
        for item in items:
            if item.product_id in seen:
                raise ValidationError(
                    f"Product '{item.product_id}' appears more than once in the order"
                )
            seen.add(item.product_id)

        total = Money.zero()
        for item in items:
            total = total + item.line_total

        return Order(
            id=None,
            owner_id=owner_id,
            items=tuple(items),
            total=total,
            shipping_address=shipping_address,
            payment_method=payment_method,
        )

    # --- Queries --------------------------------------------------------------

    @property
    def reference(self) -> str:
        """Short human-facing reference, e.g. ``#000042``."""
        return "#" + str(self.id or 0)[-6:].upper().zfill(6)

    @property
    def item_count(self) -> int:
        return sum(item.quantity.value for item in self.items)

    def is_visible_to(self, user_id: int, is_admin: bool = False) -> bool:
        """Only the owner or an admin may view an order."""
        return is_admin or self.owner_id == user_id
