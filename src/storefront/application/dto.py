"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.application.cookies import CookieInstruction
from storefront.domain.model.cart import Cart
from storefront.domain.model.order import Order


@dataclass(frozen=True)
class ShippingInfo:
    """Input: the checkout form's shipping fields."""

    street: str
    city: str
    state: str
    zip_code: str
    country: str


@dataclass(frozen=True)
class CartUpdate:
    """Output of a cart mutation: the new snapshot plus the write to apply."""

    cart: Cart
    cookie: CookieInstruction | None = None

    @property
    def count(self) -> int:
        return self.cart.count

    @property
    def total(self) -> str:
        return str(self.cart.total)


@dataclass(frozen=True)
class CartLineDTO:
    product_id: str
    product_name: str
    quantity: int
    unit_price: str  # formatted, e.g. "$15.00"
    line_total: str


@dataclass(frozen=True)
class CartDTO:
    items: list[CartLineDTO]
    count: int
    total: str


@dataclass(frozen=True)
class OrderItemDTO:
    product_id: str
    product_name: str
    quantity: int
    price: str
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: int
    reference: str
    owner_id: int
    items: list[OrderItemDTO]
    total: str
    shipping_address: str
    payment_method: str
    created_at: str


@dataclass(frozen=True)
class CheckoutResult:
    order: OrderDTO
    cookie: CookieInstruction | None = None


@dataclass(frozen=True)
class SessionDTO:
    """Output of register/login: who is logged in and the cookie to set."""

    user_id: int
    name: str
    email: str
    cookie: CookieInstruction


# --- Mapping ------------------------------------------------------------------


def to_order_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        reference=order.reference,
        owner_id=order.owner_id,
        items=[
            OrderItemDTO(
                product_id=item.product_id,
                product_name=item.product_name,
                quantity=item.quantity.value,
                price=str(item.price),
                line_total=str(item.line_total),
            )
            for item in order.items
        ],
        total=str(order.total),
        shipping_address=str(order.shipping_address),
        payment_method=order.payment_method.value,
        created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
    )
