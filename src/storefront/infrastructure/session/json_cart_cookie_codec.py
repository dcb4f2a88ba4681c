"""JSON encoding of the anonymous cart cookie.

Wire format::

    {"items": [{"productId": "1", "quantity": 2}], "total": 20.0}

The cookie is client-held, so decoding is forgiving: a missing or
unreadable cookie is an empty cart, lines with an unusable quantity are
dropped, and repeated product ids are merged into one line. The
decoded ``total`` is the client's copy and is not checked against the
catalog here.
"""

from __future__ import annotations

import json
from decimal import Decimal, InvalidOperation

import structlog

from storefront.application.ports import CartCookieCodec
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.cart import Cart
from storefront.domain.model.value_objects import Money, Quantity

logger = structlog.get_logger(__name__)


class JsonCartCookieCodec(CartCookieCodec):

    def encode(self, cart: Cart) -> str:
        return json.dumps(
            {
                "items": [
                    {"productId": item.product_id, "quantity": item.quantity.value}
                    for item in cart.items
                ],
                "total": float(cart.total.amount),
            },
            separators=(",", ":"),
        )

    def decode(self, value: str | None) -> Cart:
        if not value:
            return Cart.empty()

        try:
            raw = json.loads(value)
        except json.JSONDecodeError:
            logger.warning("cart_cookie_unreadable")
            return Cart.empty()
        if not isinstance(raw, dict) or not isinstance(raw.get("items"), list):
            logger.warning("cart_cookie_malformed")
            return Cart.empty()

        cart = Cart.empty()
        for line in raw["items"]:
            if not isinstance(line, dict) or line.get("productId") in (None, ""):
                continue
            try:
                quantity = Quantity(line.get("quantity"))
            except ValidationError:
                continue
            cart = cart.with_item_added(str(line["productId"]), quantity)

        return cart.with_total(_parse_total(raw.get("total")))


def _parse_total(value: object) -> Money:
    try:
        return Money(Decimal(str(value)))
    except (InvalidOperation, ValidationError):
        return Money.zero()
