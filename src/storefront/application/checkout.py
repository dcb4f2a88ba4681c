"""Application service: Checkout (the order builder).

Turns the visitor's current cart into an immutable Order, then clears
the cart. The two writes are explicit phases:

  Phase 1: persist the Order. Nothing has been written before this
           point, so any failure up to here leaves no trace.
  Phase 2: clear the source cart. Clearing is idempotent, so it is
           retried on storage errors. If it still fails, or the cart
           owner has vanished, the order stands and
           ``CartClearPendingError`` tells the caller which order is
           waiting for its cart to be cleared; clearing the same source
           again completes the checkout.
"""

from __future__ import annotations

import structlog
from tenacity import Retrying, retry_if_exception_type, stop_after_attempt, wait_exponential
from tenacity.wait import wait_base

from storefront.application.cart_engine import CartEngine
from storefront.application.dto import CartUpdate, CheckoutResult, ShippingInfo, to_order_dto
from storefront.domain.exceptions import (
    CartClearPendingError,
    EmptyCartError,
    NotFoundError,
    StorageError,
)
from storefront.domain.model.cart_source import CartSource
from storefront.domain.model.order import Order, OrderItem, PaymentMethod
from storefront.domain.model.value_objects import ShippingAddress
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.cart_pricing_service import CartPricingService

logger = structlog.get_logger(__name__)

CLEAR_ATTEMPTS = 3


class CheckoutHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
        cart_engine: CartEngine,
        clear_attempts: int = CLEAR_ATTEMPTS,
        clear_wait: wait_base | None = None,
    ) -> None:
        self._order_repo = order_repo
        self._pricing = CartPricingService(product_repo)
        self._cart_engine = cart_engine
        self._clear_attempts = clear_attempts
        self._clear_wait = clear_wait or wait_exponential(multiplier=0.05, max=0.5)

    def handle(
        self,
        source: CartSource,
        owner_id: int,
        shipping: ShippingInfo,
        payment_method: str,
    ) -> CheckoutResult:
        """Place an order for everything in the cart.

        Steps:
        1. Validate shipping address and payment method.
        2. Load the cart (fail with EmptyCartError if it has no items).
        3. Batch-resolve current prices (fail if any product vanished).
        4. Build OrderItems with those prices (snapshot) and persist.
        5. Clear the source cart.
        """
        address = ShippingAddress.of(
            street=shipping.street,
            city=shipping.city,
            state=shipping.state,
            zip_code=shipping.zip_code,
            country=shipping.country,
        )
        method = PaymentMethod.parse(payment_method)

        cart = self._cart_engine.load(source)
        if cart.is_empty:
            raise EmptyCartError("Cart is empty")

        products = self._pricing.resolve_products(cart)
        items = [
            OrderItem(
                product_id=item.product_id,
                product_name=products[item.product_id].name,
                quantity=item.quantity,
                price=products[item.product_id].price,  # <-- price snapshot
            )
            for item in cart.items
        ]

        # Phase 1
        order = self._order_repo.add(
            Order.create(
                owner_id=owner_id,
                items=items,
                shipping_address=address,
                payment_method=method,
            )
        )
        logger.info(
            "order_created",
            order_id=order.id,
            owner_id=owner_id,
            items=len(order.items),
            total=str(order.total.amount),
        )

        # Phase 2
        cleared = self._clear_source_cart(source, order)
        return CheckoutResult(order=to_order_dto(order), cookie=cleared.cookie)

    def _clear_source_cart(self, source: CartSource, order: Order) -> CartUpdate:
        retrying = Retrying(
            retry=retry_if_exception_type(StorageError),
            stop=stop_after_attempt(self._clear_attempts),
            wait=self._clear_wait,
            before_sleep=lambda state: logger.warning(
                "cart_clear_retry",
                order_id=order.id,
                attempt=state.attempt_number,
            ),
            reraise=True,
        )
        try:
            return retrying(self._cart_engine.clear, source)
        except (StorageError, NotFoundError) as exc:
            logger.error("cart_clear_failed", order_id=order.id, error=str(exc))
            raise CartClearPendingError(
                order.id,  # type: ignore[arg-type]
                f"Order {order.reference} was created but the cart could not be "
                f"cleared: {exc}",
            ) from exc
