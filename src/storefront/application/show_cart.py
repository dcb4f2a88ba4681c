"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from storefront.application.cart_engine import CartEngine
from storefront.application.dto import CartDTO, CartLineDTO
from storefront.domain.model.cart_source import CartSource
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.cart_pricing_service import CartPricingService


class ShowCartHandler:

    def __init__(self, cart_engine: CartEngine, product_repo: ProductRepository) -> None:
        self._cart_engine = cart_engine
        self._pricing = CartPricingService(product_repo)

    def handle(self, source: CartSource) -> CartDTO:
        """Describe the cart with names and prices as they are right now."""
        cart = self._cart_engine.load(source)
        products = self._pricing.resolve_products(cart)
        cart = self._pricing.reprice(cart)

        lines = []
        for item in cart.items:
            product = products[item.product_id]
            lines.append(
                CartLineDTO(
                    product_id=item.product_id,
                    product_name=product.name,
                    quantity=item.quantity.value,
                    unit_price=str(product.price),
                    line_total=str(product.price * item.quantity.value),
                )
            )

        return CartDTO(items=lines, count=cart.count, total=str(cart.total))
