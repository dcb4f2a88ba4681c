"""Product aggregate.

Products live independently of carts and orders. Carts only reference a
product by id and read its price when the cart total is recomputed;
orders copy the price at checkout.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the catalog."""

    id: str
    name: str
    price: Money
    stock: int = 0
    category: str = ""
    description: str = ""
    image: str = ""
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        _check_stock(self.stock)

    def update_price(self, new_price: Money) -> None:
        """Change the product price.

        This does NOT affect any existing orders because orders
        capture a price snapshot at creation time. Carts pick up the
        new price the next time their total is recomputed.
        """
        self.price = new_price

    def update_stock(self, new_stock: int) -> None:
        _check_stock(new_stock)
        self.stock = new_stock


def _check_stock(stock: int) -> None:
    if not isinstance(stock, int) or isinstance(stock, bool):
        raise ValidationError(f"Stock must be an integer, got {type(stock).__name__}")
    if stock < 0:
        raise ValidationError("Stock cannot be negative")
