"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from storefront.domain.model.order import Order, OrderItem, PaymentMethod
from storefront.domain.model.value_objects import Money, Quantity, ShippingAddress
from storefront.domain.repository.order_repository import OrderRepository
from storefront.infrastructure.persistence.json_file import ensure_file, read_json, write_json


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        ensure_file(self._file_path)

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: int) -> Order | None:
        for raw in self._load_raw():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def list_by_owner(self, owner_id: int) -> list[Order]:
        orders = [self._to_domain(raw) for raw in self._load_raw() if raw["owner_id"] == owner_id]
        return sorted(orders, key=lambda o: (o.created_at, o.id), reverse=True)

    def add(self, order: Order) -> Order:
        orders = self._load_raw()
        next_id = max((o["id"] for o in orders), default=0) + 1
        saved = replace(order, id=next_id)
        orders.append(self._to_raw(saved))
        write_json(self._file_path, orders)
        return saved

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        address = order.shipping_address
        return {
            "id": order.id,
            "owner_id": order.owner_id,
            "created_at": order.created_at.isoformat(),
            "total": str(order.total.amount),
            "currency": order.total.currency,
            "payment_method": order.payment_method.value,
            "shipping_address": {
                "street": address.street,
                "city": address.city,
                "state": address.state,
                "zip_code": address.zip_code,
                "country": address.country,
            },
            "items": [
                {
                    "product_id": item.product_id,
                    "product_name": item.product_name,
                    "quantity": item.quantity.value,
                    "price": str(item.price.amount),
                    "currency": item.price.currency,
                }
                for item in order.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        items = tuple(
            OrderItem(
                product_id=i["product_id"],
                product_name=i["product_name"],
                quantity=Quantity(i["quantity"]),
                price=Money(Decimal(i["price"]), i.get("currency", "USD")),
            )
            for i in raw["items"]
        )
        return Order(
            id=raw["id"],
            owner_id=raw["owner_id"],
            items=items,
            total=Money(Decimal(raw["total"]), raw.get("currency", "USD")),
            shipping_address=ShippingAddress(**raw["shipping_address"]),
            payment_method=PaymentMethod(raw["payment_method"]),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return read_json(self._file_path)
