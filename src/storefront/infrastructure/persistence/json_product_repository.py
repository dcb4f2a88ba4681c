"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from pathlib import Path

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository
from storefront.infrastructure.persistence.json_file import ensure_file, read_json, write_json


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        ensure_file(self._file_path)

    # --- ProductRepository interface ------------------------------------------

    def next_id(self) -> str:
        ids = [int(pid) for pid in self._load() if pid.isdigit()]
        return str(max(ids) + 1) if ids else "1"

    def get_by_id(self, product_id: str) -> Product | None:
        return self._load().get(product_id)

    def get_many(self, product_ids: list[str]) -> dict[str, Product]:
        products = self._load()
        return {pid: products[pid] for pid in product_ids if pid in products}

    def list_all(self) -> list[Product]:
        return list(self._load().values())

    def save(self, product: Product) -> None:
        products = self._load()
        products[product.id] = product
        self._persist(products)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Product]:
        return {
            item["id"]: Product(
                id=item["id"],
                name=item["name"],
                price=Money(Decimal(item["price"]), item.get("currency", "USD")),
                stock=item.get("stock", 0),
                category=item.get("category", ""),
                description=item.get("description", ""),
                image=item.get("image", ""),
                created_at=datetime.fromisoformat(item["created_at"]),
            )
            for item in read_json(self._file_path)
        }

    def _persist(self, products: dict[str, Product]) -> None:
        raw = [
            {
                "id": p.id,
                "name": p.name,
                "price": str(p.price.amount),
                "currency": p.price.currency,
                "stock": p.stock,
                "category": p.category,
                "description": p.description,
                "image": p.image,
                "created_at": p.created_at.isoformat(),
            }
            for p in products.values()
        ]
        write_json(self._file_path, raw)
