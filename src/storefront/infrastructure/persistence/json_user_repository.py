"""JSON-file-backed implementation of UserRepository.

The persisted cart is stored inside the user record, the same way the
user document embeds it. Saving a user rewrites the whole record.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from pathlib import Path

from storefront.domain.model.cart import Cart, CartItem
from storefront.domain.model.user import User
from storefront.domain.model.value_objects import Money, Quantity
from storefront.domain.repository.user_repository import UserRepository
from storefront.infrastructure.persistence.json_file import ensure_file, read_json, write_json


class JsonUserRepository(UserRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        ensure_file(self._file_path)

    # --- UserRepository interface ---------------------------------------------

    def get_by_id(self, user_id: int) -> User | None:
        for raw in self._load_raw():
            if raw["id"] == user_id:
                return self._to_domain(raw)
        return None

    def get_by_email(self, email: str) -> User | None:
        for raw in self._load_raw():
            if raw["email"] == email:
                return self._to_domain(raw)
        return None

    def save(self, user: User) -> None:
        users = self._load_raw()

        if user.id is None:
            user.id = max((u["id"] for u in users), default=0) + 1

        # Upsert: replace if exists, otherwise append
        for i, raw in enumerate(users):
            if raw["id"] == user.id:
                users[i] = self._to_raw(user)
                break
        else:
            users.append(self._to_raw(user))

        write_json(self._file_path, users)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(user: User) -> dict:
        return {
            "id": user.id,
            "name": user.name,
            "email": user.email,
            "password_hash": user.password_hash,
            "is_admin": user.is_admin,
            "created_at": user.created_at.isoformat(),
            "cart": {
                "items": [
                    {"product_id": item.product_id, "quantity": item.quantity.value}
                    for item in user.cart.items
                ],
                "total": str(user.cart.total.amount),
            },
        }

    @staticmethod
    def _to_domain(raw: dict) -> User:
        cart_raw = raw.get("cart") or {}
        cart = Cart(
            items=tuple(
                CartItem(product_id=i["product_id"], quantity=Quantity(i["quantity"]))
                for i in cart_raw.get("items", [])
            ),
            total=Money(Decimal(cart_raw.get("total", "0.00"))),
        )
        return User(
            id=raw["id"],
            name=raw["name"],
            email=raw["email"],
            password_hash=raw["password_hash"],
            is_admin=raw.get("is_admin", False),
            cart=cart,
            created_at=datetime.fromisoformat(raw["created_at"]),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return read_json(self._file_path)
