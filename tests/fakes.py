"""In-memory fakes for testing.

These implement the same abstract interfaces as the JSON repositories
and the security adapters but keep everything in dicts. No file I/O,
no side effects.
"""

from __future__ import annotations

import copy
from dataclasses import replace

from storefront.application.ports import PasswordHasher, TokenService
from storefront.domain.exceptions import StorageError
from storefront.domain.model.order import Order
from storefront.domain.model.product import Product
from storefront.domain.model.user import User
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.user_repository import UserRepository


class FakeOrderRepository(OrderRepository):

    def __init__(self) -> None:
        self._store: dict[int, Order] = {}
        self._next_id = 1

    def get_by_id(self, order_id: int) -> Order | None:
        return self._store.get(order_id)

    def list_by_owner(self, owner_id: int) -> list[Order]:
        orders = [o for o in self._store.values() if o.owner_id == owner_id]
        return sorted(orders, key=lambda o: (o.created_at, o.id), reverse=True)

    def add(self, order: Order) -> Order:
        saved = replace(order, id=self._next_id)
        self._next_id += 1
        self._store[saved.id] = saved
        return saved

    def all(self) -> list[Order]:
        return list(self._store.values())


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        for p in products or []:
            self._store[p.id] = p

    def next_id(self) -> str:
        ids = [int(pid) for pid in self._store if pid.isdigit()]
        return str(max(ids) + 1) if ids else "1"

    def get_by_id(self, product_id: str) -> Product | None:
        return self._store.get(product_id)

    def get_many(self, product_ids: list[str]) -> dict[str, Product]:
        return {pid: self._store[pid] for pid in product_ids if pid in self._store}

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def save(self, product: Product) -> None:
        self._store[product.id] = product


class FakeUserRepository(UserRepository):
    """Stores copies, like a real document store would."""

    def __init__(self, users: list[User] | None = None) -> None:
        self._store: dict[int, User] = {}
        self.saves = 0
        self.fail_saves = 0
        for u in users or []:
            self.save(u)
        self.saves = 0

    def get_by_id(self, user_id: int) -> User | None:
        user = self._store.get(user_id)
        return copy.deepcopy(user) if user else None

    def get_by_email(self, email: str) -> User | None:
        for user in self._store.values():
            if user.email == email:
                return copy.deepcopy(user)
        return None

    def save(self, user: User) -> None:
        if self.fail_saves > 0:
            self.fail_saves -= 1
            raise StorageError("disk full")
        if user.id is None:
            user.id = max(self._store, default=0) + 1
        self._store[user.id] = copy.deepcopy(user)
        self.saves += 1


class FakePasswordHasher(PasswordHasher):

    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, password_hash: str) -> bool:
        return password_hash == f"hashed:{password}"


class FakeTokenService(TokenService):

    def issue(self, user_id: int) -> str:
        return f"token-{user_id}"

    def verify(self, token: str) -> int | None:
        if not token.startswith("token-"):
            return None
        try:
            return int(token.removeprefix("token-"))
        except ValueError:
            return None
