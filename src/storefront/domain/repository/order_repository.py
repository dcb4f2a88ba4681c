"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def list_by_owner(self, owner_id: int) -> list[Order]:
        """Return every order placed by a user, newest first."""

    @abstractmethod
    def add(self, order: Order) -> Order:
        """Persist a new order and return it with its assigned ID.

        Orders are immutable, so there is no update path.
        """
