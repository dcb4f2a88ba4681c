"""Abstract repository for User aggregate (including the embedded cart)."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.user import User


class UserRepository(ABC):

    @abstractmethod
    def get_by_id(self, user_id: int) -> User | None:
        """Return a user by ID, or None if not found."""

    @abstractmethod
    def get_by_email(self, email: str) -> User | None:
        """Return a user by normalized email, or None if not found."""

    @abstractmethod
    def save(self, user: User) -> None:
        """Persist a new or updated user.

        The whole record is overwritten; concurrent writers to the
        same user resolve as last-write-wins. New users get an ID
        assigned in place.
        """
