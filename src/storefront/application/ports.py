"""Ports for collaborators the application needs but does not implement.

Concrete adapters live in ``storefront.infrastructure`` and are wired
together in the composition root.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.cart import Cart


class PasswordHasher(ABC):

    @abstractmethod
    def hash(self, password: str) -> str:
        """Return a salted hash suitable for storage."""

    @abstractmethod
    def verify(self, password: str, password_hash: str) -> bool:
        """Return True if *password* matches the stored hash."""


class TokenService(ABC):

    @abstractmethod
    def issue(self, user_id: int) -> str:
        """Return a signed session token carrying the user ID."""

    @abstractmethod
    def verify(self, token: str) -> int | None:
        """Return the user ID from a valid, unexpired token, or None."""


class CartCookieCodec(ABC):

    @abstractmethod
    def encode(self, cart: Cart) -> str:
        """Serialize a cart into a cookie value."""

    @abstractmethod
    def decode(self, value: str | None) -> Cart:
        """Parse a cookie value. Absent or unreadable values are an empty cart."""
