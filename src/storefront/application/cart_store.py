"""Read/write adapters for the two cart sources.

``UserCartStore`` keeps the cart inside the user record and writes it
back through the user repository. ``CookieCartStore`` keeps it in the
``cart`` cookie and answers every write with a cookie instruction for
the boundary to apply.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.application.cookies import CART_COOKIE, CART_MAX_AGE, CookieInstruction
from storefront.application.ports import CartCookieCodec
from storefront.domain.exceptions import NotFoundError
from storefront.domain.model.cart import Cart
from storefront.domain.model.cart_source import CartSource, EphemeralCart, PersistedCart
from storefront.domain.model.user import User
from storefront.domain.repository.user_repository import UserRepository


class CartStore(ABC):

    @abstractmethod
    def load(self, source: CartSource) -> Cart:
        """Return the current cart snapshot for the source."""

    @abstractmethod
    def save(self, source: CartSource, cart: Cart) -> CookieInstruction | None:
        """Store a cart snapshot; return a cookie instruction if the boundary must act."""

    @abstractmethod
    def clear(self, source: CartSource) -> CookieInstruction | None:
        """Reset the cart to empty. Safe to call repeatedly."""


class UserCartStore(CartStore):

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def load(self, source: CartSource) -> Cart:
        return self._user(source).cart

    def save(self, source: CartSource, cart: Cart) -> CookieInstruction | None:
        user = self._user(source)
        user.replace_cart(cart)
        self._user_repo.save(user)
        return None

    def clear(self, source: CartSource) -> CookieInstruction | None:
        return self.save(source, Cart.empty())

    def _user(self, source: CartSource) -> User:
        if not isinstance(source, PersistedCart):
            raise TypeError(f"UserCartStore cannot handle {type(source).__name__}")
        user = self._user_repo.get_by_id(source.user_id)
        if user is None:
            raise NotFoundError(f"User #{source.user_id} not found")
        return user


class CookieCartStore(CartStore):

    def __init__(self, codec: CartCookieCodec) -> None:
        self._codec = codec

    def load(self, source: CartSource) -> Cart:
        return self._codec.decode(self._cookie_value(source))

    def save(self, source: CartSource, cart: Cart) -> CookieInstruction | None:
        self._cookie_value(source)
        return CookieInstruction.set(CART_COOKIE, self._codec.encode(cart), CART_MAX_AGE)

    def clear(self, source: CartSource) -> CookieInstruction | None:
        self._cookie_value(source)
        return CookieInstruction.delete(CART_COOKIE)

    @staticmethod
    def _cookie_value(source: CartSource) -> str | None:
        if not isinstance(source, EphemeralCart):
            raise TypeError(f"CookieCartStore cannot handle {type(source).__name__}")
        return source.cookie_value
