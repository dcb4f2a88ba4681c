"""Session gate: who is making this request, and where is their cart.

The gate reads the visitor's cookies and never authenticates by itself
beyond verifying the signed session token. A valid token for an
existing user selects that user's persisted cart; anything else falls
back to the anonymous cookie cart.
"""

from __future__ import annotations

from collections.abc import Mapping

from storefront.application.cookies import CART_COOKIE, TOKEN_COOKIE, CookieInstruction
from storefront.application.ports import TokenService
from storefront.domain.exceptions import AuthenticationError, PermissionDeniedError
from storefront.domain.model.cart_source import CartSource, EphemeralCart, PersistedCart
from storefront.domain.model.user import User
from storefront.domain.repository.user_repository import UserRepository


class SessionGate:

    def __init__(self, user_repo: UserRepository, tokens: TokenService) -> None:
        self._user_repo = user_repo
        self._tokens = tokens

    def current_user(self, cookies: Mapping[str, str]) -> User | None:
        token = cookies.get(TOKEN_COOKIE)
        if not token:
            return None
        user_id = self._tokens.verify(token)
        if user_id is None:
            return None
        return self._user_repo.get_by_id(user_id)

    def require_user(self, cookies: Mapping[str, str]) -> User:
        user = self.current_user(cookies)
        if user is None:
            raise AuthenticationError("Please log in first")
        return user

    def require_admin(self, cookies: Mapping[str, str]) -> User:
        user = self.require_user(cookies)
        if not user.is_admin:
            raise PermissionDeniedError(
                "You do not have permission to access this page"
            )
        return user

    def resolve_cart_source(self, cookies: Mapping[str, str]) -> CartSource:
        user = self.current_user(cookies)
        if user is not None:
            return PersistedCart(user_id=user.id)  # type: ignore[arg-type]
        return EphemeralCart(cookie_value=cookies.get(CART_COOKIE))

    @staticmethod
    def logout() -> CookieInstruction:
        return CookieInstruction.delete(TOKEN_COOKIE)
