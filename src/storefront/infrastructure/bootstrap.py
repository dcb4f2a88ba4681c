"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from storefront.application.cart_engine import CartEngine
from storefront.application.cart_store import CookieCartStore, UserCartStore
from storefront.application.session_gate import SessionGate
from storefront.infrastructure.config import Settings, load_settings
from storefront.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from storefront.infrastructure.persistence.json_user_repository import (
    JsonUserRepository,
)
from storefront.infrastructure.security.bcrypt_password_hasher import BcryptPasswordHasher
from storefront.infrastructure.security.signed_token_service import SignedTokenService
from storefront.infrastructure.session.cookie_jar import CookieJar
from storefront.infrastructure.session.json_cart_cookie_codec import JsonCartCookieCodec


def settings() -> Settings:
    return load_settings()


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(settings().data_dir / "products.json")


def order_repository() -> JsonOrderRepository:
    return JsonOrderRepository(settings().data_dir / "orders.json")


def user_repository() -> JsonUserRepository:
    return JsonUserRepository(settings().data_dir / "users.json")


def password_hasher() -> BcryptPasswordHasher:
    return BcryptPasswordHasher()


def token_service() -> SignedTokenService:
    return SignedTokenService(settings().secret_key)


def cookie_jar() -> CookieJar:
    return CookieJar(settings().cookie_jar)


def cart_engine() -> CartEngine:
    return CartEngine(
        product_repo=product_repository(),
        user_store=UserCartStore(user_repository()),
        cookie_store=CookieCartStore(JsonCartCookieCodec()),
    )


def session_gate() -> SessionGate:
    return SessionGate(user_repository(), token_service())
