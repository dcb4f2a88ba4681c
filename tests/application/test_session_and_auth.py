"""Tests for registration, login and the session gate."""

import pytest

from storefront.application.cookies import CART_COOKIE, TOKEN_COOKIE, TOKEN_MAX_AGE
from storefront.application.grant_admin import GrantAdminHandler
from storefront.application.login_user import LoginHandler
from storefront.application.register_user import RegisterUserHandler
from storefront.application.session_gate import SessionGate
from storefront.domain.exceptions import (
    AuthenticationError,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)
from storefront.domain.model.cart_source import EphemeralCart, PersistedCart
from tests.fakes import FakePasswordHasher, FakeTokenService, FakeUserRepository


def _setup():
    users = FakeUserRepository()
    hasher = FakePasswordHasher()
    tokens = FakeTokenService()
    return (
        RegisterUserHandler(users, hasher, tokens),
        LoginHandler(users, hasher, tokens),
        SessionGate(users, tokens),
        users,
    )


class TestRegister:

    def test_creates_user_and_issues_token(self):
        register, _, _, users = _setup()
        session = register.handle("Alice", "Alice@Example.com", "secret1")

        assert session.email == "alice@example.com"
        assert session.cookie.name == TOKEN_COOKIE
        assert session.cookie.max_age == TOKEN_MAX_AGE
        assert session.cookie.http_only
        stored = users.get_by_id(session.user_id)
        assert stored.password_hash == "hashed:secret1"
        assert stored.cart.is_empty

    def test_duplicate_email_rejected(self):
        register, _, _, _ = _setup()
        register.handle("Alice", "alice@example.com", "secret1")
        with pytest.raises(ValidationError, match="already exists"):
            register.handle("Other", "ALICE@example.com", "secret2")

    def test_short_password_rejected(self):
        register, _, _, users = _setup()
        with pytest.raises(ValidationError, match="at least 6"):
            register.handle("Alice", "alice@example.com", "123")
        assert users.get_by_email("alice@example.com") is None


class TestLogin:

    def test_valid_credentials(self):
        register, login, _, _ = _setup()
        register.handle("Alice", "alice@example.com", "secret1")

        session = login.handle(" ALICE@example.com ", "secret1")

        assert session.name == "Alice"
        assert session.cookie.value == f"token-{session.user_id}"

    def test_wrong_password(self):
        register, login, _, _ = _setup()
        register.handle("Alice", "alice@example.com", "secret1")
        with pytest.raises(AuthenticationError, match="Invalid credentials"):
            login.handle("alice@example.com", "wrong!!")

    def test_unknown_email(self):
        _, login, _, _ = _setup()
        with pytest.raises(AuthenticationError, match="Invalid credentials"):
            login.handle("nobody@example.com", "secret1")


class TestSessionGate:

    def test_no_token_uses_cookie_cart(self):
        _, _, gate, _ = _setup()
        source = gate.resolve_cart_source({CART_COOKIE: '{"items": []}'})
        assert source == EphemeralCart(cookie_value='{"items": []}')

    def test_no_cookies_at_all(self):
        _, _, gate, _ = _setup()
        assert gate.resolve_cart_source({}) == EphemeralCart(cookie_value=None)

    def test_valid_token_uses_persisted_cart(self):
        register, _, gate, _ = _setup()
        session = register.handle("Alice", "alice@example.com", "secret1")
        cookies = {TOKEN_COOKIE: session.cookie.value, CART_COOKIE: "ignored"}
        assert gate.resolve_cart_source(cookies) == PersistedCart(user_id=session.user_id)

    def test_invalid_token_falls_back_to_cookie_cart(self):
        _, _, gate, _ = _setup()
        source = gate.resolve_cart_source({TOKEN_COOKIE: "forged"})
        assert isinstance(source, EphemeralCart)

    def test_token_for_deleted_user_falls_back(self):
        _, _, gate, _ = _setup()
        assert gate.current_user({TOKEN_COOKIE: "token-99"}) is None

    def test_require_user(self):
        _, _, gate, _ = _setup()
        with pytest.raises(AuthenticationError, match="log in"):
            gate.require_user({})

    def test_require_admin(self):
        register, _, gate, users = _setup()
        session = register.handle("Alice", "alice@example.com", "secret1")
        cookies = {TOKEN_COOKIE: session.cookie.value}

        with pytest.raises(PermissionDeniedError):
            gate.require_admin(cookies)

        GrantAdminHandler(users).handle("alice@example.com")
        assert gate.require_admin(cookies).is_admin

    def test_logout_deletes_token(self):
        instruction = SessionGate.logout()
        assert instruction.name == TOKEN_COOKIE
        assert instruction.is_delete


class TestGrantAdmin:

    def test_unknown_user(self):
        with pytest.raises(NotFoundError):
            GrantAdminHandler(FakeUserRepository()).handle("ghost@example.com")
