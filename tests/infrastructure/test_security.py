"""Tests for the bcrypt hasher and the signed session tokens."""

import pytest
from itsdangerous import URLSafeTimedSerializer

from storefront.infrastructure.security.bcrypt_password_hasher import BcryptPasswordHasher
from storefront.infrastructure.security.signed_token_service import SignedTokenService


class TestBcryptPasswordHasher:

    @pytest.fixture
    def hasher(self):
        return BcryptPasswordHasher(rounds=4)

    def test_hash_verifies(self, hasher):
        hashed = hasher.hash("secret1")
        assert hashed != "secret1"
        assert hasher.verify("secret1", hashed)

    def test_wrong_password(self, hasher):
        assert not hasher.verify("nope", hasher.hash("secret1"))

    def test_malformed_hash(self, hasher):
        assert not hasher.verify("secret1", "not-a-bcrypt-hash")
        assert not hasher.verify("secret1", "")


class TestSignedTokenService:

    def test_round_trip(self):
        tokens = SignedTokenService("key")
        assert tokens.verify(tokens.issue(42)) == 42

    def test_other_key_rejected(self):
        token = SignedTokenService("key").issue(42)
        assert SignedTokenService("other").verify(token) is None

    def test_tampered_token_rejected(self):
        token = SignedTokenService("key").issue(42)
        assert SignedTokenService("key").verify(token + "x") is None

    def test_expired_token_rejected(self):
        tokens = SignedTokenService("key", max_age=-1)
        assert tokens.verify(tokens.issue(42)) is None

    def test_payload_without_user_id_rejected(self):
        token = URLSafeTimedSerializer("key", salt="storefront-session-v1").dumps({"x": 1})
        assert SignedTokenService("key").verify(token) is None
