"""Unit tests for the User aggregate."""

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.user import User, check_password_rules


class TestRegister:

    def test_normalizes_email_and_name(self):
        user = User.register("  Alice ", " Alice@Example.COM ", "hash")
        assert user.name == "Alice"
        assert user.email == "alice@example.com"
        assert user.cart.is_empty
        assert not user.is_admin

    def test_name_required(self):
        with pytest.raises(ValidationError, match="Name is required"):
            User.register(" ", "alice@example.com", "hash")

    def test_invalid_email_rejected(self):
        with pytest.raises(ValidationError, match="valid email"):
            User.register("Alice", "not-an-email", "hash")


class TestPasswordRules:

    def test_short_password_rejected(self):
        with pytest.raises(ValidationError, match="at least 6"):
            check_password_rules("12345")

    def test_six_characters_accepted(self):
        check_password_rules("123456")
