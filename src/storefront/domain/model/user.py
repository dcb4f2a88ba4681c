"""User aggregate.

A user owns exactly one persisted cart. It is created empty with the
user and survives across sessions; checkout resets it.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime, timezone

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.cart import Cart

MIN_PASSWORD_LENGTH = 6
_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


@dataclass
class User:
    id: int | None
    name: str
    email: str
    password_hash: str
    is_admin: bool = False
    cart: Cart = field(default_factory=Cart.empty)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def register(name: str, email: str, password_hash: str) -> User:
        """Create a new user. The raw password is checked by ``check_password_rules``."""
        if not name or not name.strip():
            raise ValidationError("Name is required")

        email = normalize_email(email)
        if not _EMAIL_RE.match(email):
            raise ValidationError("Please include a valid email")

        return User(id=None, name=name.strip(), email=email, password_hash=password_hash)

    def replace_cart(self, cart: Cart) -> None:
        """Overwrite the embedded cart with a new snapshot."""
        self.cart = cart

    def grant_admin(self) -> None:
        self.is_admin = True


def check_password_rules(password: str) -> None:
    if not password or len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
        )
