"""Cookie write instructions.

Handlers never touch a response or a cookie jar directly. When a
result has to be stored client-side they return a ``CookieInstruction``
and the boundary (the CLI here) applies it.
"""

from __future__ import annotations

from dataclasses import dataclass

TOKEN_COOKIE = "token"
TOKEN_MAX_AGE = 60 * 60  # 1 hour

CART_COOKIE = "cart"
CART_MAX_AGE = 7 * 24 * 60 * 60  # 1 week


@dataclass(frozen=True)
class CookieInstruction:
    """Set (``value`` given) or delete (``value`` is None) a cookie."""

    name: str
    value: str | None
    max_age: int | None = None
    http_only: bool = False

    @property
    def is_delete(self) -> bool:
        return self.value is None

    @staticmethod
    def set(name: str, value: str, max_age: int, http_only: bool = False) -> CookieInstruction:
        return CookieInstruction(name=name, value=value, max_age=max_age, http_only=http_only)

    @staticmethod
    def delete(name: str) -> CookieInstruction:
        return CookieInstruction(name=name, value=None)
