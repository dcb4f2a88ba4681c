"""Where a cart lives.

A logged-in visitor's cart is embedded in their user record; an
anonymous visitor's cart travels in the ``cart`` cookie. The session
gate decides which one applies to a request.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class PersistedCart:
    user_id: int


@dataclass(frozen=True)
class EphemeralCart:
    cookie_value: str | None = None


CartSource = Union[PersistedCart, EphemeralCart]
