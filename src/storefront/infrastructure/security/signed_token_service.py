"""Signed, time-limited session tokens (itsdangerous).

The token carries ``{"user_id": ...}`` and is only accepted for
``max_age`` seconds after it was issued.
"""

from __future__ import annotations

import structlog
from itsdangerous import BadSignature, SignatureExpired, URLSafeTimedSerializer

from storefront.application.cookies import TOKEN_MAX_AGE
from storefront.application.ports import TokenService

logger = structlog.get_logger(__name__)

_SALT = "storefront-session-v1"


class SignedTokenService(TokenService):

    def __init__(self, secret_key: str, max_age: int = TOKEN_MAX_AGE) -> None:
        self._serializer = URLSafeTimedSerializer(secret_key, salt=_SALT)
        self._max_age = max_age

    def issue(self, user_id: int) -> str:
        return self._serializer.dumps({"user_id": user_id})

    def verify(self, token: str) -> int | None:
        try:
            payload = self._serializer.loads(token, max_age=self._max_age)
        except SignatureExpired:
            logger.debug("session_token_expired")
            return None
        except BadSignature:
            logger.debug("session_token_invalid")
            return None

        user_id = payload.get("user_id") if isinstance(payload, dict) else None
        if not isinstance(user_id, int) or isinstance(user_id, bool):
            return None
        return user_id
