"""Application service: Login use case."""

from __future__ import annotations

import structlog

from storefront.application.cookies import TOKEN_COOKIE, TOKEN_MAX_AGE, CookieInstruction
from storefront.application.dto import SessionDTO
from storefront.application.ports import PasswordHasher, TokenService
from storefront.domain.exceptions import AuthenticationError, ValidationError
from storefront.domain.model.user import normalize_email
from storefront.domain.repository.user_repository import UserRepository

logger = structlog.get_logger(__name__)


class LoginHandler:

    def __init__(
        self,
        user_repo: UserRepository,
        hasher: PasswordHasher,
        tokens: TokenService,
    ) -> None:
        self._user_repo = user_repo
        self._hasher = hasher
        self._tokens = tokens

    def handle(self, email: str, password: str) -> SessionDTO:
        """Check credentials and issue a session token.

        The anonymous cookie cart is left alone; it is not merged into
        the user's cart.
        """
        if not password:
            raise ValidationError("Password is required")

        user = self._user_repo.get_by_email(normalize_email(email))
        # Same message for both cases so the response does not reveal
        # which emails are registered.
        if user is None or not self._hasher.verify(password, user.password_hash):
            logger.info("login_failed")
            raise AuthenticationError("Invalid credentials")

        logger.info("user_logged_in", user_id=user.id)
        return SessionDTO(
            user_id=user.id,  # type: ignore[arg-type]
            name=user.name,
            email=user.email,
            cookie=CookieInstruction.set(
                TOKEN_COOKIE,
                self._tokens.issue(user.id),  # type: ignore[arg-type]
                TOKEN_MAX_AGE,
                http_only=True,
            ),
        )
