"""Application service: Register User use case."""

from __future__ import annotations

import structlog

from storefront.application.cookies import TOKEN_COOKIE, TOKEN_MAX_AGE, CookieInstruction
from storefront.application.dto import SessionDTO
from storefront.application.ports import PasswordHasher, TokenService
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.user import User, check_password_rules
from storefront.domain.repository.user_repository import UserRepository

logger = structlog.get_logger(__name__)


class RegisterUserHandler:

    def __init__(
        self,
        user_repo: UserRepository,
        hasher: PasswordHasher,
        tokens: TokenService,
    ) -> None:
        self._user_repo = user_repo
        self._hasher = hasher
        self._tokens = tokens

    def handle(self, name: str, email: str, password: str) -> SessionDTO:
        """Create an account and log it in straight away."""
        check_password_rules(password)
        user = User.register(name=name, email=email, password_hash="")

        if self._user_repo.get_by_email(user.email) is not None:
            raise ValidationError("User already exists")

        user.password_hash = self._hasher.hash(password)
        self._user_repo.save(user)
        logger.info("user_registered", user_id=user.id)

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
