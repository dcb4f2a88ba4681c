"""Application service: Grant Admin use case (operator command)."""

from __future__ import annotations

import structlog

from storefront.domain.exceptions import NotFoundError
from storefront.domain.model.user import User, normalize_email
from storefront.domain.repository.user_repository import UserRepository

logger = structlog.get_logger(__name__)


class GrantAdminHandler:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def handle(self, email: str) -> User:
        user = self._user_repo.get_by_email(normalize_email(email))
        if user is None:
            raise NotFoundError(f"No user with email '{email}'")

        user.grant_admin()
        self._user_repo.save(user)
        logger.info("admin_granted", user_id=user.id)
        return user
