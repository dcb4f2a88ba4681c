"""Application service: Show Order use case (query)."""

from __future__ import annotations

from storefront.application.dto import OrderDTO, to_order_dto
from storefront.domain.exceptions import NotFoundError, PermissionDeniedError
from storefront.domain.model.user import User
from storefront.domain.repository.order_repository import OrderRepository


class ShowOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int, viewer: User) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise NotFoundError(f"Order #{order_id} not found")
        if not order.is_visible_to(viewer.id, viewer.is_admin):  # type: ignore[arg-type]
            raise PermissionDeniedError(
                "You do not have permission to view this order"
            )
        return to_order_dto(order)
