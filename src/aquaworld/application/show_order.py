"""Application service: order queries."""

from __future__ import annotations

from aquaworld.application.dto import OrderDTO, to_order_dto
from aquaworld.domain.exceptions import NotFoundError
from aquaworld.domain.repository.order_repository import OrderRepository


class ShowOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise NotFoundError(f"Order {order_id} not found")
        return to_order_dto(order)

    def by_order_number(self, order_number: str) -> OrderDTO:
        order = self._order_repo.get_by_order_number(order_number)
        if order is None:
            raise NotFoundError(f"Order {order_number} not found")
        return to_order_dto(order)

    def for_user(self, user_id: int) -> list[OrderDTO]:
        """All orders placed by *user_id*; an empty list is not an error."""
        return [to_order_dto(order) for order in self._order_repo.list_by_user(user_id)]
