"""Application service: Delete Order use case (admin).

Only orders in a terminal state may be removed, so deleting an order
never orphans stock it still holds.
"""

from __future__ import annotations

from aquaworld.domain.exceptions import InvalidTransitionError, NotFoundError
from aquaworld.domain.repository.order_repository import OrderRepository


class DeleteOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int) -> None:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise NotFoundError(f"Order {order_id} not found")
        if not order.is_terminal:
            raise InvalidTransitionError(
                f"Cannot delete order {order.order_number} in "
                f"{order.status.value} status; cancel or deliver it first"
            )
        self._order_repo.delete(order_id)
