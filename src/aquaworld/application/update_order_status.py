"""Application service: Update Order Status use case.

Moves an order along the lifecycle table.  A request to move to
CANCELLED is routed through the cancel use case so the order's stock is
released; setting the status alone would strand the reservation.
"""

from __future__ import annotations

from aquaworld.application.cancel_order import CancelOrderHandler
from aquaworld.application.dto import OrderDTO, to_order_dto
from aquaworld.domain.exceptions import NotFoundError
from aquaworld.domain.model.order import Order, OrderStatus
from aquaworld.domain.repository.order_repository import OrderRepository
from aquaworld.domain.repository.product_repository import ProductRepository


class UpdateOrderStatusHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._order_repo = order_repo
        self._cancel = CancelOrderHandler(order_repo, product_repo)

    def handle(self, order_id: int, new_status: str | OrderStatus) -> OrderDTO:
        target = OrderStatus.parse(new_status)
        if target is OrderStatus.CANCELLED:
            return self._cancel.handle(order_id)

        def transition(order: Order) -> Order:
            order.transition_to(target)
            return order

        order = self._order_repo.atomic_update(order_id, transition)
        if order is None:
            raise NotFoundError(f"Order {order_id} not found")
        return to_order_dto(order)
