"""Application service: Cancel Order use case.

Only PENDING and CONFIRMED orders can be cancelled.  The status change
happens atomically on the stored order, so when two cancellations race
exactly one wins and the stock of every line item is released once.
"""

from __future__ import annotations

from aquaworld.application.dto import OrderDTO, to_order_dto
from aquaworld.domain.exceptions import NotFoundError
from aquaworld.domain.model.order import Order
from aquaworld.domain.repository.order_repository import OrderRepository
from aquaworld.domain.repository.product_repository import ProductRepository
from aquaworld.domain.service.stock_ledger import StockLedger


def _cancel(order: Order) -> Order:
    order.cancel()
    return order


class CancelOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._order_repo = order_repo
        self._ledger = StockLedger(product_repo)

    def handle(self, order_id: int) -> OrderDTO:
        order = self._order_repo.atomic_update(order_id, _cancel)
        if order is None:
            raise NotFoundError(f"Order {order_id} not found")

        self._ledger.release_all(order.reservations)
        return to_order_dto(order)
