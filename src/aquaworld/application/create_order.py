"""Application service: Create Order use case.

Orchestrates the flow between repositories, the stock ledger and the
Order aggregate.  Two passes:

1. Validate: every product exists and holds enough stock for the whole
   request; snapshot the current prices.  Nothing is mutated yet.
2. Reserve: take the stock through the ledger.  A concurrent order can
   still win the race between the passes; the ledger then gives back
   whatever this call already took and the error propagates.
"""

from __future__ import annotations

from collections import Counter
from datetime import datetime, timezone
from typing import Callable

from aquaworld.application.dto import OrderDTO, OrderItemSpec, to_order_dto
from aquaworld.domain.exceptions import (
    InsufficientStockError,
    InvalidInputError,
    NotFoundError,
)
from aquaworld.domain.model.order import Order, OrderLineItem, format_order_number
from aquaworld.domain.model.value_objects import Quantity
from aquaworld.domain.repository.order_repository import OrderRepository
from aquaworld.domain.repository.product_repository import ProductRepository
from aquaworld.domain.service.stock_ledger import StockLedger


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo
        self._ledger = StockLedger(product_repo)
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def handle(self, user_id: int, item_specs: list[OrderItemSpec]) -> OrderDTO:
        """Create a new PENDING order for *user_id* and reserve its stock."""
        if not item_specs:
            raise InvalidInputError("Order must contain at least one item")

        line_items = self._build_line_items(item_specs)

        now = self._clock()
        order = Order.create(
            user_id=user_id,
            order_number=format_order_number(now.date(), self._order_repo.next_sequence()),
            items=line_items,
            now=now,
        )

        self._ledger.reserve_all(order.reservations)
        self._order_repo.save(order)

        return to_order_dto(order)

    def _build_line_items(self, item_specs: list[OrderItemSpec]) -> list[OrderLineItem]:
        """Pass 1: resolve products and snapshot prices, mutating nothing."""
        line_items: list[OrderLineItem] = []
        demand: Counter[int] = Counter()

        for spec in item_specs:
            quantity = Quantity(spec.quantity)
            product = self._product_repo.get_by_id(spec.product_id)
            if product is None:
                raise NotFoundError(f"Product {spec.product_id} not found")

            demand[spec.product_id] += quantity.value
            if not product.has_stock_for(demand[spec.product_id]):
                raise InsufficientStockError(
                    f"Insufficient stock for {product.name} "
                    f"(need {demand[spec.product_id]}, have {product.stock} available)"
                )

            line_items.append(
                OrderLineItem(
                    product_id=spec.product_id,
                    quantity=quantity,
                    unit_price=product.price,  # <-- price snapshot
                )
            )

        return line_items
