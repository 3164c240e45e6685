"""Order aggregate, the core of the domain.

The Order is an aggregate root that owns its line items and its status.
Status only moves along ``ALLOWED_TRANSITIONS``; nothing outside this
module assigns ``status`` directly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum

from aquaworld.domain.exceptions import InvalidInputError, InvalidTransitionError
from aquaworld.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    PROCESSING = "PROCESSING"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"
    REFUND_PENDING = "REFUND_PENDING"

    @classmethod
    def parse(cls, raw: str | OrderStatus) -> OrderStatus:
        if isinstance(raw, OrderStatus):
            return raw
        try:
            return cls(raw.strip().upper())
        except (AttributeError, ValueError):
            raise InvalidInputError(f"Unknown order status: {raw!r}") from None

    @property
    def is_terminal(self) -> bool:
        return self in TERMINAL_STATUSES


# REFUND_PENDING is only reachable from orders that were accepted but not
# yet delivered; DELIVERED and CANCELLED accept nothing.
ALLOWED_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.PENDING: frozenset({OrderStatus.CONFIRMED, OrderStatus.CANCELLED}),
    OrderStatus.CONFIRMED: frozenset(
        {OrderStatus.PROCESSING, OrderStatus.CANCELLED, OrderStatus.REFUND_PENDING}
    ),
    OrderStatus.PROCESSING: frozenset({OrderStatus.SHIPPED, OrderStatus.REFUND_PENDING}),
    OrderStatus.SHIPPED: frozenset({OrderStatus.DELIVERED, OrderStatus.REFUND_PENDING}),
    OrderStatus.DELIVERED: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
    OrderStatus.REFUND_PENDING: frozenset(),
}

CANCELLABLE_STATUSES = frozenset({OrderStatus.PENDING, OrderStatus.CONFIRMED})
TERMINAL_STATUSES = frozenset({OrderStatus.DELIVERED, OrderStatus.CANCELLED})


def format_order_number(day: date, sequence: int) -> str:
    """Build a human-readable order number, e.g. ``ORD-20261019-00042``."""
    return f"ORD-{day:%Y%m%d}-{sequence:05d}"


@dataclass(frozen=True)
class OrderLineItem:
    """Captures the price snapshot of a product at order-creation time."""

    product_id: int
    quantity: Quantity
    unit_price: Money  # locked at order-creation time

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass
class Order:
    """Aggregate root for customer orders.

    Use the ``Order.create()`` factory for new orders; it enforces the
    creation rules and fixes ``total_price``.  The ``__init__`` is
    intentionally simple so repositories can copy orders without
    re-validating.
    """

    id: int | None
    user_id: int
    order_number: str
    items: list[OrderLineItem]
    total_price: Money
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        user_id: int,
        order_number: str,
        items: list[OrderLineItem],
        now: datetime | None = None,
    ) -> Order:
        """Create a new PENDING order, computing its total exactly once."""
        if not items:
            raise InvalidInputError("Order must contain at least one item")

        total = Money.zero(items[0].unit_price.currency)
        for item in items:
            total = total + item.line_total

        created = now or datetime.now(timezone.utc)
        return Order(
            id=None,
            user_id=user_id,
            order_number=order_number,
            items=list(items),
            total_price=total,
            status=OrderStatus.PENDING,
            created_at=created,
            updated_at=created,
        )

    # --- State transitions ----------------------------------------------------

    def can_transition_to(self, new_status: OrderStatus) -> bool:
        return new_status in ALLOWED_TRANSITIONS[self.status]

    def transition_to(self, new_status: OrderStatus, now: datetime | None = None) -> None:
        """Move to *new_status* if the transition table allows it.

        Stock release for cancellations is the caller's job; use
        ``cancel()`` for that path so the intent stays explicit.
        """
        if not self.can_transition_to(new_status):
            raise InvalidTransitionError(
                f"Cannot update order {self.order_number} from "
                f"{self.status.value} to {new_status.value}"
            )
        self.status = new_status
        self.updated_at = now or datetime.now(timezone.utc)

    def cancel(self, now: datetime | None = None) -> None:
        """Transition PENDING|CONFIRMED -> CANCELLED.

        Reserved stock must be released by the caller once this succeeds.
        """
        if self.status not in CANCELLABLE_STATUSES:
            raise InvalidTransitionError(
                f"Cannot cancel order {self.order_number} in "
                f"{self.status.value} status"
            )
        self.transition_to(OrderStatus.CANCELLED, now)

    # --- Computed properties --------------------------------------------------

    @property
    def is_terminal(self) -> bool:
        return self.status.is_terminal

    @property
    def reservations(self) -> list[tuple[int, int]]:
        """``(product_id, quantity)`` pairs this order holds in stock."""
        return [(item.product_id, item.quantity.value) for item in self.items]
