"""Integration tests for the UpdateOrderStatus use case."""

import pytest

from aquaworld.application.create_order import CreateOrderHandler
from aquaworld.application.dto import OrderItemSpec
from aquaworld.application.update_order_status import UpdateOrderStatusHandler
from aquaworld.domain.exceptions import (
    InvalidInputError,
    InvalidTransitionError,
    NotFoundError,
)
from aquaworld.domain.model.order import OrderStatus
from aquaworld.domain.model.product import Product
from aquaworld.domain.model.value_objects import Money
from tests.fakes import FakeOrderRepository, FakeProductRepository


def _setup():
    product_repo = FakeProductRepository([
        Product(id=None, name="Red Guppy", category="guppies",
                price=Money.of("5.99"), stock=10),
    ])
    order_repo = FakeOrderRepository()
    dto = CreateOrderHandler(order_repo, product_repo).handle(1001, [OrderItemSpec(1, 3)])
    handler = UpdateOrderStatusHandler(order_repo, product_repo)
    return handler, dto.id, order_repo, product_repo


class TestUpdateOrderStatus:

    def test_full_happy_path(self):
        handler, order_id, order_repo, _ = _setup()
        for status in ["CONFIRMED", "PROCESSING", "SHIPPED", "DELIVERED"]:
            dto = handler.handle(order_id, status)
            assert dto.status == status
        assert order_repo.get_by_id(order_id).status == OrderStatus.DELIVERED

    def test_pending_to_shipped_rejected(self):
        handler, order_id, order_repo, _ = _setup()
        with pytest.raises(InvalidTransitionError, match="from PENDING to SHIPPED"):
            handler.handle(order_id, "SHIPPED")
        assert order_repo.get_by_id(order_id).status == OrderStatus.PENDING

    def test_shipped_to_pending_rejected(self):
        handler, order_id, order_repo, _ = _setup()
        for status in ["CONFIRMED", "PROCESSING", "SHIPPED"]:
            handler.handle(order_id, status)
        with pytest.raises(InvalidTransitionError):
            handler.handle(order_id, "PENDING")
        assert order_repo.get_by_id(order_id).status == OrderStatus.SHIPPED

    def test_accepts_enum(self):
        handler, order_id, _, _ = _setup()
        assert handler.handle(order_id, OrderStatus.CONFIRMED).status == "CONFIRMED"

    def test_refund_pending_from_shipped(self):
        handler, order_id, _, _ = _setup()
        for status in ["CONFIRMED", "PROCESSING", "SHIPPED"]:
            handler.handle(order_id, status)
        assert handler.handle(order_id, "REFUND_PENDING").status == "REFUND_PENDING"

    def test_refund_pending_from_delivered_rejected(self):
        handler, order_id, _, _ = _setup()
        for status in ["CONFIRMED", "PROCESSING", "SHIPPED", "DELIVERED"]:
            handler.handle(order_id, status)
        with pytest.raises(InvalidTransitionError):
            handler.handle(order_id, "REFUND_PENDING")

    def test_cancel_via_status_releases_stock(self):
        handler, order_id, _, product_repo = _setup()
        assert product_repo.get_by_id(1).stock == 7
        assert handler.handle(order_id, "CANCELLED").status == "CANCELLED"
        assert product_repo.get_by_id(1).stock == 10

    def test_unknown_status_rejected(self):
        handler, order_id, _, _ = _setup()
        with pytest.raises(InvalidInputError, match="Unknown order status"):
            handler.handle(order_id, "TELEPORTED")

    def test_unknown_order(self):
        handler, _, _, _ = _setup()
        with pytest.raises(NotFoundError):
            handler.handle(999, "CONFIRMED")
