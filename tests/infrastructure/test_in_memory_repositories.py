"""Tests for the thread-safe in-memory repositories."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from aquaworld.application.cancel_order import CancelOrderHandler
from aquaworld.application.create_order import CreateOrderHandler
from aquaworld.application.dto import OrderItemSpec
from aquaworld.application.process_payment import ProcessPaymentHandler
from aquaworld.domain.exceptions import (
    ConflictError,
    InsufficientStockError,
    InvalidTransitionError,
    NotFoundError,
)
from aquaworld.domain.model.order import Order, OrderLineItem, OrderStatus
from aquaworld.domain.model.payment import Payment
from aquaworld.domain.model.product import Product
from aquaworld.domain.model.value_objects import Money, Quantity
from aquaworld.domain.service.stock_ledger import StockLedger
from aquaworld.infrastructure.persistence.atomic_counter import AtomicCounter
from aquaworld.infrastructure.persistence.in_memory_order_repository import (
    InMemoryOrderRepository,
)
from aquaworld.infrastructure.persistence.in_memory_payment_repository import (
    InMemoryPaymentRepository,
)
from aquaworld.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)


def _guppy(stock: int = 10) -> Product:
    return Product(id=None, name="Red Guppy", category="guppies",
                   price=Money.of("5.99"), stock=stock)


def _order(user_id: int = 1001, number: str = "ORD-20261019-00001") -> Order:
    item = OrderLineItem(product_id=2001, quantity=Quantity(1), unit_price=Money.of("5.99"))
    return Order.create(user_id, number, [item])


class TestAtomicCounter:

    def test_starts_after_offset(self):
        counter = AtomicCounter(3000)
        assert [counter.next() for _ in range(3)] == [3001, 3002, 3003]

    def test_unique_under_concurrency(self):
        counter = AtomicCounter()
        with ThreadPoolExecutor(max_workers=8) as pool:
            values = list(pool.map(lambda _: counter.next(), range(2000)))
        assert sorted(values) == list(range(1, 2001))


class TestInMemoryProductRepository:

    def test_ids_start_after_2000(self):
        repo = InMemoryProductRepository([_guppy(), _guppy()])
        assert [p.id for p in repo.list_all()] == [2001, 2002]

    def test_reads_are_copies(self):
        repo = InMemoryProductRepository([_guppy(10)])
        product = repo.get_by_id(2001)
        product.stock = 0
        assert repo.get_by_id(2001).stock == 10

    def test_queries(self):
        heater = Product(id=None, name="Aquarium Heater", category="equipment",
                         price=Money.of("19.99"), stock=0)
        repo = InMemoryProductRepository([_guppy(), heater])
        assert [p.id for p in repo.search_by_name("heat")] == [2002]
        assert [p.id for p in repo.list_by_category("GUPPIES")] == [2001]
        assert [p.id for p in repo.list_in_stock()] == [2001]

    def test_atomic_update_missing_returns_none(self):
        repo = InMemoryProductRepository()
        assert repo.atomic_update(1, lambda p: p.take_stock(1)) is None

    def test_unknown_ids_do_not_accumulate_locks(self):
        repo = InMemoryProductRepository([_guppy()])
        ledger = StockLedger(repo)
        for product_id in range(1, 200):
            with pytest.raises(NotFoundError):
                ledger.reserve(product_id, 1)
        ledger.reserve(2001, 1)
        assert set(repo._product_locks) == {2001}

    def test_atomic_update_does_not_persist_on_error(self):
        repo = InMemoryProductRepository([_guppy(2)])
        with pytest.raises(InsufficientStockError):
            repo.atomic_update(2001, lambda p: p.take_stock(3))
        assert repo.get_by_id(2001).stock == 2

    def test_concurrent_reservations_never_overdraw(self):
        repo = InMemoryProductRepository([_guppy(50)])
        ledger = StockLedger(repo)

        def attempt(_):
            try:
                ledger.reserve(2001, 3)
                return True
            except InsufficientStockError:
                return False

        with ThreadPoolExecutor(max_workers=16) as pool:
            results = list(pool.map(attempt, range(40)))

        assert results.count(True) == 16
        assert repo.get_by_id(2001).stock == 2


class TestInMemoryOrderRepository:

    def test_ids_start_after_3000(self):
        repo = InMemoryOrderRepository()
        order = _order()
        repo.save(order)
        assert order.id == 3001

    def test_sequence_starts_at_one(self):
        repo = InMemoryOrderRepository()
        assert [repo.next_sequence() for _ in range(2)] == [1, 2]

    def test_lookup_by_number_and_user(self):
        repo = InMemoryOrderRepository()
        a, b, c = _order(1, "ORD-1"), _order(2, "ORD-2"), _order(1, "ORD-3")
        for order in (a, b, c):
            repo.save(order)
        assert repo.get_by_order_number("ORD-2").id == b.id
        assert [o.id for o in repo.list_by_user(1)] == [a.id, c.id]
        assert repo.list_by_user(99) == []

    def test_reads_are_copies(self):
        repo = InMemoryOrderRepository()
        order = _order()
        repo.save(order)
        order.status = OrderStatus.SHIPPED
        assert repo.get_by_id(order.id).status == OrderStatus.PENDING

    def test_delete(self):
        repo = InMemoryOrderRepository()
        order = _order()
        repo.save(order)
        assert repo.delete(order.id) is True
        assert repo.get_by_id(order.id) is None
        assert repo.get_by_order_number(order.order_number) is None
        assert repo.list_by_user(order.user_id) == []
        assert repo.delete(order.id) is False


class TestInMemoryPaymentRepository:

    def _payment(self, order_id: int = 3001) -> Payment:
        return Payment.open(order_id, Money.of("5.99"), "CREDIT_CARD")

    def test_add_assigns_id_after_5000(self):
        repo = InMemoryPaymentRepository()
        payment = self._payment()
        assert repo.add(payment) is True
        assert payment.id == 5001
        assert repo.get_by_order_id(3001).id == 5001

    def test_second_payment_for_order_refused(self):
        repo = InMemoryPaymentRepository()
        assert repo.add(self._payment()) is True
        assert repo.add(self._payment()) is False

    def test_remove_frees_the_order_slot(self):
        repo = InMemoryPaymentRepository()
        first = self._payment()
        repo.add(first)
        assert repo.remove(first.id) is True
        assert repo.get_by_id(first.id) is None
        assert repo.get_by_order_id(3001) is None
        assert repo.add(self._payment()) is True
        assert repo.remove(first.id) is False

    def test_concurrent_adds_keep_one_payment(self):
        repo = InMemoryPaymentRepository()
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda _: repo.add(self._payment()), range(20)))
        assert results.count(True) == 1


class TestConcurrentUseCases:

    def _stores(self, stock: int = 100):
        products = InMemoryProductRepository([_guppy(stock)])
        orders = InMemoryOrderRepository()
        payments = InMemoryPaymentRepository()
        return products, orders, payments

    def test_parallel_orders_get_unique_numbers(self):
        products, orders, _ = self._stores(stock=1000)
        create = CreateOrderHandler(orders, products)
        with ThreadPoolExecutor(max_workers=8) as pool:
            dtos = list(pool.map(lambda u: create.handle(u, [OrderItemSpec(2001, 1)]), range(200)))
        assert len({d.order_number for d in dtos}) == 200
        assert len({d.id for d in dtos}) == 200
        assert products.get_by_id(2001).stock == 800

    def test_racing_cancels_release_stock_once(self):
        products, orders, _ = self._stores(stock=10)
        order = CreateOrderHandler(orders, products).handle(1001, [OrderItemSpec(2001, 3)])
        cancel = CancelOrderHandler(orders, products)

        def attempt(_):
            try:
                cancel.handle(order.id)
                return True
            except InvalidTransitionError:
                return False

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(attempt, range(16)))

        assert results.count(True) == 1
        assert products.get_by_id(2001).stock == 10

    def test_racing_payments_record_one(self):
        products, orders, payments = self._stores()
        order = CreateOrderHandler(orders, products).handle(1001, [OrderItemSpec(2001, 3)])
        process = ProcessPaymentHandler(payments, orders)

        def attempt(_):
            try:
                process.handle(order.id, "17.97", "CREDIT_CARD")
                return True
            except ConflictError:
                return False

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(attempt, range(16)))

        assert results.count(True) == 1
