"""In-memory fake repositories for testing.

These implement the same abstract interfaces as the production
repositories but keep live objects in a plain dict.  No locking, no
copying, no side effects.
"""

from __future__ import annotations

from typing import Callable, TypeVar

from aquaworld.domain.model.order import Order
from aquaworld.domain.model.payment import Payment
from aquaworld.domain.model.product import Product
from aquaworld.domain.repository.order_repository import OrderRepository
from aquaworld.domain.repository.payment_repository import PaymentRepository
from aquaworld.domain.repository.product_repository import ProductRepository
from aquaworld.domain.service.payment_gateway import PaymentGateway

T = TypeVar("T")


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[int, Product] = {}
        self._next_id = 1
        for p in products or []:
            self.save(p)

    def next_id(self) -> int:
        value = self._next_id
        self._next_id += 1
        return value

    def get_by_id(self, product_id: int) -> Product | None:
        return self._store.get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def search_by_name(self, fragment: str) -> list[Product]:
        return [p for p in self._store.values() if fragment.lower() in p.name.lower()]

    def list_by_category(self, category: str) -> list[Product]:
        return [p for p in self._store.values() if p.category.lower() == category.lower()]

    def list_in_stock(self) -> list[Product]:
        return [p for p in self._store.values() if p.stock > 0]

    def save(self, product: Product) -> None:
        if product.id is None:
            product.id = self.next_id()
        self._store[product.id] = product

    def atomic_update(self, product_id: int, change: Callable[[Product], T]) -> T | None:
        product = self._store.get(product_id)
        if product is None:
            return None
        return change(product)


class FakeOrderRepository(OrderRepository):

    def __init__(self) -> None:
        self._store: dict[int, Order] = {}
        self._next_id = 1
        self._next_sequence = 1

    def next_id(self) -> int:
        value = self._next_id
        self._next_id += 1
        return value

    def next_sequence(self) -> int:
        value = self._next_sequence
        self._next_sequence += 1
        return value

    def get_by_id(self, order_id: int) -> Order | None:
        return self._store.get(order_id)

    def get_by_order_number(self, order_number: str) -> Order | None:
        for order in self._store.values():
            if order.order_number == order_number:
                return order
        return None

    def list_by_user(self, user_id: int) -> list[Order]:
        return [o for o in self._store.values() if o.user_id == user_id]

    def list_all(self) -> list[Order]:
        return list(self._store.values())

    def save(self, order: Order) -> None:
        if order.id is None:
            order.id = self.next_id()
        self._store[order.id] = order

    def atomic_update(self, order_id: int, change: Callable[[Order], T]) -> T | None:
        order = self._store.get(order_id)
        if order is None:
            return None
        return change(order)

    def delete(self, order_id: int) -> bool:
        return self._store.pop(order_id, None) is not None


class FakePaymentRepository(PaymentRepository):

    def __init__(self) -> None:
        self._store: dict[int, Payment] = {}
        self._next_id = 1

    def next_id(self) -> int:
        value = self._next_id
        self._next_id += 1
        return value

    def get_by_id(self, payment_id: int) -> Payment | None:
        return self._store.get(payment_id)

    def get_by_order_id(self, order_id: int) -> Payment | None:
        for payment in self._store.values():
            if payment.order_id == order_id:
                return payment
        return None

    def add(self, payment: Payment) -> bool:
        if self.get_by_order_id(payment.order_id) is not None:
            return False
        payment.id = self.next_id()
        self._store[payment.id] = payment
        return True

    def save(self, payment: Payment) -> None:
        self._store[payment.id] = payment  # type: ignore[index]

    def remove(self, payment_id: int) -> bool:
        return self._store.pop(payment_id, None) is not None

    def atomic_update(self, payment_id: int, change: Callable[[Payment], T]) -> T | None:
        payment = self._store.get(payment_id)
        if payment is None:
            return None
        return change(payment)


class DecliningGateway(PaymentGateway):
    """Rejects every charge."""

    def __init__(self) -> None:
        self.charged: list[str] = []

    def charge(self, payment: Payment) -> bool:
        self.charged.append(payment.transaction_id)
        return False


class UnreachableGateway(PaymentGateway):
    """Fails every charge with a connection error."""

    def charge(self, payment: Payment) -> bool:
        raise ConnectionError("payment provider unreachable")
