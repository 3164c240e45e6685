"""In-memory, thread-safe implementation of PaymentRepository."""

from __future__ import annotations

import copy
import threading
from typing import Callable, TypeVar

from aquaworld.domain.model.payment import Payment
from aquaworld.domain.repository.payment_repository import PaymentRepository
from aquaworld.infrastructure.persistence.atomic_counter import AtomicCounter

T = TypeVar("T")

PAYMENT_ID_OFFSET = 5000


class InMemoryPaymentRepository(PaymentRepository):
    """Payments keyed by ID, with a unique index on order ID."""

    def __init__(self) -> None:
        self._store: dict[int, Payment] = {}
        self._by_order: dict[int, int] = {}
        self._lock = threading.RLock()
        self._ids = AtomicCounter(PAYMENT_ID_OFFSET)

    # --- PaymentRepository interface ------------------------------------------

    def next_id(self) -> int:
        return self._ids.next()

    def get_by_id(self, payment_id: int) -> Payment | None:
        with self._lock:
            payment = self._store.get(payment_id)
            return copy.deepcopy(payment) if payment is not None else None

    def get_by_order_id(self, order_id: int) -> Payment | None:
        with self._lock:
            payment_id = self._by_order.get(order_id)
            return self.get_by_id(payment_id) if payment_id is not None else None

    def add(self, payment: Payment) -> bool:
        with self._lock:
            if payment.order_id in self._by_order:
                return False
            if payment.id is None:
                payment.id = self.next_id()
            self._store[payment.id] = copy.deepcopy(payment)
            self._by_order[payment.order_id] = payment.id
            return True

    def save(self, payment: Payment) -> None:
        if payment.id is None:
            raise ValueError("Use add() to store a new payment")
        with self._lock:
            self._store[payment.id] = copy.deepcopy(payment)
            self._by_order[payment.order_id] = payment.id

    def remove(self, payment_id: int) -> bool:
        with self._lock:
            payment = self._store.pop(payment_id, None)
            if payment is None:
                return False
            if self._by_order.get(payment.order_id) == payment_id:
                del self._by_order[payment.order_id]
            return True

    def atomic_update(self, payment_id: int, change: Callable[[Payment], T]) -> T | None:
        with self._lock:
            stored = self._store.get(payment_id)
            if stored is None:
                return None
            working = copy.deepcopy(stored)
            result = change(working)
            self._store[payment_id] = copy.deepcopy(working)
            return result
