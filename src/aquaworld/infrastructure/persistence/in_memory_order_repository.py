"""In-memory, thread-safe implementation of OrderRepository."""

from __future__ import annotations

import copy
import threading
from typing import Callable, TypeVar

from aquaworld.domain.model.order import Order
from aquaworld.domain.repository.order_repository import OrderRepository
from aquaworld.infrastructure.persistence.atomic_counter import AtomicCounter

T = TypeVar("T")

ORDER_ID_OFFSET = 3000


class InMemoryOrderRepository(OrderRepository):
    """Orders keyed by ID, indexed by order number and by user."""

    def __init__(self) -> None:
        self._store: dict[int, Order] = {}
        self._by_number: dict[str, int] = {}
        self._by_user: dict[int, set[int]] = {}
        self._lock = threading.RLock()
        self._ids = AtomicCounter(ORDER_ID_OFFSET)
        self._sequence = AtomicCounter()

    # --- OrderRepository interface --------------------------------------------

    def next_id(self) -> int:
        return self._ids.next()

    def next_sequence(self) -> int:
        return self._sequence.next()

    def get_by_id(self, order_id: int) -> Order | None:
        with self._lock:
            return self._copy_of(order_id)

    def get_by_order_number(self, order_number: str) -> Order | None:
        with self._lock:
            order_id = self._by_number.get(order_number)
            return self._copy_of(order_id) if order_id is not None else None

    def list_by_user(self, user_id: int) -> list[Order]:
        with self._lock:
            return [self._store_copy(oid) for oid in sorted(self._by_user.get(user_id, ()))]

    def list_all(self) -> list[Order]:
        with self._lock:
            return [self._store_copy(oid) for oid in sorted(self._store)]

    def save(self, order: Order) -> None:
        if order.id is None:
            order.id = self.next_id()
        with self._lock:
            self._put(order)

    def atomic_update(self, order_id: int, change: Callable[[Order], T]) -> T | None:
        with self._lock:
            working = self._copy_of(order_id)
            if working is None:
                return None
            result = change(working)
            self._put(working)
            return result

    def delete(self, order_id: int) -> bool:
        with self._lock:
            order = self._store.pop(order_id, None)
            if order is None:
                return False
            self._by_number.pop(order.order_number, None)
            self._by_user.get(order.user_id, set()).discard(order_id)
            return True

    # --- Internal helpers -----------------------------------------------------

    def _put(self, order: Order) -> None:
        self._store[order.id] = copy.deepcopy(order)  # type: ignore[index]
        self._by_number[order.order_number] = order.id  # type: ignore[assignment]
        self._by_user.setdefault(order.user_id, set()).add(order.id)  # type: ignore[arg-type]

    def _copy_of(self, order_id: int) -> Order | None:
        order = self._store.get(order_id)
        return copy.deepcopy(order) if order is not None else None

    def _store_copy(self, order_id: int) -> Order:
        return copy.deepcopy(self._store[order_id])
