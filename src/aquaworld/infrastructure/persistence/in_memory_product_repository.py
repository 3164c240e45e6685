"""In-memory, thread-safe implementation of ProductRepository."""

from __future__ import annotations

import copy
import threading
from typing import Callable, TypeVar

from aquaworld.domain.model.product import Product
from aquaworld.domain.repository.product_repository import ProductRepository
from aquaworld.infrastructure.persistence.atomic_counter import AtomicCounter

T = TypeVar("T")

PRODUCT_ID_OFFSET = 2000


class InMemoryProductRepository(ProductRepository):
    """Products keyed by ID.

    Records are copied on the way in and out, so a caller holding a
    Product can only change the catalog through ``save`` or
    ``atomic_update``.  Each product has its own lock; updates to
    different products never wait on each other.
    """

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[int, Product] = {}
        self._lock = threading.Lock()
        self._product_locks: dict[int, threading.Lock] = {}
        self._ids = AtomicCounter(PRODUCT_ID_OFFSET)
        for product in products or []:
            self.save(product)

    # --- ProductRepository interface ------------------------------------------

    def next_id(self) -> int:
        return self._ids.next()

    def get_by_id(self, product_id: int) -> Product | None:
        with self._lock:
            product = self._store.get(product_id)
            return copy.deepcopy(product) if product is not None else None

    def list_all(self) -> list[Product]:
        return self._select(lambda p: True)

    def search_by_name(self, fragment: str) -> list[Product]:
        needle = fragment.lower()
        return self._select(lambda p: needle in p.name.lower())

    def list_by_category(self, category: str) -> list[Product]:
        wanted = category.lower()
        return self._select(lambda p: p.category.lower() == wanted)

    def list_in_stock(self) -> list[Product]:
        return self._select(lambda p: p.in_stock)

    def save(self, product: Product) -> None:
        if product.id is None:
            product.id = self.next_id()
        with self._lock_for(product.id):
            with self._lock:
                self._store[product.id] = copy.deepcopy(product)

    def atomic_update(self, product_id: int, change: Callable[[Product], T]) -> T | None:
        lock = self._existing_lock(product_id)
        if lock is None:
            return None
        with lock:
            with self._lock:
                stored = self._store[product_id]
            working = copy.deepcopy(stored)
            result = change(working)
            with self._lock:
                self._store[product_id] = copy.deepcopy(working)
            return result

    # --- Internal helpers -----------------------------------------------------

    def _lock_for(self, product_id: int) -> threading.Lock:
        with self._lock:
            return self._product_locks.setdefault(product_id, threading.Lock())

    def _existing_lock(self, product_id: int) -> threading.Lock | None:
        # Products are never removed, so a stored ID keeps its lock for good.
        with self._lock:
            if product_id not in self._store:
                return None
            return self._product_locks.setdefault(product_id, threading.Lock())

    def _select(self, predicate: Callable[[Product], bool]) -> list[Product]:
        with self._lock:
            matches = [p for p in self._store.values() if predicate(p)]
            return [copy.deepcopy(p) for p in sorted(matches, key=lambda p: p.id)]
