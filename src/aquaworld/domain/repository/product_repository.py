"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations live in the infrastructure
layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, TypeVar

from aquaworld.domain.model.product import Product

T = TypeVar("T")


class ProductRepository(ABC):

    @abstractmethod
    def next_id(self) -> int:
        """Generate the next unique product ID."""

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog, ordered by ID."""

    @abstractmethod
    def search_by_name(self, fragment: str) -> list[Product]:
        """Return products whose name contains *fragment*, ignoring case."""

    @abstractmethod
    def list_by_category(self, category: str) -> list[Product]:
        """Return products in *category*, ignoring case."""

    @abstractmethod
    def list_in_stock(self) -> list[Product]:
        """Return products with at least one unit in stock."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product."""

    @abstractmethod
    def atomic_update(self, product_id: int, change: Callable[[Product], T]) -> T | None:
        """Apply *change* to the stored product and persist it, atomically.

        No other ``atomic_update`` on the same product can interleave.
        If *change* raises, nothing is persisted and the error propagates.
        Returns whatever *change* returned, or None when the product does
        not exist.
        """
