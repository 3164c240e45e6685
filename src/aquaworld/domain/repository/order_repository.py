"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, TypeVar

from aquaworld.domain.model.order import Order

T = TypeVar("T")


class OrderRepository(ABC):

    @abstractmethod
    def next_id(self) -> int:
        """Generate the next unique order ID."""

    @abstractmethod
    def next_sequence(self) -> int:
        """Generate the next order-number sequence value (1, 2, 3, ...)."""

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def get_by_order_number(self, order_number: str) -> Order | None:
        """Return an order by its order number, or None if not found."""

    @abstractmethod
    def list_by_user(self, user_id: int) -> list[Order]:
        """Return the user's orders ordered by ID; empty if there are none."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order, ordered by ID."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist a new or updated order."""

    @abstractmethod
    def atomic_update(self, order_id: int, change: Callable[[Order], T]) -> T | None:
        """Apply *change* to the stored order and persist it, atomically.

        Used for status transitions so two callers cannot both act on the
        same starting status.  If *change* raises, nothing is persisted.
        Returns None when the order does not exist.
        """

    @abstractmethod
    def delete(self, order_id: int) -> bool:
        """Remove an order; return False if it did not exist."""
