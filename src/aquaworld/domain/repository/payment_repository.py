"""Abstract repository for Payment aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, TypeVar

from aquaworld.domain.model.payment import Payment

T = TypeVar("T")


class PaymentRepository(ABC):

    @abstractmethod
    def next_id(self) -> int:
        """Generate the next unique payment ID."""

    @abstractmethod
    def get_by_id(self, payment_id: int) -> Payment | None:
        """Return a payment by its ID, or None if not found."""

    @abstractmethod
    def get_by_order_id(self, order_id: int) -> Payment | None:
        """Return the payment recorded for an order, or None."""

    @abstractmethod
    def add(self, payment: Payment) -> bool:
        """Insert a new payment unless its order already has one.

        The check and the insert happen atomically.  Assigns ``payment.id``
        on success.  Returns False, storing nothing, when a payment for
        ``payment.order_id`` already exists.
        """

    @abstractmethod
    def save(self, payment: Payment) -> None:
        """Persist changes to an existing payment."""

    @abstractmethod
    def remove(self, payment_id: int) -> bool:
        """Drop a payment and free its order slot; False if it was not stored."""

    @abstractmethod
    def atomic_update(self, payment_id: int, change: Callable[[Payment], T]) -> T | None:
        """Apply *change* to the stored payment and persist it, atomically.

        Returns None when the payment does not exist.
        """
