"""Domain service: Stock Ledger.

The only way product stock changes.  Each reserve/release runs through
``ProductRepository.atomic_update`` so the check-and-decrement on a single
product cannot interleave with another caller's.

Reservations for different products are independent.  ``reserve_all``
makes a multi-product reservation all-or-nothing by releasing whatever it
already took when a later product fails; concurrent readers can still
observe the intermediate stock levels.
"""

from __future__ import annotations

from collections.abc import Iterable

from aquaworld.domain.exceptions import DomainException, NotFoundError
from aquaworld.domain.model.value_objects import Quantity
from aquaworld.domain.repository.product_repository import ProductRepository


class StockLedger:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def reserve(self, product_id: int, quantity: int) -> int:
        """Take *quantity* units of a product; return the remaining stock.

        Raises NotFoundError for an unknown product and
        InsufficientStockError (stock unchanged) when there are not enough
        units.
        """
        qty = Quantity(quantity).value
        remaining = self._product_repo.atomic_update(
            product_id, lambda product: product.take_stock(qty)
        )
        if remaining is None:
            raise NotFoundError(f"Product {product_id} not found")
        return remaining

    def release(self, product_id: int, quantity: int) -> int:
        """Give *quantity* units back to a product; return the new stock."""
        qty = Quantity(quantity).value
        new_stock = self._product_repo.atomic_update(
            product_id, lambda product: product.return_stock(qty)
        )
        if new_stock is None:
            raise NotFoundError(f"Product {product_id} not found")
        return new_stock

    def reserve_all(self, requests: Iterable[tuple[int, int]]) -> None:
        """Reserve every ``(product_id, quantity)`` pair or none of them.

        On failure, reservations already made by this call are released in
        reverse order and the original error is re-raised.
        """
        reserved: list[tuple[int, int]] = []
        try:
            for product_id, quantity in requests:
                self.reserve(product_id, quantity)
                reserved.append((product_id, quantity))
        except DomainException:
            for product_id, quantity in reversed(reserved):
                self.release(product_id, quantity)
            raise

    def release_all(self, requests: Iterable[tuple[int, int]]) -> None:
        for product_id, quantity in requests:
            self.release(product_id, quantity)
