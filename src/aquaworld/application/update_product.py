"""Application service: Update Product use case."""

from __future__ import annotations

from decimal import Decimal

from aquaworld.application.dto import ProductDTO, to_product_dto
from aquaworld.domain.exceptions import NotFoundError
from aquaworld.domain.model.product import Product
from aquaworld.domain.model.value_objects import Money
from aquaworld.domain.repository.product_repository import ProductRepository


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: int,
        *,
        name: str | None = None,
        category: str | None = None,
        description: str | None = None,
        price: str | Decimal | None = None,
        image_url: str | None = None,
    ) -> ProductDTO:
        """Apply a partial update; arguments left as None are unchanged.

        Stock is not editable here: it moves only through reservations.
        A new price does NOT affect existing orders; they captured a
        price snapshot at creation time.
        """
        def apply(product: Product) -> Product:
            new_price = None if price is None else Money.of(price, product.price.currency)
            product.revise(
                name=name,
                category=category,
                description=description,
                image_url=image_url,
            )
            if new_price is not None:
                product.update_price(new_price)
            return product

        product = self._product_repo.atomic_update(product_id, apply)
        if product is None:
            raise NotFoundError(f"Product {product_id} not found")
        return to_product_dto(product)
