"""Application service: Add Product use case."""

from __future__ import annotations

from decimal import Decimal

from aquaworld.application.dto import ProductDTO, to_product_dto
from aquaworld.domain.model.product import Product
from aquaworld.domain.model.value_objects import DEFAULT_CURRENCY, Money
from aquaworld.domain.repository.product_repository import ProductRepository


class AddProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        currency: str = DEFAULT_CURRENCY,
    ) -> None:
        self._product_repo = product_repo
        self._currency = currency

    def handle(
        self,
        name: str,
        category: str,
        price: str | Decimal,
        stock: int = 0,
        description: str = "",
        image_url: str | None = None,
    ) -> ProductDTO:
        """Add a new product to the catalog with its opening stock."""
        product = Product.create(
            name=name,
            category=category,
            price=Money.of(price, self._currency),
            stock=stock,
            description=description,
            image_url=image_url,
        )
        self._product_repo.save(product)
        return to_product_dto(product)
