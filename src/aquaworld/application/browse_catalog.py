"""Application service: catalog queries."""

from __future__ import annotations

from aquaworld.application.dto import ProductDTO, to_product_dto
from aquaworld.domain.exceptions import NotFoundError
from aquaworld.domain.repository.product_repository import ProductRepository


class GetProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int) -> ProductDTO:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise NotFoundError(f"Product {product_id} not found")
        return to_product_dto(product)


class BrowseCatalogHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def list_all(self) -> list[ProductDTO]:
        return [to_product_dto(p) for p in self._product_repo.list_all()]

    def search_by_name(self, fragment: str) -> list[ProductDTO]:
        return [to_product_dto(p) for p in self._product_repo.search_by_name(fragment)]

    def list_by_category(self, category: str) -> list[ProductDTO]:
        return [to_product_dto(p) for p in self._product_repo.list_by_category(category)]

    def list_in_stock(self) -> list[ProductDTO]:
        return [to_product_dto(p) for p in self._product_repo.list_in_stock()]
