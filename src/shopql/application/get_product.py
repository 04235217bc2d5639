"""Application service: Get Product use case (query)."""

from __future__ import annotations

from shopql.application.dto import ProductDTO, product_to_dto
from shopql.domain.exceptions import EntityNotFoundError
from shopql.domain.repository.product_repository import ProductRepository


class GetProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> ProductDTO:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Cannot find product '{product_id}'")
        return product_to_dto(product)
