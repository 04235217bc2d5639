"""Application service: List Products use case (query)."""

from __future__ import annotations

from shopql.application.dto import ProductDTO, product_to_dto
from shopql.domain.repository.product_repository import ProductRepository


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> list[ProductDTO]:
        """Every stored product, in storage order (not sorted)."""
        return [product_to_dto(p) for p in self._product_repo.list_all()]
