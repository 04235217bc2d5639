"""Application service: Delete Product use case.

Same contract as deleting a cart. Carts that already hold the product
keep their snapshot of it.
"""

from __future__ import annotations

import logging

from shopql.application.dto import DeleteResultDTO
from shopql.domain.exceptions import EntityNotFoundError
from shopql.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> DeleteResultDTO:
        if not self._product_repo.exists(product_id):
            raise EntityNotFoundError(f"Cannot find product '{product_id}'")

        try:
            self._product_repo.delete(product_id)
        except OSError as exc:
            logger.warning("Could not delete product %s: %s", product_id, exc)
            return DeleteResultDTO(deleted_id=product_id, success=False)

        logger.info("Deleted product %s", product_id)
        return DeleteResultDTO(deleted_id=product_id, success=True)
