"""Application service: Delete Cart use case.

A missing cart is an error. A cart that exists but cannot be removed
from storage is reported as ``success=False`` instead of raising.
"""

from __future__ import annotations

import logging

from shopql.application.dto import DeleteResultDTO
from shopql.domain.exceptions import EntityNotFoundError
from shopql.domain.repository.cart_repository import CartRepository

logger = logging.getLogger(__name__)


class DeleteCartHandler:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    def handle(self, cart_id: str) -> DeleteResultDTO:
        if not self._cart_repo.exists(cart_id):
            raise EntityNotFoundError(f"Cannot find cart '{cart_id}'")

        try:
            self._cart_repo.delete(cart_id)
        except OSError as exc:
            logger.warning("Could not delete cart %s: %s", cart_id, exc)
            return DeleteResultDTO(deleted_id=cart_id, success=False)

        logger.info("Deleted cart %s", cart_id)
        return DeleteResultDTO(deleted_id=cart_id, success=True)
