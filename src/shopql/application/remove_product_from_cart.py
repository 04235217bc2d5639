"""Application service: Remove Product From Cart use case.

Takes a single unit out of the cart. When the item is not in the cart
the domain raises before anything is written.
"""

from __future__ import annotations

import logging

from shopql.application.dto import CartDTO, cart_to_dto
from shopql.domain.exceptions import EntityNotFoundError
from shopql.domain.repository.cart_repository import CartRepository

logger = logging.getLogger(__name__)


class RemoveProductFromCartHandler:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    def handle(self, cart_id: str, cart_item_id: str) -> CartDTO:
        cart = self._cart_repo.get_by_id(cart_id)
        if cart is None:
            raise EntityNotFoundError(f"Cannot find cart '{cart_id}'")

        item = cart.remove_unit(cart_item_id)
        self._cart_repo.save(cart)

        if item is None:
            logger.info("Cart %s: removed %s", cart.id, cart_item_id)
        else:
            logger.info(
                "Cart %s: %s quantity now %s", cart.id, item.id, item.quantity.value
            )
        return cart_to_dto(cart)
