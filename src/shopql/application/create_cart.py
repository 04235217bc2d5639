"""Application service: Create Cart use case."""

from __future__ import annotations

import logging

from shopql.application.dto import CartDTO, cart_to_dto
from shopql.domain.model.cart import Cart
from shopql.domain.repository.cart_repository import CartRepository

logger = logging.getLogger(__name__)


class CreateCartHandler:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    def handle(self) -> CartDTO:
        """Create and persist an empty cart under a fresh, unused id."""
        cart = Cart.create(self._cart_repo.next_id())
        self._cart_repo.save(cart)
        logger.info("Created cart %s", cart.id)
        return cart_to_dto(cart)
