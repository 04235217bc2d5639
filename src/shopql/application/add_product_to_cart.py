"""Application service: Add Product To Cart use case.

Coordinates the Cart and Product aggregates. The product is only looked
up when the cart does not already hold it; an existing line keeps the
name and price captured when it was first added.
"""

from __future__ import annotations

import logging

from shopql.application.dto import CartDTO, cart_to_dto
from shopql.domain.exceptions import EntityNotFoundError
from shopql.domain.repository.cart_repository import CartRepository
from shopql.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class AddProductToCartHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._cart_repo = cart_repo
        self._product_repo = product_repo

    def handle(self, cart_id: str, product_id: str) -> CartDTO:
        cart = self._cart_repo.get_by_id(cart_id)
        if cart is None:
            raise EntityNotFoundError(f"Cannot find cart '{cart_id}'")

        if cart.contains(product_id):
            item = cart.increment(product_id)
        else:
            product = self._product_repo.get_by_id(product_id)
            if product is None:
                raise EntityNotFoundError(f"Cannot find product '{product_id}'")
            item = cart.add_product(product)

        self._cart_repo.save(cart)
        logger.info(
            "Cart %s: %s quantity now %s", cart.id, item.id, item.quantity.value
        )
        return cart_to_dto(cart)
