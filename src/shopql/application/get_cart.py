"""Application service: Get Cart use case (query)."""

from __future__ import annotations

from shopql.application.dto import CartDTO, cart_to_dto
from shopql.domain.exceptions import EntityNotFoundError
from shopql.domain.repository.cart_repository import CartRepository


class GetCartHandler:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    def handle(self, cart_id: str) -> CartDTO:
        cart = self._cart_repo.get_by_id(cart_id)
        if cart is None:
            raise EntityNotFoundError(f"Cannot find cart '{cart_id}'")
        return cart_to_dto(cart)
