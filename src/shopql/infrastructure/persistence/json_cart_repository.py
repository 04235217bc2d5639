"""JSON-file-backed implementation of CartRepository."""

from __future__ import annotations

import uuid
from typing import Callable

from shopql.domain.exceptions import RecordDecodeError, ValidationError
from shopql.domain.model.cart import Cart, CartItem
from shopql.domain.model.value_objects import Money, Quantity
from shopql.domain.repository.cart_repository import CartRepository
from shopql.infrastructure.persistence.json_file_store import (
    JsonFileStore,
    text_field,
)


def _random_id() -> str:
    return str(uuid.uuid4())


class JsonCartRepository(CartRepository):

    def __init__(
        self,
        store: JsonFileStore,
        id_factory: Callable[[], str] = _random_id,
    ) -> None:
        self._store = store
        self._id_factory = id_factory

    # --- CartRepository interface ---------------------------------------------

    def next_id(self) -> str:
        # Never hand out an id that already has a file.
        cart_id = self._id_factory()
        while self._store.exists(cart_id):
            cart_id = self._id_factory()
        return cart_id

    def exists(self, cart_id: str) -> bool:
        return self._store.exists(cart_id)

    def get_by_id(self, cart_id: str) -> Cart | None:
        if not self._store.exists(cart_id):
            return None
        return self._to_domain(self._store.read(cart_id), cart_id)

    def save(self, cart: Cart) -> None:
        self._store.write(cart.id, self._to_raw(cart))

    def delete(self, cart_id: str) -> None:
        self._store.delete(cart_id)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(cart: Cart) -> dict:
        return {
            "id": cart.id,
            "items": [
                {
                    "id": item.id,
                    "name": item.name,
                    "quantity": item.quantity.value,
                    "price": item.price.as_number(),
                }
                for item in cart.items
            ],
            "totalSum": cart.total_sum.as_number(),
        }

    @staticmethod
    def _to_domain(raw: dict, record_id: str) -> Cart:
        # totalSum on disk is ignored; Cart derives it from the items.
        try:
            items = [
                CartItem(
                    id=text_field(i, "id"),
                    name=text_field(i, "name"),
                    quantity=Quantity(i["quantity"]),
                    price=Money.of(i["price"]),
                )
                for i in raw["items"]
            ]
            cart_id = text_field(raw, "id")
        except (KeyError, TypeError, ValidationError) as exc:
            raise RecordDecodeError(
                f"Cart record '{record_id}' is malformed: {exc}"
            ) from exc

        if cart_id != record_id:
            raise RecordDecodeError(
                f"Cart record '{record_id}' is stored under id '{cart_id}'"
            )

        seen: set[str] = set()
        for item in items:
            if item.id in seen:
                raise RecordDecodeError(
                    f"Cart record '{record_id}' lists item '{item.id}' twice"
                )
            seen.add(item.id)

        return Cart(id=cart_id, items=items)
