"""In-memory fake repositories for testing.

These implement the same abstract interfaces as the JSON repositories
but keep everything in a dict. No file I/O, no side effects.
"""

from __future__ import annotations

import copy

from shopql.domain.model.cart import Cart
from shopql.domain.model.product import Product
from shopql.domain.repository.cart_repository import CartRepository
from shopql.domain.repository.product_repository import ProductRepository


class FakeProductRepository(ProductRepository):

    def __init__(
        self,
        products: list[Product] | None = None,
        fail_delete: bool = False,
    ) -> None:
        self._store: dict[str, Product] = {}
        self._fail_delete = fail_delete
        for p in products or []:
            self._store[p.id] = p

    def exists(self, product_id: str) -> bool:
        return product_id in self._store

    def get_by_id(self, product_id: str) -> Product | None:
        return self._store.get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def save(self, product: Product) -> None:
        self._store[product.id] = product

    def delete(self, product_id: str) -> None:
        if self._fail_delete:
            raise PermissionError(f"cannot remove {product_id}")
        del self._store[product_id]


class FakeCartRepository(CartRepository):
    """Stores deep copies so tests can tell saved state from working state."""

    def __init__(
        self,
        carts: list[Cart] | None = None,
        ids: list[str] | None = None,
        fail_delete: bool = False,
    ) -> None:
        self._store: dict[str, Cart] = {}
        self._ids = list(ids or [])
        self._counter = 0
        self._fail_delete = fail_delete
        self.save_count = 0
        for c in carts or []:
            self._store[c.id] = copy.deepcopy(c)

    def next_id(self) -> str:
        while True:
            if self._ids:
                candidate = self._ids.pop(0)
            else:
                self._counter += 1
                candidate = f"cart-{self._counter}"
            if candidate not in self._store:
                return candidate

    def exists(self, cart_id: str) -> bool:
        return cart_id in self._store

    def get_by_id(self, cart_id: str) -> Cart | None:
        cart = self._store.get(cart_id)
        return copy.deepcopy(cart) if cart is not None else None

    def save(self, cart: Cart) -> None:
        self.save_count += 1
        self._store[cart.id] = copy.deepcopy(cart)

    def delete(self, cart_id: str) -> None:
        if self._fail_delete:
            raise PermissionError(f"cannot remove {cart_id}")
        del self._store[cart_id]
