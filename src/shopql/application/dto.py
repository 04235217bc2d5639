"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data from the application layer to GraphQL and the CLI
without exposing domain internals. Amounts are plain numbers here,
as they appear on the wire.
"""

from __future__ import annotations

from dataclasses import dataclass

from shopql.domain.model.cart import Cart
from shopql.domain.model.product import Product


@dataclass(frozen=True)
class ProductDTO:

    id: str
    name: str
    price: int | float


@dataclass(frozen=True)
class CartItemDTO:

    id: str
    name: str
    quantity: int
    price: int | float


@dataclass(frozen=True)
class CartDTO:

    id: str
    items: list[CartItemDTO]
    total_sum: int | float


@dataclass(frozen=True)
class DeleteResultDTO:
    """Outcome of a delete; ``success`` is False when the file could not be removed."""

    deleted_id: str
    success: bool


# --- Mapping ------------------------------------------------------------------


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        name=product.name,
        price=product.price.as_number(),
    )


def cart_to_dto(cart: Cart) -> CartDTO:
    return CartDTO(
        id=cart.id,
        items=[
            CartItemDTO(
                id=item.id,
                name=item.name,
                quantity=item.quantity.value,
                price=item.price.as_number(),
            )
            for item in cart.items
        ],
        total_sum=cart.total_sum.as_number(),
    )
