"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions. The data directory is
always passed in; nothing here reads a global path.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from shopql.domain.repository.cart_repository import CartRepository
from shopql.domain.repository.product_repository import ProductRepository
from shopql.infrastructure.persistence.json_cart_repository import (
    JsonCartRepository,
)
from shopql.infrastructure.persistence.json_file_store import JsonFileStore
from shopql.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)

DATA_DIR_ENV = "SHOPQL_DATA_DIR"


@dataclass(frozen=True)
class ShopContext:
    """Repositories handed to every GraphQL resolver as ``info.context``."""

    product_repo: ProductRepository
    cart_repo: CartRepository


def product_repository(data_dir: Path) -> JsonProductRepository:
    return JsonProductRepository(JsonFileStore(data_dir / "products"))


def cart_repository(data_dir: Path) -> JsonCartRepository:
    return JsonCartRepository(JsonFileStore(data_dir / "carts"))


def build_context(data_dir: Path) -> ShopContext:
    return ShopContext(
        product_repo=product_repository(data_dir),
        cart_repo=cart_repository(data_dir),
    )
