"""Application service: Add Product use case.

Products have no GraphQL mutation; this is how the catalog is filled
from the command line.
"""

from __future__ import annotations

import uuid

from shopql.application.dto import ProductDTO, product_to_dto
from shopql.domain.exceptions import ValidationError
from shopql.domain.model.product import Product
from shopql.domain.model.value_objects import Money
from shopql.domain.repository.product_repository import ProductRepository


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, name: str, price: str, product_id: str | None = None) -> ProductDTO:
        """Add a new product to the catalog."""
        if product_id is None:
            product_id = str(uuid.uuid4())

        product = Product.create(product_id, name, Money.of(price))
        if self._product_repo.exists(product.id):
            raise ValidationError(f"Product '{product.id}' already exists")

        self._product_repo.save(product)
        return product_to_dto(product)
