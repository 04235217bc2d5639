"""Product aggregate.

Products live independently of carts. A cart copies the name and price
of a product when it is first added, so later changes to the product
never leak into existing carts.
"""

from __future__ import annotations

from dataclasses import dataclass

from shopql.domain.exceptions import ValidationError
from shopql.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the catalog."""

    id: str
    name: str
    price: Money

    @staticmethod
    def create(product_id: str, name: str, price: Money) -> Product:
        """Build a new product, enforcing its invariants."""
        if not product_id or not product_id.strip():
            raise ValidationError("Product id is required")
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        return Product(id=product_id.strip(), name=name.strip(), price=price)
