"""Cart aggregate.

The Cart is an aggregate root that owns its items. The total is never
stored on the object: it is derived from the items every time it is
read, so it cannot drift out of sync with them.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from shopql.domain.exceptions import EntityNotFoundError, ValidationError
from shopql.domain.model.product import Product
from shopql.domain.model.value_objects import Money, Quantity


@dataclass
class CartItem:
    """Snapshot of a product's name and price plus how many units are held."""

    id: str
    name: str
    quantity: Quantity
    price: Money  # locked when the product was first added

    @property
    def line_total(self) -> Money:
        return self.price * self.quantity.value


@dataclass
class Cart:
    """Aggregate root for shopping carts.

    Items keep first-seen order. Use ``Cart.create()`` for new carts;
    ``__init__`` lets the repository reconstitute persisted carts.
    """

    id: str
    items: list[CartItem] = field(default_factory=list)

    @staticmethod
    def create(cart_id: str) -> Cart:
        if not cart_id:
            raise ValidationError("Cart id is required")
        return Cart(id=cart_id, items=[])

    # --- Mutations ------------------------------------------------------------

    def contains(self, item_id: str) -> bool:
        return self._find_item(item_id) is not None

    def add_product(self, product: Product) -> CartItem:
        """Append a new line holding one unit of *product*.

        The line copies the product's current name and price. Lines that
        are already in the cart grow through ``increment()`` instead.
        """
        if self.contains(product.id):
            raise ValidationError(
                f"Product '{product.id}' is already in cart '{self.id}'"
            )

        item = CartItem(
            id=product.id,
            name=product.name,
            quantity=Quantity(1),
            price=product.price,
        )
        self.items.append(item)
        return item

    def increment(self, item_id: str) -> CartItem:
        """Add one more unit of an item already in the cart."""
        item = self._require_item(item_id)
        item.quantity = item.quantity.increment()
        return item

    def remove_unit(self, item_id: str) -> CartItem | None:
        """Take one unit of *item_id* out of the cart.

        Returns the updated line, or None when its last unit was removed
        and the line dropped from the cart.
        """
        item = self._require_item(item_id)
        if item.quantity.value == 1:
            self.items.remove(item)
            return None
        item.quantity = Quantity(item.quantity.value - 1)
        return item

    # --- Computed properties --------------------------------------------------

    @property
    def total_sum(self) -> Money:
        result = Money.zero()
        for item in self.items:
            result = result + item.line_total
        return result

    # --- Internal helpers -----------------------------------------------------

    def _find_item(self, item_id: str) -> CartItem | None:
        for item in self.items:
            if item.id == item_id:
                return item
        return None

    def _require_item(self, item_id: str) -> CartItem:
        item = self._find_item(item_id)
        if item is None:
            raise EntityNotFoundError(
                f"Product '{item_id}' does not exist in cart '{self.id}'"
            )
        return item
