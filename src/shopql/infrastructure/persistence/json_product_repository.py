"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from shopql.domain.exceptions import RecordDecodeError, ValidationError
from shopql.domain.model.product import Product
from shopql.domain.model.value_objects import Money
from shopql.domain.repository.product_repository import ProductRepository
from shopql.infrastructure.persistence.json_file_store import (
    JsonFileStore,
    text_field,
)


class JsonProductRepository(ProductRepository):

    def __init__(self, store: JsonFileStore) -> None:
        self._store = store

    # --- ProductRepository interface ------------------------------------------

    def exists(self, product_id: str) -> bool:
        return self._store.exists(product_id)

    def get_by_id(self, product_id: str) -> Product | None:
        if not self._store.exists(product_id):
            return None
        return self._to_domain(self._store.read(product_id), product_id)

    def list_all(self) -> list[Product]:
        return [
            self._to_domain(self._store.read(record_id), record_id)
            for record_id in self._store.record_ids()
        ]

    def save(self, product: Product) -> None:
        self._store.write(product.id, self._to_raw(product))

    def delete(self, product_id: str) -> None:
        self._store.delete(product_id)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "price": product.price.as_number(),
        }

    @staticmethod
    def _to_domain(raw: dict, record_id: str) -> Product:
        try:
            product = Product(
                id=text_field(raw, "id"),
                name=text_field(raw, "name"),
                price=Money.of(raw["price"]),
            )
        except (KeyError, TypeError, ValidationError) as exc:
            raise RecordDecodeError(
                f"Product record '{record_id}' is malformed: {exc}"
            ) from exc

        if product.id != record_id:
            raise RecordDecodeError(
                f"Product record '{record_id}' is stored under id '{product.id}'"
            )
        return product
