"""Abstract repository for Cart aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from shopql.domain.model.cart import Cart


class CartRepository(ABC):

    @abstractmethod
    def next_id(self) -> str:
        """Generate a cart ID that is not used by any stored cart."""

    @abstractmethod
    def exists(self, cart_id: str) -> bool:
        """Return True if a cart with this ID is stored."""

    @abstractmethod
    def get_by_id(self, cart_id: str) -> Cart | None:
        """Return a cart by its ID, or None if not found."""

    @abstractmethod
    def save(self, cart: Cart) -> None:
        """Persist a new or updated cart (whole-record overwrite)."""

    @abstractmethod
    def delete(self, cart_id: str) -> None:
        """Remove a stored cart. May raise OSError."""
