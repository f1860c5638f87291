"""Abstract repository for the Product aggregate (the catalog).

Defined in the domain layer so the domain never depends on
infrastructure.  The repository owns id allocation: ids are handed out
monotonically on first save and never reused.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from coffeeshop.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in insertion order."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Store a new or updated product, assigning an ID if it has none."""

    @abstractmethod
    def remove(self, product_id: int) -> bool:
        """Remove a product; return False if it was not there."""
