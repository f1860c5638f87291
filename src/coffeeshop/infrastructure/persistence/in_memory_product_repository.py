"""In-memory implementation of ProductRepository."""

from __future__ import annotations

from coffeeshop.domain.model.product import Product
from coffeeshop.domain.repository.product_repository import ProductRepository


class InMemoryProductRepository(ProductRepository):

    def __init__(self) -> None:
        self._store: dict[int, Product] = {}
        self._next_id = 1

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: int) -> Product | None:
        return self._store.get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def save(self, product: Product) -> None:
        if product.id is None:
            product.id = self._next_id
        self._next_id = max(self._next_id, product.id + 1)
        self._store[product.id] = product

    def remove(self, product_id: int) -> bool:
        return self._store.pop(product_id, None) is not None
