"""In-memory implementation of OrderRepository."""

from __future__ import annotations

from coffeeshop.domain.model.order import Order
from coffeeshop.domain.repository.order_repository import OrderRepository


class InMemoryOrderRepository(OrderRepository):

    def __init__(self) -> None:
        self._store: dict[int, Order] = {}
        self._next_id = 1

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: int) -> Order | None:
        return self._store.get(order_id)

    def list_all(self) -> list[Order]:
        return list(self._store.values())

    def list_for_user(self, user_id: int) -> list[Order]:
        return [o for o in self._store.values() if o.user_id == user_id]

    def save(self, order: Order) -> None:
        if order.id is None:
            order.id = self._next_id
            self._next_id += 1
        self._store[order.id] = order
