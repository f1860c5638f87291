"""Abstract repository for the Order aggregate (the order history)."""

from __future__ import annotations

from abc import ABC, abstractmethod

from coffeeshop.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every recorded order, oldest first."""

    @abstractmethod
    def list_for_user(self, user_id: int) -> list[Order]:
        """Return the recorded orders owned by one user, oldest first."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Record a new order or update an existing one."""
