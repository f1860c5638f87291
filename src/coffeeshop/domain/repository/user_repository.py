"""Abstract repository for the User aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from coffeeshop.domain.model.user import User


class UserRepository(ABC):

    @abstractmethod
    def get_by_id(self, user_id: int) -> User | None:
        """Return a user by ID, or None if not found."""

    @abstractmethod
    def get_by_username(self, username: str) -> User | None:
        """Return a user by exact (case-sensitive) username, or None."""

    @abstractmethod
    def list_all(self) -> list[User]:
        """Return every user in insertion order."""

    @abstractmethod
    def save(self, user: User) -> None:
        """Store a new or updated user, assigning an ID if it has none."""

    @abstractmethod
    def remove(self, user_id: int) -> bool:
        """Remove a user; return False if it was not there."""
