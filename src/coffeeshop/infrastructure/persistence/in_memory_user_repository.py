"""In-memory implementation of UserRepository."""

from __future__ import annotations

from coffeeshop.domain.model.user import User
from coffeeshop.domain.repository.user_repository import UserRepository


class InMemoryUserRepository(UserRepository):

    def __init__(self) -> None:
        self._store: dict[int, User] = {}
        self._next_id = 1

    # --- UserRepository interface ---------------------------------------------

    def get_by_id(self, user_id: int) -> User | None:
        return self._store.get(user_id)

    def get_by_username(self, username: str) -> User | None:
        for user in self._store.values():
            if user.username == username:
                return user
        return None

    def list_all(self) -> list[User]:
        return list(self._store.values())

    def save(self, user: User) -> None:
        if user.id is None:
            user.id = self._next_id
        self._next_id = max(self._next_id, user.id + 1)
        self._store[user.id] = user

    def remove(self, user_id: int) -> bool:
        return self._store.pop(user_id, None) is not None
