"""User aggregate: a credentialed principal with exactly one role."""

from __future__ import annotations

import hashlib
import hmac
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum

from coffeeshop.domain.exceptions import InvalidArgumentError
from coffeeshop.domain.model.value_objects import Money


class Role(Enum):
    ADMIN = "admin"
    CUSTOMER = "customer"

    @staticmethod
    def parse(tag: str | Role) -> Role:
        if isinstance(tag, Role):
            return tag
        normalized = (tag or "").strip().lower()
        for role in Role:
            if role.value == normalized:
                return role
        raise InvalidArgumentError(
            f"Unknown role {tag!r} (expected one of: "
            f"{', '.join(r.value for r in Role)})"
        )


# One loyalty point per whole LOYALTY_POINT_UNIT spent.
LOYALTY_POINT_UNIT = Money(Decimal("5"))


def _digest(password: str) -> str:
    return hashlib.sha256(password.encode("utf-8")).hexdigest()


@dataclass
class User:
    """A registered user.

    Only the password digest is kept.  ``id`` is ``None`` until the user
    list stores the user.  ``protected`` accounts (the shop's default
    administrators) can never be demoted or removed.
    """

    id: int | None
    username: str
    role: Role
    password_digest: str = field(repr=False)
    loyalty_points: int = 0
    protected: bool = False

    @staticmethod
    def create(username: str, password: str, role: Role, protected: bool = False) -> User:
        return User(
            id=None,
            username=username,
            role=role,
            password_digest=_digest(password),
            protected=protected,
        )

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN

    def authenticate(self, password: str) -> bool:
        """Exact, case-sensitive match, compared in constant time."""
        return hmac.compare_digest(self.password_digest, _digest(password))

    def update_password(self, new_password: str) -> None:
        self.password_digest = _digest(new_password)

    def add_loyalty_points(self, amount_spent: Money) -> int:
        """Credit points for *amount_spent* and return how many were earned."""
        earned = amount_spent // LOYALTY_POINT_UNIT
        self.loyalty_points += earned
        return earned

    def change_role(self, role: Role) -> None:
        """Switch role in place; id and loyalty points are kept."""
        self.role = role
