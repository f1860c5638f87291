"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import logging

from coffeeshop.application.shop_registry import ShopRegistry
from coffeeshop.domain.model.user import Role, User
from coffeeshop.infrastructure.persistence.in_memory_order_repository import (
    InMemoryOrderRepository,
)
from coffeeshop.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)
from coffeeshop.infrastructure.persistence.in_memory_user_repository import (
    InMemoryUserRepository,
)

logger = logging.getLogger(__name__)

# (username, password, role); the administrator goes first so it can
# stock the menu below.
DEFAULT_USERS: tuple[tuple[str, str, Role], ...] = (
    ("admin", "admin123", Role.ADMIN),
    ("customer", "customer123", Role.CUSTOMER),
)

# (type, name, price, stock, extra)
DEFAULT_MENU: tuple[tuple[str, str, str, int, str], ...] = (
    ("Coffee", "Espresso", "2.50", 10, "Medium"),
    ("Coffee", "Cappuccino", "3.00", 8, "Large"),
    ("Coffee", "Iced Latte", "4.20", 12, "Grande"),
    ("Snack", "Croissant", "2.80", 15, "false"),
    ("Snack", "Vegetarian Sandwich", "5.50", 10, "true"),
    ("Snack", "Chocolate Cake", "4.00", 8, "false"),
    ("Beverage", "Orange Juice", "3.20", 12, "false"),
)


def build_shop(seed: bool = True) -> ShopRegistry:
    """A shop with the default accounts and menu loaded.

    With ``seed=False`` the shop starts with no users, menu or orders.
    """
    user_repo = InMemoryUserRepository()
    shop = ShopRegistry(
        product_repo=InMemoryProductRepository(),
        user_repo=user_repo,
        order_repo=InMemoryOrderRepository(),
    )
    if not seed:
        return shop

    # Default administrators are protected from demotion and removal.
    users = [
        User.create(name, password, role, protected=role is Role.ADMIN)
        for name, password, role in DEFAULT_USERS
    ]
    for user in users:
        user_repo.save(user)

    admin = users[0]
    for type_tag, name, price, stock, extra in DEFAULT_MENU:
        shop.create_product(admin, type_tag, name, price, stock, extra)

    logger.info(f"Shop seeded with {len(users)} users and {len(DEFAULT_MENU)} products")
    return shop
