"""Application service: the Shop Registry.

The registry is the single entry point for everything the shop does.  It
owns the catalog, the user list and the order history (through their
repositories) and is the only place that coordinates them.

Administrative operations take the acting user as their first argument
and are refused with UnauthorizedError unless that user is an
administrator.  Ids that do not exist raise EntityNotFoundError.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from coffeeshop.application.dto import OrderReceipt
from coffeeshop.domain.exceptions import (
    EntityNotFoundError,
    UnauthorizedError,
    ValidationError,
)
from coffeeshop.domain.model.order import Order
from coffeeshop.domain.model.product import Product
from coffeeshop.domain.model.user import Role, User
from coffeeshop.domain.model.value_objects import Money, parse_count
from coffeeshop.domain.repository.order_repository import OrderRepository
from coffeeshop.domain.repository.product_repository import ProductRepository
from coffeeshop.domain.repository.user_repository import UserRepository
from coffeeshop.domain.service.product_factory import ProductFactory

logger = logging.getLogger(__name__)


class ShopRegistry:

    def __init__(
        self,
        product_repo: ProductRepository,
        user_repo: UserRepository,
        order_repo: OrderRepository,
        factory: ProductFactory | None = None,
    ) -> None:
        self._product_repo = product_repo
        self._user_repo = user_repo
        self._order_repo = order_repo
        self._factory = factory or ProductFactory()

    @property
    def product_types(self) -> list[str]:
        return self._factory.supported_types()

    # --- Catalog --------------------------------------------------------------

    def create_product(
        self,
        acting: User,
        type_tag: str,
        name: str,
        price: str | int | Decimal | Money,
        stock: str | int,
        extra: str = "",
    ) -> Product:
        self._require_admin(acting, "create products")
        product = self._factory.create(type_tag, name, price, stock, extra)
        self._product_repo.save(product)
        logger.info(f"Product #{product.id} '{product.name}' added by {acting.username}")
        return product

    def update_product(
        self,
        acting: User,
        product_id: int,
        new_price: str | int | Decimal | Money,
        new_stock: str | int,
    ) -> Product:
        """Set a product's price and stock level.

        The stock change goes through ``adjust_stock`` so a negative target
        raises InsufficientStockError.  Nothing changes if any input is bad.
        """
        self._require_admin(acting, "update products")
        product = self.get_product(product_id)

        price = new_price if isinstance(new_price, Money) else Money.of(new_price)
        target = parse_count(new_stock)

        product.adjust_stock(target - product.stock)
        product.update_price(price)
        self._product_repo.save(product)
        logger.info(
            f"Product #{product.id} updated by {acting.username}: "
            f"price={product.price} stock={product.stock}"
        )
        return product

    def remove_product(self, acting: User, product_id: int) -> Product:
        self._require_admin(acting, "remove products")
        product = self.get_product(product_id)
        self._product_repo.remove(product_id)
        logger.info(f"Product #{product_id} '{product.name}' removed by {acting.username}")
        return product

    def get_product(self, product_id: int) -> Product:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product #{product_id} not found")
        return product

    def list_products(self) -> list[Product]:
        return self._product_repo.list_all()

    # --- Orders ---------------------------------------------------------------

    def start_order(self, user: User) -> Order:
        user = self._registered(user)
        return Order(id=None, user_id=user.id, customer_name=user.username)

    def add_to_order(self, order: Order, product_id: int, quantity: int = 1) -> Product:
        if order.id is not None:
            raise ValidationError(f"Order #{order.id} has already been processed")
        if self._user_repo.get_by_id(order.user_id) is None:
            raise UnauthorizedError(f"Order owner #{order.user_id} is no longer registered")
        product = self.get_product(product_id)
        product.add_to_order(order, quantity)
        self._product_repo.save(product)
        return product

    def process_order(self, order: Order, user: User) -> OrderReceipt:
        """Record *order* in the history and credit loyalty points.

        Orders whose total is zero are dropped: not recorded, no points,
        no error.
        """
        user = self._registered(user)
        if order.user_id != user.id:
            raise ValidationError(
                f"Order belongs to user #{order.user_id}, not '{user.username}'"
            )
        if order.id is not None:
            raise ValidationError(f"Order #{order.id} has already been processed")

        if order.total_price <= Money.zero():
            logger.debug(f"Dropping empty order for {user.username}")
            return OrderReceipt(order=order, recorded=False, points_balance=user.loyalty_points)

        self._order_repo.save(order)
        earned = user.add_loyalty_points(order.total_price)
        self._user_repo.save(user)
        logger.info(
            f"Order #{order.id} recorded for {user.username}: "
            f"{order.item_count} item(s), total {order.total_price}"
        )
        return OrderReceipt(
            order=order,
            recorded=True,
            points_earned=earned,
            loyalty_notice=user.role is Role.CUSTOMER,
            points_balance=user.loyalty_points,
        )

    def order_history(self, requesting_user: User) -> list[Order]:
        """Administrators see every order; customers only their own."""
        requesting_user = self._registered(requesting_user)
        if requesting_user.is_admin:
            return self._order_repo.list_all()
        return self._order_repo.list_for_user(requesting_user.id)

    def get_order(self, requesting_user: User, order_id: int) -> Order:
        """Look up one recorded order.

        Customers only see their own orders; anyone else's is reported as
        not found.
        """
        requesting_user = self._registered(requesting_user)
        order = self._order_repo.get_by_id(order_id)
        if order is None or (
            not requesting_user.is_admin and order.user_id != requesting_user.id
        ):
            raise EntityNotFoundError(f"Order #{order_id} not found")
        return order

    # --- Users ----------------------------------------------------------------

    def authenticate_user(self, username: str, password: str) -> User | None:
        user = self._user_repo.get_by_username(username)
        if user is not None and user.authenticate(password):
            return user
        logger.warning(f"Failed login attempt for username {username!r}")
        return None

    def add_user(self, acting: User, username: str, password: str, role: Role | str) -> User:
        self._require_admin(acting, "add users")
        resolved = Role.parse(role)
        if not username or not username.strip():
            raise ValidationError("Username is required")
        if self._user_repo.get_by_username(username) is not None:
            raise ValidationError(f"Username '{username}' already exists")
        user = User.create(username, password, resolved)
        self._user_repo.save(user)
        logger.info(f"User #{user.id} '{user.username}' added as {resolved.value} by {acting.username}")
        return user

    def remove_user(self, acting: User, user_id: int) -> bool:
        """Remove a user.  Administrators are protected: returns False."""
        self._require_admin(acting, "remove users")
        user = self.get_user(user_id)
        if user.is_admin or user.protected:
            logger.warning(
                f"{acting.username} tried to remove administrator '{user.username}'"
            )
            return False
        self._user_repo.remove(user_id)
        logger.info(f"User #{user_id} '{user.username}' removed by {acting.username}")
        return True

    def change_role(self, acting: User, user_id: int, role: Role | str) -> User:
        """Change a user's role in place, keeping id and loyalty points."""
        self._require_admin(acting, "change roles")
        resolved = Role.parse(role)
        user = self.get_user(user_id)
        if user.protected and resolved is not Role.ADMIN:
            raise ValidationError(f"Cannot demote default administrator '{user.username}'")
        if user.is_admin and resolved is not Role.ADMIN and self._admin_count() == 1:
            raise ValidationError("Cannot demote the last administrator")
        user.change_role(resolved)
        self._user_repo.save(user)
        logger.info(f"User '{user.username}' is now {resolved.value} ({acting.username})")
        return user

    def change_password(self, acting: User, user_id: int, new_password: str) -> None:
        acting = self._registered(acting)
        if acting.id != user_id:
            self._require_admin(acting, "change other users' passwords")
        user = self.get_user(user_id)
        user.update_password(new_password)
        self._user_repo.save(user)
        logger.info(f"Password changed for '{user.username}'")

    def get_user(self, user_id: int) -> User:
        user = self._user_repo.get_by_id(user_id)
        if user is None:
            raise EntityNotFoundError(f"User #{user_id} not found")
        return user

    def list_users(self, acting: User) -> list[User]:
        self._require_admin(acting, "list users")
        return self._user_repo.list_all()

    # --- Internal helpers -----------------------------------------------------

    def _admin_count(self) -> int:
        return sum(1 for u in self._user_repo.list_all() if u.is_admin)

    def _registered(self, user: User) -> User:
        """Return *user* only if it is the stored record for its id."""
        stored = self._user_repo.get_by_id(user.id) if user.id is not None else None
        if stored is not user:
            logger.warning(f"Rejected unregistered user '{user.username}'")
            raise UnauthorizedError(f"'{user.username}' is not a registered user")
        return stored

    def _require_admin(self, acting: User, action: str) -> None:
        acting = self._registered(acting)
        if not acting.is_admin:
            logger.warning(f"{acting.username} ({acting.role.value}) may not {action}")
            raise UnauthorizedError(f"Only administrators may {action}")
