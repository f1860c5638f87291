"""Product aggregate.

Products live independently of orders. They have their own lifecycle:
prices change, stock moves, products are added and removed from the menu.

Every category shares the same record; the category enum decides which
extra attribute the product carries and how it is rendered.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from coffeeshop.domain.exceptions import (
    InsufficientStockError,
    OutOfStockError,
    ValidationError,
)
from coffeeshop.domain.model.value_objects import Money, Quantity

if TYPE_CHECKING:
    from coffeeshop.domain.model.order import Order


class ProductCategory(Enum):
    COFFEE = "Coffee"
    SNACK = "Snack"
    BEVERAGE = "Beverage"


@dataclass
class Product:
    """A product on the menu.

    ``attribute`` holds the category-specific detail:

    - Coffee: the cup size (``str``)
    - Snack: whether it is vegetarian (``bool``)
    - Beverage: whether it contains sugar (``bool``)

    ``id`` is ``None`` until the catalog stores the product.
    """

    id: int | None
    name: str
    price: Money
    stock: int
    category: ProductCategory
    attribute: str | bool

    def __post_init__(self) -> None:
        if not isinstance(self.stock, int) or isinstance(self.stock, bool):
            raise ValidationError(
                f"Stock must be an integer, got {type(self.stock).__name__}"
            )
        if self.stock < 0:
            raise InsufficientStockError(
                f"Stock for {self.name} cannot be negative, got {self.stock}"
            )

    # --- Stock ----------------------------------------------------------------

    def adjust_stock(self, delta: int) -> None:
        """Add *delta* (possibly negative) to stock.

        Raises InsufficientStockError, leaving stock untouched, if the
        result would be negative.
        """
        if not isinstance(delta, int) or isinstance(delta, bool):
            raise ValidationError(
                f"Stock change must be an integer, got {type(delta).__name__}"
            )
        if self.stock + delta < 0:
            raise InsufficientStockError(
                f"Insufficient stock for {self.name} "
                f"(have {self.stock}, change {delta:+d})"
            )
        self.stock += delta

    def add_to_order(self, order: Order, quantity: int = 1) -> None:
        """Put *quantity* units into *order* and take them out of stock.

        The stock check happens first so a failed call leaves both the
        order and the product unchanged.
        """
        qty = Quantity(quantity)
        if self.stock < qty.value:
            raise OutOfStockError(
                f"{self.name} is out of stock "
                f"(requested {qty.value}, {self.stock} left)"
            )
        order.add_product(self, qty.value)
        self.adjust_stock(-qty.value)

    # --- Pricing --------------------------------------------------------------

    def update_price(self, new_price: Money) -> None:
        """Change the product price.

        Orders already holding this product keep the price they captured.
        """
        self.price = new_price

    # --- Display --------------------------------------------------------------

    @property
    def detail(self) -> str:
        if self.category is ProductCategory.COFFEE:
            return f"({self.attribute})"
        if self.category is ProductCategory.SNACK:
            return "[vegetarian]" if self.attribute else "[non-vegetarian]"
        return "[with sugar]" if self.attribute else "[sugar-free]"

    def describe(self) -> str:
        return f"{self.id}: {self.name} {self.detail}: {self.price} (Stock: {self.stock})"
