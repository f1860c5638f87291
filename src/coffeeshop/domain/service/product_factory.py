"""Domain service: Product Factory.

Turns a type tag plus raw parameters (as typed by a person at the
counter) into a Product of the right category.  Each category has one
builder, registered in an explicit tag-to-builder table.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Callable

from coffeeshop.domain.exceptions import InvalidProductTypeError, ValidationError
from coffeeshop.domain.model.product import Product, ProductCategory
from coffeeshop.domain.model.value_objects import Money, parse_flag, parse_stock

DEFAULT_COFFEE_SIZE = "Regular"

Builder = Callable[[str, Money, int, str], Product]


def _build_coffee(name: str, price: Money, stock: int, extra: str) -> Product:
    size = (extra or "").strip() or DEFAULT_COFFEE_SIZE
    return Product(
        id=None, name=name, price=price, stock=stock,
        category=ProductCategory.COFFEE, attribute=size,
    )


def _build_snack(name: str, price: Money, stock: int, extra: str) -> Product:
    return Product(
        id=None, name=name, price=price, stock=stock,
        category=ProductCategory.SNACK, attribute=parse_flag(extra),
    )


def _build_beverage(name: str, price: Money, stock: int, extra: str) -> Product:
    return Product(
        id=None, name=name, price=price, stock=stock,
        category=ProductCategory.BEVERAGE, attribute=parse_flag(extra),
    )


_BUILDERS: dict[ProductCategory, Builder] = {
    ProductCategory.COFFEE: _build_coffee,
    ProductCategory.SNACK: _build_snack,
    ProductCategory.BEVERAGE: _build_beverage,
}


class ProductFactory:

    def __init__(self, builders: dict[ProductCategory, Builder] | None = None) -> None:
        self._builders = dict(builders or _BUILDERS)

    def supported_types(self) -> list[str]:
        return [category.value for category in self._builders]

    def create(
        self,
        type_tag: str,
        name: str,
        price: str | int | Decimal | Money,
        stock: str | int,
        extra: str = "",
    ) -> Product:
        """Build an unsaved Product (``id`` is None).

        Raises:
            InvalidProductTypeError: *type_tag* names no known category.
            InvalidArgumentError: price, stock or *extra* cannot be parsed.
            ValidationError: *name* is blank.
        """
        builder = self._builders[self._resolve(type_tag)]

        if not name or not name.strip():
            raise ValidationError("Product name is required")
        money = price if isinstance(price, Money) else Money.of(price)

        return builder(name.strip(), money, parse_stock(stock), extra)

    def _resolve(self, type_tag: str) -> ProductCategory:
        normalized = (type_tag or "").strip().lower()
        for category in self._builders:
            if category.value.lower() == normalized:
                return category
        raise InvalidProductTypeError(
            f"Invalid product type {type_tag!r} "
            f"(expected one of: {', '.join(self.supported_types())})"
        )
