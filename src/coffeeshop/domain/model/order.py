"""Order aggregate.

An order is built up during a single ordering session and owns its line
items.  It only enters the order history once the shop records it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from coffeeshop.domain.exceptions import ValidationError
from coffeeshop.domain.model.value_objects import Money, Quantity

if TYPE_CHECKING:
    from coffeeshop.domain.model.product import Product


@dataclass
class OrderLineItem:
    """One product in an order.

    ``unit_price`` is a snapshot taken when the product was first added;
    later price changes on the menu do not alter it.
    """

    product_id: int
    product_name: str
    unit_price: Money
    quantity: Quantity

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value

    def increase(self, qty: int) -> None:
        self.quantity = self.quantity + Quantity(qty)


@dataclass
class Order:
    """Aggregate root for customer orders.

    ``id`` stays ``None`` until the order is recorded in the order history.
    """

    id: int | None
    user_id: int
    customer_name: str
    items: list[OrderLineItem] = field(default_factory=list)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Mutation -------------------------------------------------------------

    def add_product(self, product: Product, quantity: int = 1) -> None:
        """Add *quantity* units of *product*.

        Repeated additions of the same product grow the existing line.
        Stock is not checked here; ``Product.add_to_order`` does that.
        """
        if product.id is None:
            raise ValidationError(f"Product '{product.name}' is not on the menu")
        existing = self._find_item(product.id)
        if existing is not None:
            existing.increase(quantity)
            return
        self.items.append(
            OrderLineItem(
                product_id=product.id,
                product_name=product.name,
                unit_price=product.price,
                quantity=Quantity(quantity),
            )
        )

    # --- Computed properties --------------------------------------------------

    @property
    def total_price(self) -> Money:
        result = Money.zero()
        for item in self.items:
            result = result + item.line_total
        return result

    @property
    def item_count(self) -> int:
        return sum(item.quantity.value for item in self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items

    # --- Display --------------------------------------------------------------

    def render(self) -> str:
        if self.is_empty:
            return "No products in this order."

        header = f"Order #{self.id}" if self.id is not None else "Order (not recorded)"
        lines = [
            header,
            f"Customer: {self.customer_name}",
            f"Date:     {self.created_at.strftime('%Y-%m-%d %H:%M UTC')}",
            "",
            f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}",
            f"  {'-'*47}",
        ]
        for item in self.items:
            lines.append(
                f"  {item.product_name:<20} {item.quantity.value:>5} "
                f"{str(item.unit_price):>10} {str(item.line_total):>10}"
            )
        lines.append(f"  {'-'*47}")
        lines.append(f"  {'Order Total':<27} {str(self.total_price):>20}")
        return "\n".join(lines)

    # --- Internal helpers -----------------------------------------------------

    def _find_item(self, product_id: int) -> OrderLineItem | None:
        for item in self.items:
            if item.product_id == product_id:
                return item
        return None
