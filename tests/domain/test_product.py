"""Unit tests for the Product aggregate."""

import pytest

from coffeeshop.domain.exceptions import (
    InsufficientStockError,
    OutOfStockError,
    ValidationError,
)
from coffeeshop.domain.model.order import Order
from coffeeshop.domain.model.product import Product, ProductCategory
from coffeeshop.domain.model.value_objects import Money


def _make_product(
    stock: int = 10,
    price: str = "2.50",
    category: ProductCategory = ProductCategory.COFFEE,
    attribute: str | bool = "Medium",
    product_id: int | None = 1,
) -> Product:
    return Product(
        id=product_id,
        name="Espresso",
        price=Money.of(price),
        stock=stock,
        category=category,
        attribute=attribute,
    )


def _empty_order() -> Order:
    return Order(id=None, user_id=2, customer_name="customer")


class TestAdjustStock:

    def test_increase(self):
        p = _make_product(stock=10)
        p.adjust_stock(5)
        assert p.stock == 15

    def test_decrease_to_zero(self):
        p = _make_product(stock=10)
        p.adjust_stock(-10)
        assert p.stock == 0

    def test_below_zero_rejected(self):
        p = _make_product(stock=3)
        with pytest.raises(InsufficientStockError, match="Insufficient stock"):
            p.adjust_stock(-4)
        assert p.stock == 3

    def test_stock_never_negative_after_sequence(self):
        p = _make_product(stock=5)
        for delta in (-2, 4, -7, -1, 3, -10):
            try:
                p.adjust_stock(delta)
            except InsufficientStockError:
                pass
            assert p.stock >= 0


class TestConstruction:

    def test_negative_stock_rejected(self):
        with pytest.raises(InsufficientStockError, match="cannot be negative"):
            _make_product(stock=-1)

    def test_zero_stock_allowed(self):
        assert _make_product(stock=0).stock == 0

    def test_string_stock_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            _make_product(stock="3")

    def test_fractional_stock_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            _make_product(stock=2.5)

    def test_boolean_stock_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            _make_product(stock=True)


class TestAdjustStockArguments:

    def test_fractional_delta_rejected(self):
        p = _make_product(stock=10)
        with pytest.raises(ValidationError, match="must be an integer"):
            p.adjust_stock(1.5)
        assert p.stock == 10

    def test_string_delta_rejected(self):
        p = _make_product(stock=10)
        with pytest.raises(ValidationError, match="must be an integer"):
            p.adjust_stock("2")
        assert p.stock == 10


class TestAddToOrder:

    def test_adds_line_and_decrements_stock(self):
        p = _make_product(stock=10)
        order = _empty_order()
        p.add_to_order(order, 3)
        assert p.stock == 7
        assert order.item_count == 3
        assert order.total_price == Money.of("7.50")

    def test_defaults_to_one_unit(self):
        p = _make_product(stock=10)
        order = _empty_order()
        p.add_to_order(order)
        assert p.stock == 9
        assert order.item_count == 1

    def test_out_of_stock_leaves_order_and_stock_unchanged(self):
        p = _make_product(stock=7)
        order = _empty_order()
        p.add_to_order(order, 3)

        with pytest.raises(OutOfStockError, match="out of stock"):
            p.add_to_order(order, 5)

        assert p.stock == 4
        assert order.item_count == 3
        assert order.total_price == Money.of("7.50")

    def test_empty_stock_rejected(self):
        p = _make_product(stock=0)
        order = _empty_order()
        with pytest.raises(OutOfStockError):
            p.add_to_order(order)
        assert order.is_empty

    def test_out_of_stock_is_a_stock_error(self):
        assert issubclass(OutOfStockError, InsufficientStockError)

    def test_non_positive_quantity_rejected(self):
        p = _make_product(stock=10)
        order = _empty_order()
        with pytest.raises(ValidationError, match="must be positive"):
            p.add_to_order(order, 0)
        assert p.stock == 10
        assert order.is_empty


class TestUpdatePrice:

    def test_price_replaced(self):
        p = _make_product(price="2.50")
        p.update_price(Money.of("3.10"))
        assert p.price == Money.of("3.10")

    def test_existing_order_keeps_snapshot(self):
        p = _make_product(price="2.50")
        order = _empty_order()
        p.add_to_order(order, 2)
        p.update_price(Money.of("9.99"))
        assert order.total_price == Money.of("5.00")


class TestDescribe:

    def test_coffee_shows_size(self):
        p = _make_product()
        assert p.describe() == "1: Espresso (Medium): $2.50 (Stock: 10)"

    def test_snack_flags(self):
        veg = _make_product(category=ProductCategory.SNACK, attribute=True)
        meat = _make_product(category=ProductCategory.SNACK, attribute=False)
        assert "[vegetarian]" in veg.describe()
        assert "[non-vegetarian]" in meat.describe()

    def test_beverage_flags(self):
        sweet = _make_product(category=ProductCategory.BEVERAGE, attribute=True)
        plain = _make_product(category=ProductCategory.BEVERAGE, attribute=False)
        assert "[with sugar]" in sweet.describe()
        assert "[sugar-free]" in plain.describe()

    def test_describe_does_not_mutate(self):
        p = _make_product(stock=4)
        p.describe()
        p.describe()
        assert p.stock == 4
