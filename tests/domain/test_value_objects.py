"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from coffeeshop.domain.exceptions import InvalidArgumentError, ValidationError
from coffeeshop.domain.model.value_objects import Money, Quantity, parse_flag, parse_stock


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")

    def test_of_factory_from_string(self):
        assert Money.of("2.50").amount == Decimal("2.50")

    def test_of_factory_from_int(self):
        assert Money.of(10).amount == Decimal("10")

    def test_of_factory_from_float(self):
        assert Money.of(2.0) == Money.of("2.00")

    def test_zero_is_allowed(self):
        assert Money.of("0").amount == Decimal("0")

    def test_negative_amount_rejected(self):
        with pytest.raises(InvalidArgumentError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_garbage_rejected(self):
        with pytest.raises(InvalidArgumentError, match="Invalid money amount"):
            Money.of("two fifty")

    def test_nan_rejected(self):
        with pytest.raises(InvalidArgumentError, match="finite"):
            Money.of("NaN")

    def test_non_decimal_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be a Decimal"):
            Money(2.5)

    def test_addition(self):
        assert Money.of("10") + Money.of("5.50") == Money.of("15.50")

    def test_multiplication_by_int(self):
        assert Money.of("2.50") * 3 == Money.of("7.50")

    def test_multiplication_by_float_rejected(self):
        with pytest.raises(TypeError):
            Money.of("2.50") * 1.5

    def test_floor_division_counts_whole_units(self):
        assert Money.of("14.99") // Money.of("5") == 2
        assert Money.of("15.00") // Money.of("5") == 3
        assert Money.of("4.99") // Money.of("5") == 0

    def test_str_formatting(self):
        assert str(Money.of("15")) == "$15.00"
        assert str(Money.of("9.5")) == "$9.50"

    def test_comparison_operators(self):
        assert Money.of("5") < Money.of("10")
        assert Money.of("10") > Money.of("5")
        assert Money.of("10") >= Money.of("10")
        assert Money.of("10") <= Money.of("10")


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        assert Quantity(5).value == 5

    def test_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(0)

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(-3)

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(True)

    def test_addition(self):
        assert Quantity(2) + Quantity(3) == Quantity(5)

    def test_str(self):
        assert str(Quantity(7)) == "7"


# ── Raw parameter parsing ────────────────────────────────────────────────────


class TestParseFlag:

    @pytest.mark.parametrize("text", ["true", "True", "TRUE", "  true "])
    def test_true(self, text):
        assert parse_flag(text) is True

    @pytest.mark.parametrize("text", ["false", "False", " FALSE"])
    def test_false(self, text):
        assert parse_flag(text) is False

    @pytest.mark.parametrize("text", ["notabool", "yes", "1", ""])
    def test_malformed_rejected(self, text):
        with pytest.raises(InvalidArgumentError, match="Expected 'true' or 'false'"):
            parse_flag(text)


class TestParseStock:

    def test_int_passthrough(self):
        assert parse_stock(12) == 12

    def test_text(self):
        assert parse_stock(" 7 ") == 7

    def test_zero_allowed(self):
        assert parse_stock("0") == 0

    def test_negative_rejected(self):
        with pytest.raises(InvalidArgumentError, match="cannot be negative"):
            parse_stock(-1)

    def test_garbage_rejected(self):
        with pytest.raises(InvalidArgumentError, match="Invalid stock count"):
            parse_stock("lots")
