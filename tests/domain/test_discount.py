"""Unit tests for the Discount value object."""

from decimal import Decimal

import pytest

from retail.domain.exceptions import InvalidDiscountError
from retail.domain.model.discount import Discount, DiscountKind
from retail.domain.model.value_objects import Money


class TestNoDiscount:

    def test_returns_price_unchanged(self):
        assert Discount.none().apply(Money.of("99.99")) == Money.of("99.99")

    def test_zero_price(self):
        assert Discount.none().apply(Money.zero()) == Money.zero()


class TestFlatDiscount:

    def test_subtracts_value(self):
        assert Discount.flat(5).apply(Money.of("25.00")) == Money.of("20.00")

    def test_exact_price_gives_zero(self):
        assert Discount.flat(25).apply(Money.of("25.00")) == Money.zero()

    def test_larger_than_price_clamps_to_zero(self):
        assert Discount.flat(30).apply(Money.of("25.00")) == Money.zero()

    def test_large_price(self):
        assert Discount.flat("0.01").apply(Money.of("1000000")) == Money.of("999999.99")


class TestPercentageDiscount:

    def test_ten_percent(self):
        assert Discount.percentage(10).apply(Money.of("1500.00")) == Money.of("1350.00")

    def test_rounds_to_cents(self):
        assert Discount.percentage(33).apply(Money.of("9.99")) == Money.of("6.69")

    def test_hundred_percent_is_free(self):
        assert Discount.percentage(100).apply(Money.of("40")) == Money.zero()

    def test_over_hundred_percent_clamps_to_zero(self):
        assert Discount.percentage(150).apply(Money.of("100")) == Money.zero()

    def test_zero_percent_keeps_price(self):
        assert Discount.percentage(0).apply(Money.of("12.34")) == Money.of("12.34")


class TestDiscountKind:

    def test_parse_is_case_insensitive(self):
        assert DiscountKind.parse(" FLAT ") is DiscountKind.FLAT

    def test_unknown_string_rejected(self):
        with pytest.raises(InvalidDiscountError, match="Invalid discount type"):
            Discount("seasonal", 5)

    def test_value_coerced_to_decimal(self):
        assert Discount.flat(5.5).value == Decimal("5.5")

    def test_bad_value_rejected(self):
        with pytest.raises(InvalidDiscountError, match="Invalid discount value"):
            Discount.flat("five")

    def test_non_finite_value_rejected(self):
        for raw in ("nan", "NaN", "inf", "-Infinity"):
            with pytest.raises(InvalidDiscountError, match="Invalid discount value"):
                Discount.flat(raw)

    def test_non_finite_decimal_rejected(self):
        with pytest.raises(InvalidDiscountError):
            Discount.percentage(Decimal("NaN"))

    def test_apply_rejects_unknown_kind(self):
        discount = Discount.flat(5)
        object.__setattr__(discount, "kind", "bogus")
        with pytest.raises(InvalidDiscountError):
            discount.apply(Money.of("10"))

    def test_is_immutable(self):
        discount = Discount.flat(5)
        with pytest.raises(AttributeError):
            discount.value = Decimal("1")


class TestDiscountDisplay:

    def test_str(self):
        assert str(Discount.flat(5)) == "$5.00 off"
        assert str(Discount.percentage("10.0")) == "10% off"
        assert str(Discount.none()) == "no discount"
