"""Unit tests for the Product entity."""

import pytest

from retail.domain.exceptions import InvalidQuantityError, ValidationError
from retail.domain.model.category import Category
from retail.domain.model.discount import Discount
from retail.domain.model.product import Product
from retail.domain.model.value_objects import Money
from retail.domain.repository.product_catalog import ProductCatalog


def _laptop(**overrides) -> Product:
    fields = dict(id=101, name="Laptop", price=Money.of("1500.00"), quantity=10)
    fields.update(overrides)
    return Product(**fields)


class TestProductPrice:

    def test_update_price_with_money(self):
        p = _laptop()
        p.update_price(Money.of("1299.99"))
        assert p.price == Money.of("1299.99")

    def test_update_price_from_string(self):
        p = _laptop()
        p.update_price("1400")
        assert p.price == Money.of("1400.00")

    def test_zero_price_allowed(self):
        p = _laptop()
        p.update_price(0)
        assert p.price == Money.zero()

    def test_negative_price_rejected_and_unchanged(self):
        p = _laptop()
        with pytest.raises(InvalidQuantityError, match="Invalid price"):
            p.update_price(-1)
        assert p.price == Money.of("1500.00")

    def test_garbage_price_rejected(self):
        p = _laptop()
        with pytest.raises(ValidationError, match="Invalid money amount"):
            p.update_price("cheap")
        assert p.price == Money.of("1500.00")


class TestProductQuantity:

    def test_update_quantity(self):
        p = _laptop()
        p.update_quantity(3)
        assert p.quantity == 3

    def test_zero_quantity_allowed(self):
        p = _laptop()
        p.update_quantity(0)
        assert p.quantity == 0

    def test_negative_quantity_rejected_and_unchanged(self):
        p = _laptop()
        with pytest.raises(InvalidQuantityError, match="Invalid quantity"):
            p.update_quantity(-1)
        assert p.quantity == 10

    def test_negative_initial_stock_rejected(self):
        with pytest.raises(InvalidQuantityError, match="cannot be negative"):
            _laptop(quantity=-5)


class TestProductCategory:

    def test_uncategorised_by_default(self):
        p = _laptop()
        assert p.category is None
        assert p.category_name is None

    def test_category_is_shared_not_copied(self):
        electronics = Category(1, "Electronics")
        a = _laptop(category=electronics)
        b = _laptop(id=103, name="Tablet", category=electronics)
        assert a.category is b.category
        assert a.category_name == "Electronics"

    def test_assign_category(self):
        p = _laptop()
        p.assign_category(Category(2, "Accessories"))
        assert p.category_name == "Accessories"
        p.assign_category(None)
        assert p.category is None


class TestProductConstruction:

    def test_negative_price_rejected(self):
        with pytest.raises(InvalidQuantityError, match="Invalid price"):
            _laptop(price=-5.0)

    def test_numeric_price_converted_to_money(self):
        p = _laptop(price=1500.0)
        assert p.price == Money.of("1500.00")

    def test_string_price_converted_to_money(self):
        assert _laptop(price="25.50").price == Money.of("25.50")

    def test_non_finite_price_rejected(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            _laptop(price="nan")

    def test_numeric_price_supports_discounts(self):
        catalog = ProductCatalog([_laptop(price=1500.0)])
        catalog.set_discount(101, Discount.percentage(10))
        assert catalog.discounted_price(101) == Money.of("1350.00")
