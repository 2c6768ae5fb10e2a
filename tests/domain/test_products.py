"""Tests for the Product value object."""

from decimal import Decimal

import pytest

from orderflow.domain.products import Product


class TestProduct:
    def test_construction(self) -> None:
        product = Product(name="Laptop", price=25000)
        assert product.name == "Laptop"
        assert product.price == Decimal("25000")

    def test_fractional_price(self) -> None:
        assert Product(name="Cable", price="19.99").price == Decimal("19.99")

    def test_frozen(self) -> None:
        product = Product(name="Laptop", price=25000)
        with pytest.raises(Exception):
            product.price = Decimal(1)  # type: ignore[misc]

    def test_equal_by_value(self) -> None:
        assert Product(name="Laptop", price=25000) == Product(name="Laptop", price=25000)

    def test_str(self) -> None:
        assert str(Product(name="Headphones", price=3000)) == "Headphones (3000)"
