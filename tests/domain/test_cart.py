"""Unit tests for the Cart used while entering an order."""

import pytest

from sweetorya.domain.exceptions import ValidationError
from sweetorya.domain.model.cart import Cart
from sweetorya.domain.model.value_objects import Money


class TestCart:

    def test_grand_total_two_lines(self):
        cart = Cart()
        cart.add_item("Box 6pcs", "3", "10000")
        cart.add_item("Tart", "1", "25000")
        assert cart.grand_total == Money.of("55000")

    def test_subtotal_of_added_item(self):
        item = Cart().add_item("Box 6pcs", 4, "12500")
        assert item.subtotal == Money.of("50000")

    def test_empty_cart_total_is_zero(self):
        cart = Cart()
        assert cart.is_empty
        assert cart.grand_total == Money.zero()

    @pytest.mark.parametrize(
        "name,qty,price",
        [("", "1", "1000"), ("Box", "", "1000"), ("Box", "1", ""), ("  ", "1", "1000")],
    )
    def test_missing_fields_rejected(self, name, qty, price):
        with pytest.raises(ValidationError, match="all required"):
            Cart().add_item(name, qty, price)

    def test_non_numeric_quantity_rejected(self):
        with pytest.raises(ValidationError, match="Invalid quantity"):
            Cart().add_item("Box", "two", "1000")

    def test_remove_item(self):
        cart = Cart()
        cart.add_item("Box 6pcs", "3", "10000")
        cart.add_item("Tart", "1", "25000")
        removed = cart.remove_item(0)
        assert removed.variant_name == "Box 6pcs"
        assert cart.grand_total == Money.of("25000")

    def test_remove_out_of_range(self):
        with pytest.raises(ValidationError, match="No cart item"):
            Cart().remove_item(0)
