"""Tests for the CartLine entity."""

import pytest

from src.cart_domain.domain.entities.cart_line import CartLine


@pytest.mark.parametrize("quantity", [0, -3])
def test_cart_line_rejects_non_positive_quantity(product_factory, quantity) -> None:
    with pytest.raises(ValueError):
        CartLine(product=product_factory(1), quantity=quantity)


def test_with_quantity_returns_new_line(product_factory) -> None:
    line = CartLine(product=product_factory(1, price=12.5), quantity=1)

    updated = line.with_quantity(4)

    assert line.quantity == 1
    assert updated.quantity == 4
    assert updated.subtotal == pytest.approx(50.0)
    assert updated.product is line.product


def test_from_dict_defaults_quantity_to_one() -> None:
    line = CartLine.from_dict({"id": "sku-9", "title": "Soap", "price": 3})

    assert line.product_id == "sku-9"
    assert line.quantity == 1
