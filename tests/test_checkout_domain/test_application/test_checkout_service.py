# tests/test_checkout_domain/test_application/test_checkout_service.py
"""Tests for the CheckoutApplicationService."""

from unittest.mock import Mock

import pytest
import pytz

from src.checkout_domain.application.checkout_service import CheckoutApplicationService
from src.checkout_domain.domain.entities.checkout_request import CartCheckout, SingleProductCheckout
from src.checkout_domain.domain.repositories.payment_gateway import IPaymentGateway
from src.common.dtos.checkout_dtos import OrderDTO, PaymentResultDTO
from src.common.exceptions.custom_exceptions import CheckoutError


@pytest.fixture
def mock_payment_gateway() -> Mock:
    """Mock for the payment gateway."""
    return Mock(spec=IPaymentGateway)


@pytest.fixture
def checkout_service(cart_ledger, mock_payment_gateway) -> CheckoutApplicationService:
    return CheckoutApplicationService(cart_ledger=cart_ledger, payment_gateway=mock_payment_gateway)


def _approve(order: OrderDTO) -> PaymentResultDTO:
    return PaymentResultDTO(
        success=True, order=order, message="Payment processed successfully", transaction_id="TXN1"
    )


def _decline(order: OrderDTO) -> PaymentResultDTO:
    return PaymentResultDTO(
        success=False,
        order=order,
        message="Unable to process payment. Please try again.",
        error="Payment declined",
    )


def test_build_order_for_single_product(checkout_service, product_factory) -> None:
    order = checkout_service.build_order(SingleProductCheckout(product=product_factory(1, price=200)))

    assert order.order_id.startswith("ORD")
    assert order.mode == "singleProduct"
    assert order.item_count == 1
    assert order.summary.total == pytest.approx(200 + 36 + 50)
    assert order.currency == "INR"
    assert order.created_at.tzinfo is not None
    assert order.created_at.utcoffset() == pytz.utc.utcoffset(order.created_at)


def test_order_payload_shape(checkout_service, product_factory) -> None:
    order = checkout_service.build_order(SingleProductCheckout(product=product_factory(5, price=10, title="Soap")))

    payload = order.to_payload()

    assert payload["orderId"] == order.order_id
    assert payload["items"] == [{"id": 5, "title": "Soap", "price": 10, "quantity": 1, "thumbnail": None}]
    assert payload["amount"] == order.summary.total
    assert payload["currency"] == "INR"
    assert payload["createdAt"].endswith("Z")


def test_empty_cart_checkout_raises(checkout_service) -> None:
    with pytest.raises(CheckoutError):
        checkout_service.build_order(checkout_service.cart_checkout_request())


def test_successful_cart_checkout_clears_cart(
    checkout_service, cart_ledger, mock_payment_gateway, product_factory
) -> None:
    cart_ledger.add_item(product_factory(1, price=100))
    cart_ledger.add_item(product_factory(1, price=100))
    mock_payment_gateway.process_payment.side_effect = _approve

    result = checkout_service.place_order(checkout_service.cart_checkout_request())

    assert result.success is True
    assert result.order.item_count == 2
    assert cart_ledger.total_item_count == 0
    mock_payment_gateway.process_payment.assert_called_once()


def test_declined_cart_checkout_keeps_cart(
    checkout_service, cart_ledger, mock_payment_gateway, product_factory
) -> None:
    cart_ledger.add_item(product_factory(1))
    mock_payment_gateway.process_payment.side_effect = _decline

    result = checkout_service.place_order(checkout_service.cart_checkout_request())

    assert result.success is False
    assert result.error == "Payment declined"
    assert cart_ledger.get_item_quantity(1) == 1


def test_single_product_checkout_leaves_cart_alone(
    checkout_service, cart_ledger, mock_payment_gateway, product_factory
) -> None:
    cart_ledger.add_item(product_factory(1))
    mock_payment_gateway.process_payment.side_effect = _approve

    checkout_service.place_order(SingleProductCheckout(product=product_factory(2)))

    assert cart_ledger.is_in_cart(1)


def test_gateway_exception_becomes_failed_result(checkout_service, mock_payment_gateway, product_factory) -> None:
    mock_payment_gateway.process_payment.side_effect = RuntimeError("gateway down")

    result = checkout_service.place_order(CartCheckout(lines=SingleProductCheckout(product_factory(1)).lines))

    assert result.success is False
    assert result.error == "Unexpected error occurred"


def test_summarize_matches_cart(checkout_service, cart_ledger, product_factory) -> None:
    cart_ledger.add_item(product_factory(1, price=10))

    summary = checkout_service.summarize(checkout_service.cart_checkout_request())

    assert summary.subtotal == pytest.approx(10)
    assert summary.total == pytest.approx(10 + 1.8 + 50)
