# src/checkout_domain/domain/services/order_pricing_service.py
"""Domain service computing order totals."""

import random

from src.cart_domain.domain.entities.cart_line import CartLine
from src.common.config.settings import settings
from src.common.dtos.checkout_dtos import OrderSummaryDTO
from src.common.utils.date_utils import epoch_millis, utc_now


class OrderPricingService:
    def __init__(self, tax_rate: float | None = None, shipping_fee: float | None = None) -> None:
        self.tax_rate = settings.CHECKOUT_TAX_RATE if tax_rate is None else tax_rate
        self.shipping_fee = settings.CHECKOUT_SHIPPING_FEE if shipping_fee is None else shipping_fee

    def price(self, lines: list[CartLine] | tuple[CartLine, ...]) -> OrderSummaryDTO:
        """Subtotal plus tax, plus flat shipping for any non-empty order."""
        subtotal = sum(line.subtotal for line in lines)
        tax = subtotal * self.tax_rate
        shipping = self.shipping_fee if lines else 0.0
        return OrderSummaryDTO(
            subtotal=round(subtotal, 2),
            tax=round(tax, 2),
            shipping=round(shipping, 2),
            total=round(subtotal + tax + shipping, 2),
        )


def generate_order_id() -> str:
    """ORD + epoch milliseconds + a random 0..9999 suffix."""
    return f"ORD{epoch_millis(utc_now())}{random.randint(0, 9999)}"
