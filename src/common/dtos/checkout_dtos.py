"""Data Transfer Objects for orders and payment outcomes."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from src.cart_domain.domain.entities.cart_line import CartLine
from src.common.utils.date_utils import format_timestamp


@dataclass(frozen=True)
class OrderSummaryDTO:
    """Money breakdown shown on the cart and checkout screens."""

    subtotal: float
    tax: float
    shipping: float
    total: float


@dataclass(frozen=True)
class OrderDTO:
    order_id: str
    mode: str
    lines: tuple[CartLine, ...]
    summary: OrderSummaryDTO
    currency: str
    created_at: datetime

    @property
    def item_count(self) -> int:
        return sum(line.quantity for line in self.lines)

    def to_payload(self) -> dict[str, Any]:
        """Payment-gateway payload: the order id, slim item records and the amount to charge."""
        return {
            "orderId": self.order_id,
            "items": [
                {
                    "id": line.product.id,
                    "title": line.product.title,
                    "price": line.product.price,
                    "quantity": line.quantity,
                    "thumbnail": line.product.thumbnail_url,
                }
                for line in self.lines
            ],
            "amount": self.summary.total,
            "currency": self.currency,
            "createdAt": format_timestamp(self.created_at),
        }


@dataclass(frozen=True)
class PaymentResultDTO:
    success: bool
    order: OrderDTO
    message: str
    transaction_id: Optional[str] = None
    error: Optional[str] = None
    timestamp: Optional[datetime] = None
    details: dict[str, Any] = field(default_factory=dict)
