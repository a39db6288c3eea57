# src/checkout_domain/application/checkout_service.py
"""Application service for turning a checkout request into a paid (or declined) order."""

import logging

from src.cart_domain.application.cart_ledger import CartLedger
from src.checkout_domain.domain.entities.checkout_request import CartCheckout, CheckoutRequest
from src.checkout_domain.domain.repositories.payment_gateway import IPaymentGateway
from src.checkout_domain.domain.services.order_pricing_service import OrderPricingService, generate_order_id
from src.common.config.settings import settings
from src.common.dtos.checkout_dtos import OrderDTO, OrderSummaryDTO, PaymentResultDTO
from src.common.exceptions.custom_exceptions import CheckoutError
from src.common.utils.date_utils import utc_now

logger = logging.getLogger(__name__)


class CheckoutApplicationService:
    """Builds orders from checkout requests and hands them to the payment gateway."""

    def __init__(
        self,
        cart_ledger: CartLedger,
        payment_gateway: IPaymentGateway,
        pricing_service: OrderPricingService | None = None,
    ) -> None:
        """Initializes the CheckoutApplicationService."""
        self.cart_ledger = cart_ledger
        self.payment_gateway = payment_gateway
        self.pricing_service = pricing_service or OrderPricingService()

    def cart_checkout_request(self) -> CartCheckout:
        """Captures the current cart contents as a checkout request."""
        return CartCheckout(lines=self.cart_ledger.lines)

    def summarize(self, request: CheckoutRequest) -> OrderSummaryDTO:
        return self.pricing_service.price(request.lines)

    def build_order(self, request: CheckoutRequest) -> OrderDTO:
        """Prices the request and stamps it with a fresh order id."""
        lines = tuple(request.lines)
        if not lines:
            raise CheckoutError("Cannot check out an empty cart")

        return OrderDTO(
            order_id=generate_order_id(),
            mode=request.mode,
            lines=lines,
            summary=self.pricing_service.price(lines),
            currency=settings.CHECKOUT_CURRENCY,
            created_at=utc_now(),
        )

    def place_order(self, request: CheckoutRequest) -> PaymentResultDTO:
        """
        Charges the order through the payment gateway.

        A gateway exception becomes a failed result rather than propagating. The cart is
        cleared only when a cart checkout was paid successfully.
        """
        order = self.build_order(request)
        logger.info(f"Placing order {order.order_id}: {order.item_count} item(s), total {order.summary.total}")

        try:
            result = self.payment_gateway.process_payment(order)
        except Exception as e:
            logger.error(f"Payment for order {order.order_id} raised an unexpected error: {e}")
            return PaymentResultDTO(
                success=False,
                order=order,
                message="Something went wrong. Please try again.",
                error="Unexpected error occurred",
                timestamp=utc_now(),
            )

        if result.success:
            logger.info(f"Order {order.order_id} paid, transaction {result.transaction_id}")
            if isinstance(request, CartCheckout):
                self.cart_ledger.clear_cart()
        else:
            logger.warning(f"Payment for order {order.order_id} declined: {result.error or result.message}")
        return result
