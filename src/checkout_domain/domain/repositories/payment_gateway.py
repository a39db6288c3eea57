# src/checkout_domain/domain/repositories/payment_gateway.py
"""Payment gateway interface."""
from abc import ABC, abstractmethod

from src.common.dtos.checkout_dtos import OrderDTO, PaymentResultDTO


class IPaymentGateway(ABC):

    @abstractmethod
    def process_payment(self, order: OrderDTO) -> PaymentResultDTO:
        """Charges the order total and reports whether the payment went through."""
        pass
