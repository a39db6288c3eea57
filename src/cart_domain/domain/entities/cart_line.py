"""Cart line entity."""

from dataclasses import dataclass, replace
from typing import Any

from src.common.dtos.product_dtos import ProductDTO


@dataclass(frozen=True)
class CartLine:
    """One product in the cart together with how many units the shopper wants."""

    product: ProductDTO
    quantity: int = 1

    def __post_init__(self) -> None:
        if self.quantity < 1:
            raise ValueError("Quantity must be at least 1.")

    @property
    def product_id(self):
        return self.product.id

    @property
    def subtotal(self) -> float:
        return self.product.price * self.quantity

    def with_quantity(self, quantity: int) -> "CartLine":
        return replace(self, quantity=quantity)

    def to_dict(self) -> dict[str, Any]:
        """Flattened storage record: the product fields plus a quantity key."""
        return {**self.product.to_dict(), "quantity": self.quantity}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CartLine":
        return cls(product=ProductDTO.from_api_response(data), quantity=int(data.get("quantity", 1)))
