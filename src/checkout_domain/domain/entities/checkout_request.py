"""Checkout request variants: buying one product directly or checking out the whole cart."""

from dataclasses import dataclass, field
from typing import ClassVar, Literal, Union

from src.cart_domain.domain.entities.cart_line import CartLine
from src.common.dtos.product_dtos import ProductDTO


@dataclass(frozen=True)
class SingleProductCheckout:
    """Buy-now flow from the product detail screen; always one unit."""

    mode: ClassVar[Literal["singleProduct"]] = "singleProduct"
    product: ProductDTO

    @property
    def lines(self) -> tuple[CartLine, ...]:
        return (CartLine(product=self.product, quantity=1),)


@dataclass(frozen=True)
class CartCheckout:
    """Checkout of every line currently in the cart."""

    mode: ClassVar[Literal["cart"]] = "cart"
    lines: tuple[CartLine, ...] = field(default_factory=tuple)


CheckoutRequest = Union[SingleProductCheckout, CartCheckout]
