"""Data Transfer Objects for cart and favorites state."""

from dataclasses import dataclass, field

from src.cart_domain.domain.entities.cart_line import CartLine
from src.common.dtos.product_dtos import ProductDTO


@dataclass(frozen=True)
class CartSnapshotDTO:
    """Read-only view of the cart handed to the presentation layer."""

    lines: tuple[CartLine, ...] = field(default_factory=tuple)
    total_item_count: int = 0
    subtotal: float = 0.0


@dataclass(frozen=True)
class FavoritesSnapshotDTO:
    """Read-only view of the favorites list."""

    favorites: tuple[ProductDTO, ...] = field(default_factory=tuple)
    count: int = 0
