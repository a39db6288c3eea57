# src/cart_domain/application/cart_ledger.py
"""Application service owning the shopper's cart."""

import logging
from threading import RLock

from src.cart_domain.domain.entities.cart_line import CartLine
from src.cart_domain.domain.repositories.cart_repository import ICartRepository
from src.common.dtos.cart_dtos import CartSnapshotDTO
from src.common.dtos.product_dtos import ProductDTO, ProductId
from src.common.utils.observable import ObservableState

logger = logging.getLogger(__name__)


class CartLedger(ObservableState[CartSnapshotDTO]):
    """
    Authoritative in-memory list of cart lines, one per product id.

    Every state-changing operation rewrites the whole ledger through the repository.
    A failed write is logged and otherwise ignored: the in-memory ledger stays the
    source of truth for the running session.
    """

    def __init__(self, cart_repo: ICartRepository) -> None:
        """Initializes the CartLedger with an empty ledger; call load() to seed it from storage."""
        super().__init__()
        self.cart_repo = cart_repo
        self._lines: list[CartLine] = []
        self._lock = RLock()

    def load(self) -> CartSnapshotDTO:
        """Seeds the ledger from storage. Unreadable storage leaves the cart empty."""
        with self._lock:
            self._lines = list(self.cart_repo.load_lines())
        self._notify()
        return self.snapshot()

    def _index_of(self, product_id: ProductId) -> int | None:
        for position, line in enumerate(self._lines):
            if line.product_id == product_id:
                return position
        return None

    def _commit(self) -> None:
        """Persists the full ledger and notifies listeners."""
        result = self.cart_repo.save_lines(list(self._lines))
        if not result.ok:
            logger.warning(f"Cart could not be persisted under '{result.key}': {result.error}")
        self._notify()

    def add_item(self, product: ProductDTO) -> bool:
        """Adds one unit of product, creating its line on first add."""
        with self._lock:
            position = self._index_of(product.id)
            if position is None:
                self._lines.append(CartLine(product=product, quantity=1))
            else:
                line = self._lines[position]
                self._lines[position] = line.with_quantity(line.quantity + 1)
            self._commit()
        logger.debug(f"Added product {product.id} to cart")
        return True

    def remove_item(self, product_id: ProductId) -> None:
        """Deletes the line for product_id. Unknown ids are ignored."""
        with self._lock:
            position = self._index_of(product_id)
            if position is None:
                return
            del self._lines[position]
            self._commit()

    def set_quantity(self, product_id: ProductId, quantity: int) -> None:
        """Replaces the quantity of an existing line; a non-positive quantity removes it."""
        with self._lock:
            if quantity <= 0:
                self.remove_item(product_id)
                return
            position = self._index_of(product_id)
            if position is None:
                return
            if self._lines[position].quantity == quantity:
                return
            self._lines[position] = self._lines[position].with_quantity(quantity)
            self._commit()

    def increase_quantity(self, product_id: ProductId) -> None:
        with self._lock:
            position = self._index_of(product_id)
            if position is None:
                return
            line = self._lines[position]
            self._lines[position] = line.with_quantity(line.quantity + 1)
            self._commit()

    def decrease_quantity(self, product_id: ProductId) -> None:
        """Takes one unit away; the last unit removes the line."""
        with self._lock:
            position = self._index_of(product_id)
            if position is None:
                return
            line = self._lines[position]
            if line.quantity > 1:
                self._lines[position] = line.with_quantity(line.quantity - 1)
            else:
                del self._lines[position]
            self._commit()

    def get_item_quantity(self, product_id: ProductId) -> int:
        with self._lock:
            position = self._index_of(product_id)
            return self._lines[position].quantity if position is not None else 0

    def is_in_cart(self, product_id: ProductId) -> bool:
        with self._lock:
            return self._index_of(product_id) is not None

    def clear_cart(self) -> None:
        with self._lock:
            self._lines = []
            self._commit()
        logger.info("Cart cleared")

    @property
    def lines(self) -> tuple[CartLine, ...]:
        with self._lock:
            return tuple(self._lines)

    @property
    def total_item_count(self) -> int:
        with self._lock:
            return sum(line.quantity for line in self._lines)

    @property
    def subtotal(self) -> float:
        with self._lock:
            return sum(line.subtotal for line in self._lines)

    def snapshot(self) -> CartSnapshotDTO:
        with self._lock:
            return CartSnapshotDTO(
                lines=tuple(self._lines), total_item_count=self.total_item_count, subtotal=self.subtotal
            )
