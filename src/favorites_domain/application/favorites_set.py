# src/favorites_domain/application/favorites_set.py
"""Application service owning the shopper's favorites list."""

import logging
from threading import RLock

from src.common.dtos.cart_dtos import FavoritesSnapshotDTO
from src.common.dtos.product_dtos import ProductDTO, ProductId
from src.common.utils.observable import ObservableState
from src.favorites_domain.domain.repositories.favorites_repository import IFavoritesRepository

logger = logging.getLogger(__name__)


class FavoritesSet(ObservableState[FavoritesSnapshotDTO]):
    """Ordered, id-unique list of favorite products. toggle_favorite is the only mutator."""

    def __init__(self, favorites_repo: IFavoritesRepository) -> None:
        super().__init__()
        self.favorites_repo = favorites_repo
        self._favorites: list[ProductDTO] = []
        self._lock = RLock()

    def load(self) -> FavoritesSnapshotDTO:
        """Seeds the set from storage."""
        with self._lock:
            self._favorites = list(self.favorites_repo.load_favorites())
        self._notify()
        return self.snapshot()

    def toggle_favorite(self, product: ProductDTO) -> tuple[ProductDTO, ...]:
        """Removes product when present, appends it otherwise, and returns the resulting list."""
        with self._lock:
            if self.is_favorite(product.id):
                self._favorites = [p for p in self._favorites if p.id != product.id]
                logger.debug(f"Removed product {product.id} from favorites")
            else:
                self._favorites = [*self._favorites, product]
                logger.debug(f"Added product {product.id} to favorites")

            result = self.favorites_repo.save_favorites(list(self._favorites))
            if not result.ok:
                logger.warning(f"Favorites could not be persisted under '{result.key}': {result.error}")
            self._notify()
            return tuple(self._favorites)

    def is_favorite(self, product_id: ProductId) -> bool:
        with self._lock:
            return any(p.id == product_id for p in self._favorites)

    @property
    def favorites(self) -> tuple[ProductDTO, ...]:
        with self._lock:
            return tuple(self._favorites)

    @property
    def count(self) -> int:
        with self._lock:
            return len(self._favorites)

    def snapshot(self) -> FavoritesSnapshotDTO:
        with self._lock:
            return FavoritesSnapshotDTO(favorites=tuple(self._favorites), count=len(self._favorites))
