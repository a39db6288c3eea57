# src/favorites_domain/domain/repositories/favorites_repository.py
"""Favorites repository interface."""
from abc import ABC, abstractmethod

from src.common.dtos.product_dtos import ProductDTO
from src.common.dtos.storage_dtos import StorageResult


class IFavoritesRepository(ABC):

    @abstractmethod
    def load_favorites(self) -> list[ProductDTO]:
        """Reads the persisted favorites. Never raises; unreadable data yields an empty list."""
        pass

    @abstractmethod
    def save_favorites(self, favorites: list[ProductDTO]) -> StorageResult:
        """Replaces the persisted favorites."""
        pass
