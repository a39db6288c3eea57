# src/cart_domain/domain/repositories/cart_repository.py
"""Cart repository interface."""
from abc import ABC, abstractmethod

from src.cart_domain.domain.entities.cart_line import CartLine
from src.common.dtos.storage_dtos import StorageResult


class ICartRepository(ABC):

    @abstractmethod
    def load_lines(self) -> list[CartLine]:
        """Reads the persisted cart. Never raises; unreadable data yields an empty list."""
        pass

    @abstractmethod
    def save_lines(self, lines: list[CartLine]) -> StorageResult:
        """Replaces the persisted cart with lines."""
        pass
