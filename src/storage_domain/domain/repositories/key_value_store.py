# src/storage_domain/domain/repositories/key_value_store.py
"""Local key/value store interface shared by the cart and favorites repositories."""
from abc import ABC, abstractmethod
from typing import Optional


class IKeyValueStore(ABC):

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Returns the string stored under key, or None when nothing is stored."""
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Replaces the whole value stored under key. Raises StorageError on failure."""
        pass
