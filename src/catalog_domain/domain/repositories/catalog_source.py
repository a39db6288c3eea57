# src/catalog_domain/domain/repositories/catalog_source.py
"""Remote catalog source interface."""
from abc import ABC, abstractmethod

from src.common.dtos.product_dtos import CatalogPageDTO


class ICatalogSource(ABC):

    @abstractmethod
    def search(self, query: str | None, limit: int, offset: int) -> CatalogPageDTO:
        """
        Returns one page of products. A blank query lists the catalog.
        No matches yield an empty page with total 0; transport failures raise APIError.
        """
        pass
