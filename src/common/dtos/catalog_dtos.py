"""Data Transfer Objects for the catalog list state."""

from dataclasses import dataclass, field
from typing import Optional

from src.catalog_domain.domain.entities.catalog_filters import CatalogFilters, SortOption
from src.common.dtos.product_dtos import ProductDTO


@dataclass(frozen=True)
class CatalogSnapshotDTO:
    """What the product list screen renders: filtered, sorted items plus paging status."""

    items: tuple[ProductDTO, ...] = field(default_factory=tuple)
    total_available: int = 0
    loaded_count: int = 0  # unfiltered items paged in so far
    page: int = 0
    query: str = ""
    sort: SortOption = SortOption.DEFAULT
    filters: CatalogFilters = field(default_factory=CatalogFilters)
    loading: bool = False
    loading_more: bool = False
    error: Optional[str] = None

    @property
    def has_more(self) -> bool:
        return self.loaded_count < self.total_available
