"""Catalog filter and sort value objects."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class SortOption(str, Enum):
    DEFAULT = "default"  # fetch order
    PRICE_ASC = "price_asc"
    PRICE_DESC = "price_desc"
    ALPHA = "alpha"


@dataclass(frozen=True)  # Value objects are immutable
class CatalogFilters:
    """Client-side filters applied to whatever has been paged in."""

    price_min: Optional[float] = None
    price_max: Optional[float] = None
    min_rating: Optional[float] = None
    category: Optional[str] = None

    @property
    def has_price_range(self) -> bool:
        return self.price_min is not None or self.price_max is not None

    @property
    def active_count(self) -> int:
        """Number of active filter groups; both price bounds count as one."""
        return sum([self.has_price_range, self.min_rating is not None, self.category is not None])
