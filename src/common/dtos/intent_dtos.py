"""Typed intents the presentation layer dispatches to the storefront services."""

from dataclasses import dataclass
from typing import Union

from src.catalog_domain.domain.entities.catalog_filters import CatalogFilters, SortOption
from src.checkout_domain.domain.entities.checkout_request import CheckoutRequest
from src.common.dtos.product_dtos import ProductDTO, ProductId


@dataclass(frozen=True)
class AddToCart:
    product: ProductDTO


@dataclass(frozen=True)
class RemoveFromCart:
    product_id: ProductId


@dataclass(frozen=True)
class SetCartQuantity:
    product_id: ProductId
    quantity: int


@dataclass(frozen=True)
class IncreaseCartQuantity:
    product_id: ProductId


@dataclass(frozen=True)
class DecreaseCartQuantity:
    product_id: ProductId


@dataclass(frozen=True)
class ClearCart:
    pass


@dataclass(frozen=True)
class ToggleFavorite:
    product: ProductDTO


@dataclass(frozen=True)
class SearchCatalog:
    query: str = ""


@dataclass(frozen=True)
class RefreshCatalog:
    pass


@dataclass(frozen=True)
class LoadNextPage:
    pass


@dataclass(frozen=True)
class ChangeSort:
    sort: SortOption


@dataclass(frozen=True)
class ClearSort:
    pass


@dataclass(frozen=True)
class ChangeFilters:
    filters: CatalogFilters


@dataclass(frozen=True)
class ClearFilters:
    pass


@dataclass(frozen=True)
class PlaceOrder:
    request: CheckoutRequest


Intent = Union[
    AddToCart,
    RemoveFromCart,
    SetCartQuantity,
    IncreaseCartQuantity,
    DecreaseCartQuantity,
    ClearCart,
    ToggleFavorite,
    SearchCatalog,
    RefreshCatalog,
    LoadNextPage,
    ChangeSort,
    ClearSort,
    ChangeFilters,
    ClearFilters,
    PlaceOrder,
]
