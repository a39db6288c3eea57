# src/catalog_domain/domain/services/catalog_query_service.py
"""Pure filter and sort rules for product lists."""

from src.catalog_domain.domain.entities.catalog_filters import CatalogFilters, SortOption
from src.common.dtos.product_dtos import ProductDTO


def apply_filters(products: list[ProductDTO], filters: CatalogFilters) -> list[ProductDTO]:
    """Keeps the products matching every active filter, preserving order."""
    filtered = list(products)

    if filters.price_min is not None:
        filtered = [p for p in filtered if p.price >= filters.price_min]
    if filters.price_max is not None:
        filtered = [p for p in filtered if p.price <= filters.price_max]

    # Products without a rating cannot satisfy a rating threshold
    if filters.min_rating is not None:
        filtered = [p for p in filtered if p.rating is not None and p.rating >= filters.min_rating]

    if filters.category is not None:
        filtered = [p for p in filtered if p.category == filters.category]

    return filtered


def apply_sort(products: list[ProductDTO], sort: SortOption) -> list[ProductDTO]:
    """Returns a sorted copy. sorted() is stable, so ties keep their incoming order."""
    if sort == SortOption.PRICE_ASC:
        return sorted(products, key=lambda p: p.price)
    if sort == SortOption.PRICE_DESC:
        return sorted(products, key=lambda p: p.price, reverse=True)
    if sort == SortOption.ALPHA:
        return sorted(products, key=lambda p: p.title)
    return list(products)


def merge_pages(existing: list[ProductDTO], incoming: list[ProductDTO]) -> list[ProductDTO]:
    """Appends incoming after existing, skipping ids that are already loaded."""
    seen_ids = {p.id for p in existing}
    merged = list(existing)
    for product in incoming:
        if product.id in seen_ids:
            continue
        seen_ids.add(product.id)
        merged.append(product)
    return merged
