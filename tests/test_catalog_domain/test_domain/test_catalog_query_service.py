"""Tests for the catalog filter and sort rules."""

from src.catalog_domain.domain.entities.catalog_filters import CatalogFilters, SortOption
from src.catalog_domain.domain.services.catalog_query_service import apply_filters, apply_sort, merge_pages


def test_price_range_filter_is_inclusive(product_factory) -> None:
    products = [product_factory(i, price=p) for i, p in enumerate([50, 100, 150, 200, 250], start=1)]

    result = apply_filters(products, CatalogFilters(price_min=100, price_max=200))

    assert [p.price for p in result] == [100, 150, 200]


def test_rating_filter_uses_stored_rating(product_factory) -> None:
    products = [
        product_factory(1, rating=4.8),
        product_factory(2, rating=3.9),
        product_factory(3),  # no rating
        product_factory(4, rating=4.0),
    ]

    result = apply_filters(products, CatalogFilters(min_rating=4))

    assert [p.id for p in result] == [1, 4]


def test_category_filter(product_factory) -> None:
    products = [product_factory(1, category="laptops"), product_factory(2, category="beauty")]

    assert [p.id for p in apply_filters(products, CatalogFilters(category="laptops"))] == [1]


def test_no_filters_returns_copy(product_factory) -> None:
    products = [product_factory(1), product_factory(2)]

    result = apply_filters(products, CatalogFilters())

    assert result == products
    assert result is not products


def test_active_count_counts_price_range_once() -> None:
    assert CatalogFilters().active_count == 0
    assert CatalogFilters(price_min=1, price_max=5).active_count == 1
    assert CatalogFilters(price_max=5, min_rating=4, category="x").active_count == 3


def test_price_sorts_are_stable(product_factory) -> None:
    products = [
        product_factory(1, price=20),
        product_factory(2, price=10),
        product_factory(3, price=20),
        product_factory(4, price=10),
    ]

    assert [p.id for p in apply_sort(products, SortOption.PRICE_ASC)] == [2, 4, 1, 3]
    assert [p.id for p in apply_sort(products, SortOption.PRICE_DESC)] == [1, 3, 2, 4]


def test_alpha_sort_is_case_sensitive_and_stable(product_factory) -> None:
    products = [
        product_factory(1, title="banana"),
        product_factory(2, title="Apple"),
        product_factory(3, title="apple"),
        product_factory(4, title="Apple"),
    ]

    assert [p.id for p in apply_sort(products, SortOption.ALPHA)] == [2, 4, 3, 1]


def test_default_sort_keeps_fetch_order(product_factory) -> None:
    products = [product_factory(3), product_factory(1), product_factory(2)]

    assert apply_sort(products, SortOption.DEFAULT) == products


def test_merge_pages_appends_and_skips_known_ids(product_factory) -> None:
    existing = [product_factory(1), product_factory(2)]
    incoming = [product_factory(2), product_factory(3)]

    assert [p.id for p in merge_pages(existing, incoming)] == [1, 2, 3]
