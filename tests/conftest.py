# tests/conftest.py
import json
from typing import Optional
from unittest.mock import Mock

import pytest

from src.cart_domain.application.cart_ledger import CartLedger
from src.cart_domain.infrastructure.persistence.key_value_cart_repository import KeyValueCartRepository
from src.catalog_domain.application.catalog_pager import CatalogPager
from src.catalog_domain.domain.repositories.catalog_source import ICatalogSource
from src.common.config.settings import settings
from src.common.dtos.product_dtos import CatalogPageDTO, ProductDTO
from src.common.exceptions.custom_exceptions import StorageError
from src.favorites_domain.application.favorites_set import FavoritesSet
from src.favorites_domain.infrastructure.persistence.key_value_favorites_repository import (
    KeyValueFavoritesRepository,
)
from src.storage_domain.domain.repositories.key_value_store import IKeyValueStore


class FakeKeyValueStore(IKeyValueStore):
    """Dictionary-backed store that can be told to fail reads or writes."""

    def __init__(self, initial: Optional[dict[str, str]] = None) -> None:
        self.data: dict[str, str] = dict(initial or {})
        self.fail_reads = False
        self.fail_writes = False
        self.writes: list[tuple[str, str]] = []

    def get(self, key: str) -> Optional[str]:
        if self.fail_reads:
            raise StorageError(f"read of {key} failed")
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        if self.fail_writes:
            raise StorageError(f"write of {key} failed")
        self.writes.append((key, value))
        self.data[key] = value

    def stored_json(self, key: str):
        return json.loads(self.data[key])


def make_product(product_id, price: float = 100.0, title: str | None = None, **kwargs) -> ProductDTO:
    """Builds a ProductDTO with sensible defaults for tests."""
    return ProductDTO(
        id=product_id,
        title=title if title is not None else f"Product {product_id}",
        price=price,
        category=kwargs.pop("category", "beauty"),
        **kwargs,
    )


@pytest.fixture(autouse=True)
def mock_settings_storefront(mocker) -> None:
    """Pins the settings the services read so tests do not depend on a local .env file."""
    mocker.patch.object(settings, "CATALOG_PAGE_SIZE", 12)
    mocker.patch.object(settings, "CART_STORAGE_KEY", "cart_items_v1")
    mocker.patch.object(settings, "FAVORITES_STORAGE_KEY", "FAVORITES")
    mocker.patch.object(settings, "CHECKOUT_TAX_RATE", 0.18)
    mocker.patch.object(settings, "CHECKOUT_SHIPPING_FEE", 50.0)
    mocker.patch.object(settings, "CHECKOUT_CURRENCY", "INR")


@pytest.fixture
def product_factory():
    """Factory fixture exposing make_product to test modules."""
    return make_product


@pytest.fixture
def fake_store() -> FakeKeyValueStore:
    return FakeKeyValueStore()


@pytest.fixture
def cart_ledger(fake_store) -> CartLedger:
    """CartLedger over a real repository and the fake store."""
    return CartLedger(cart_repo=KeyValueCartRepository(fake_store))


@pytest.fixture
def favorites_set(fake_store) -> FavoritesSet:
    return FavoritesSet(favorites_repo=KeyValueFavoritesRepository(fake_store))


@pytest.fixture
def mock_catalog_source() -> Mock:
    """Mock for the remote catalog source."""
    return Mock(spec=ICatalogSource)


@pytest.fixture
def catalog_pager(mock_catalog_source) -> CatalogPager:
    return CatalogPager(catalog_source=mock_catalog_source)


@pytest.fixture
def sample_products_page_0() -> list[ProductDTO]:
    """Twelve products priced 50, 100, ..., 600."""
    return [make_product(i, price=50.0 * i, rating=3.0 + (i % 3)) for i in range(1, 13)]


@pytest.fixture
def sample_products_page_1() -> list[ProductDTO]:
    return [make_product(i, price=50.0 * i) for i in range(13, 25)]


@pytest.fixture
def sample_page_0(sample_products_page_0) -> CatalogPageDTO:
    return CatalogPageDTO(items=sample_products_page_0, total=50, offset=0, limit=12)


@pytest.fixture
def sample_page_1(sample_products_page_1) -> CatalogPageDTO:
    return CatalogPageDTO(items=sample_products_page_1, total=50, offset=12, limit=12)
