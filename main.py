"""Main application entry point for the storefront core."""

import logging

from src.cart_domain.application.cart_ledger import CartLedger
from src.cart_domain.infrastructure.persistence.key_value_cart_repository import KeyValueCartRepository
from src.catalog_domain.application.catalog_pager import CatalogPager
from src.catalog_domain.infrastructure.api_clients.dummyjson_api_client import DummyJsonCatalogApiClient
from src.checkout_domain.application.checkout_service import CheckoutApplicationService
from src.checkout_domain.domain.repositories.payment_gateway import IPaymentGateway
from src.common.config.settings import settings
from src.common.dtos.intent_dtos import SearchCatalog
from src.common.exceptions.custom_exceptions import ApplicationError, DatabaseError
from src.common.logger_config import setup_logging
from src.favorites_domain.application.favorites_set import FavoritesSet
from src.favorites_domain.infrastructure.persistence.key_value_favorites_repository import (
    KeyValueFavoritesRepository,
)
from src.storage_domain.domain.repositories.key_value_store import IKeyValueStore
from src.storage_domain.infrastructure.persistence.json_file_key_value_store import JsonFileKeyValueStore
from src.storage_domain.infrastructure.persistence.mysql_key_value_store import MySQLKeyValueStore
from src.storefront_domain.application.intent_dispatcher import IntentDispatcher
from src.storefront_domain.application.storefront_context import StorefrontContext

logger = logging.getLogger(__name__)


def setup_key_value_store() -> IKeyValueStore:
    """Creates the configured local store; MySQL gets its table created on the way."""
    if settings.STORAGE_BACKEND.lower() == "mysql":
        store = MySQLKeyValueStore()
        store.create_tables()
        return store
    return JsonFileKeyValueStore(settings.STORAGE_FILE_PATH)


def setup_storefront_dependencies(
    store: IKeyValueStore | None = None, payment_gateway: IPaymentGateway | None = None
) -> StorefrontContext:
    """Initializes and wires up the storefront services."""
    store = store or setup_key_value_store()

    cart_ledger = CartLedger(cart_repo=KeyValueCartRepository(store))
    favorites_set = FavoritesSet(favorites_repo=KeyValueFavoritesRepository(store))
    catalog_pager = CatalogPager(catalog_source=DummyJsonCatalogApiClient())
    checkout_service = (
        CheckoutApplicationService(cart_ledger=cart_ledger, payment_gateway=payment_gateway)
        if payment_gateway is not None
        else None
    )
    return StorefrontContext(
        cart_ledger=cart_ledger,
        favorites_set=favorites_set,
        catalog_pager=catalog_pager,
        checkout_service=checkout_service,
    )


def run_storefront_session() -> None:
    """Loads persisted state and the first catalog page, then prints a short overview."""
    try:
        context = setup_storefront_dependencies()
    except DatabaseError as e:
        logger.error(f"Could not open the storefront storage: {e}")
        return

    dispatcher = IntentDispatcher(context)

    try:
        context.cart_ledger.load()
        context.favorites_set.load()
        catalog = dispatcher.dispatch(SearchCatalog(query=""))
        if catalog.error:
            logger.error(catalog.error)
            return

        print(f"\n--- Catalog: {len(catalog.items)} of {catalog.total_available} products ---")
        for product in catalog.items[:5]:
            print(f"  #{product.id} {product.title} ({product.category}) - {product.price:.2f}")
        if len(catalog.items) > 5:
            print(f"  ... and {len(catalog.items) - 5} more loaded.")

        cart = context.cart_ledger.snapshot()
        favorites = context.favorites_set.snapshot()
        print(f"Cart: {cart.total_item_count} item(s), subtotal {cart.subtotal:.2f}")
        print(f"Favorites: {favorites.count}")
    except ApplicationError as e:
        logger.error(f"An error occurred during the storefront session: {e}")
    finally:
        context.catalog_pager.shutdown()


if __name__ == "__main__":
    setup_logging()
    run_storefront_session()
