# src/storefront_domain/application/intent_dispatcher.py
"""Routes presentation intents to the service that owns the affected state."""

import logging
from typing import Any, Callable

from src.common.dtos.intent_dtos import (
    AddToCart,
    ChangeFilters,
    ChangeSort,
    ClearCart,
    ClearFilters,
    ClearSort,
    DecreaseCartQuantity,
    IncreaseCartQuantity,
    Intent,
    LoadNextPage,
    PlaceOrder,
    RefreshCatalog,
    RemoveFromCart,
    SearchCatalog,
    SetCartQuantity,
    ToggleFavorite,
)
from src.common.exceptions.custom_exceptions import ApplicationError
from src.storefront_domain.application.storefront_context import StorefrontContext

logger = logging.getLogger(__name__)


class IntentDispatcher:
    def __init__(self, context: StorefrontContext) -> None:
        self.context = context
        cart = context.cart_ledger
        favorites = context.favorites_set
        pager = context.catalog_pager

        self._handlers: dict[type, Callable[[Any], Any]] = {
            AddToCart: lambda i: cart.add_item(i.product),
            RemoveFromCart: lambda i: cart.remove_item(i.product_id),
            SetCartQuantity: lambda i: cart.set_quantity(i.product_id, i.quantity),
            IncreaseCartQuantity: lambda i: cart.increase_quantity(i.product_id),
            DecreaseCartQuantity: lambda i: cart.decrease_quantity(i.product_id),
            ClearCart: lambda i: cart.clear_cart(),
            ToggleFavorite: lambda i: favorites.toggle_favorite(i.product),
            SearchCatalog: lambda i: pager.search(i.query),
            RefreshCatalog: lambda i: pager.refresh(),
            LoadNextPage: lambda i: pager.load_next_page(),
            ChangeSort: lambda i: pager.change_sort(i.sort),
            ClearSort: lambda i: pager.clear_sort(),
            ChangeFilters: lambda i: pager.change_filters(i.filters),
            ClearFilters: lambda i: pager.clear_filters(),
            PlaceOrder: self._place_order,
        }

    def _place_order(self, intent: PlaceOrder) -> Any:
        if self.context.checkout_service is None:
            raise ApplicationError("Checkout is not configured for this storefront")
        return self.context.checkout_service.place_order(intent.request)

    def dispatch(self, intent: Intent) -> Any:
        """Runs the handler for intent and returns whatever the owning service returns."""
        handler = self._handlers.get(type(intent))
        if handler is None:
            raise ApplicationError(f"No handler registered for intent {type(intent).__name__}")
        logger.debug(f"Dispatching {intent!r}")
        return handler(intent)
