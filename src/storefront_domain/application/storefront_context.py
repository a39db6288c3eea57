# src/storefront_domain/application/storefront_context.py
"""The set of storefront services created once at start-up and passed to the presentation layer."""

from dataclasses import dataclass
from typing import Optional

from src.cart_domain.application.cart_ledger import CartLedger
from src.catalog_domain.application.catalog_pager import CatalogPager
from src.checkout_domain.application.checkout_service import CheckoutApplicationService
from src.favorites_domain.application.favorites_set import FavoritesSet


@dataclass
class StorefrontContext:
    cart_ledger: CartLedger
    favorites_set: FavoritesSet
    catalog_pager: CatalogPager
    checkout_service: Optional[CheckoutApplicationService] = None

    def load(self) -> None:
        """Seeds cart and favorites from storage and fetches the first catalog page."""
        self.cart_ledger.load()
        self.favorites_set.load()
        self.catalog_pager.load_page(0, False, "")
