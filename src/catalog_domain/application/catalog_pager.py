# src/catalog_domain/application/catalog_pager.py
"""Application service that pages the remote catalog into one filtered, sorted product list."""

import concurrent.futures
import logging
from threading import RLock

from src.catalog_domain.domain.entities.catalog_filters import CatalogFilters, SortOption
from src.catalog_domain.domain.repositories.catalog_source import ICatalogSource
from src.catalog_domain.domain.services.catalog_query_service import apply_filters, apply_sort, merge_pages
from src.common.config.settings import settings
from src.common.dtos.catalog_dtos import CatalogSnapshotDTO
from src.common.dtos.product_dtos import ProductDTO
from src.common.exceptions.custom_exceptions import APIError
from src.common.utils.observable import ObservableState

logger = logging.getLogger(__name__)

LOAD_FAILED_MESSAGE = "Failed to load products"


class CatalogPager(ObservableState[CatalogSnapshotDTO]):
    """
    Owns the product list state.

    Raw pages are kept in arrival order; the visible items are always derived from
    them by applying the active filters and then the active sort, so changing the sort
    never loses the original order. Every load takes a generation number, and a response
    that finishes after a newer replacing load (search, refresh, filter change) was
    started is dropped instead of overwriting the newer list.
    """

    def __init__(self, catalog_source: ICatalogSource, page_size: int | None = None) -> None:
        super().__init__()
        self.catalog_source = catalog_source
        self.page_size = page_size or settings.CATALOG_PAGE_SIZE
        if self.page_size <= 0:
            raise ValueError("Page size must be positive.")

        self._raw_items: list[ProductDTO] = []
        self._items: list[ProductDTO] = []
        self._total_available = 0
        self._page = 0
        self._query = ""
        self._sort = SortOption.DEFAULT
        self._filters = CatalogFilters()
        self._loading = False
        self._loading_more = False
        self._error: str | None = None

        self._generation = 0
        self._replace_generation = 0
        self._lock = RLock()
        self._executor: concurrent.futures.ThreadPoolExecutor | None = None

    def _derive_items(self) -> None:
        self._items = apply_sort(apply_filters(self._raw_items, self._filters), self._sort)

    def load_page(self, page_index: int = 0, append: bool = False, query: str = "") -> CatalogSnapshotDTO:
        """
        Fetches page_index and either appends it to the loaded pages or replaces them.
        On failure the previously loaded list is kept and an error message is set.
        """
        query = query or ""
        with self._lock:
            self._generation += 1
            generation = self._generation
            if not append:
                self._replace_generation = generation
            if page_index == 0:
                self._loading = True
                self._error = None
            else:
                self._loading_more = True
        self._notify()

        offset = page_index * self.page_size
        try:
            page = self.catalog_source.search(query, self.page_size, offset)
            with self._lock:
                if generation < self._replace_generation:
                    logger.info(f"Discarding stale page {page_index} for query '{query}' (generation {generation})")
                else:
                    raw_items = merge_pages(self._raw_items, page.items) if append else list(page.items)
                    items = apply_sort(apply_filters(raw_items, self._filters), self._sort)
                    self._raw_items = raw_items
                    self._items = items
                    self._total_available = page.total
                    self._page = page_index
                    self._query = query
                    self._error = None
                    logger.info(
                        f"Products loaded: {len(items)} visible of {len(raw_items)} loaded, total {page.total}"
                    )
        except APIError as e:
            self._fail(generation, f"Loading page {page_index} for query '{query}' failed: {e}")
        except Exception as e:
            self._fail(
                generation,
                f"Unexpected error loading page {page_index} for query '{query}': {type(e).__name__}: {e}",
            )
        finally:
            with self._lock:
                self._finish(generation)
        self._notify()
        return self.snapshot()

    def _fail(self, generation: int, log_message: str) -> None:
        """Keeps the loaded list and reports the generic failure unless a newer replacing load owns the state."""
        with self._lock:
            if generation >= self._replace_generation:
                logger.error(log_message)
                self._error = LOAD_FAILED_MESSAGE

    def _finish(self, generation: int) -> None:
        if generation == self._generation:
            self._loading = False
            self._loading_more = False

    def load_page_async(
        self, page_index: int = 0, append: bool = False, query: str = ""
    ) -> "concurrent.futures.Future[CatalogSnapshotDTO]":
        """Runs load_page on a worker thread so the caller is not blocked by the network."""
        with self._lock:
            if self._executor is None:
                self._executor = concurrent.futures.ThreadPoolExecutor(
                    max_workers=2, thread_name_prefix="catalog-pager"
                )
            executor = self._executor
        return executor.submit(self.load_page, page_index, append, query)

    def refresh(self) -> CatalogSnapshotDTO:
        """Pull-to-refresh: reloads the first page of the current query."""
        return self.load_page(0, False, self._query)

    def search(self, query: str) -> CatalogSnapshotDTO:
        return self.load_page(0, False, query)

    def load_next_page(self) -> CatalogSnapshotDTO:
        """Appends the next page when more products exist and nothing is loading."""
        with self._lock:
            if self._loading or self._loading_more or len(self._raw_items) >= self._total_available:
                return self.snapshot()
            next_page = self._page + 1
            query = self._query
        return self.load_page(next_page, True, query)

    def change_sort(self, next_sort: SortOption | str) -> CatalogSnapshotDTO:
        """Selecting the active sort again turns sorting off. No refetch happens."""
        next_sort = SortOption(next_sort)
        with self._lock:
            self._sort = SortOption.DEFAULT if self._sort == next_sort else next_sort
            self._derive_items()
        self._notify()
        return self.snapshot()

    def clear_sort(self) -> CatalogSnapshotDTO:
        with self._lock:
            self._sort = SortOption.DEFAULT
            self._derive_items()
        self._notify()
        return self.snapshot()

    def change_filters(self, filters: CatalogFilters) -> CatalogSnapshotDTO:
        """New filters start over from the first page of the current query."""
        with self._lock:
            if filters == self._filters:
                return self.snapshot()
            self._filters = filters
            query = self._query
        return self.load_page(0, False, query)

    def clear_filters(self) -> CatalogSnapshotDTO:
        return self.change_filters(CatalogFilters())

    @property
    def items(self) -> tuple[ProductDTO, ...]:
        return tuple(self._items)

    @property
    def total_available(self) -> int:
        return self._total_available

    @property
    def has_more(self) -> bool:
        return len(self._raw_items) < self._total_available

    def snapshot(self) -> CatalogSnapshotDTO:
        with self._lock:
            return CatalogSnapshotDTO(
                items=tuple(self._items),
                total_available=self._total_available,
                loaded_count=len(self._raw_items),
                page=self._page,
                query=self._query,
                sort=self._sort,
                filters=self._filters,
                loading=self._loading,
                loading_more=self._loading_more,
                error=self._error,
            )

    def shutdown(self) -> None:
        """Stops the background worker pool, waiting for running loads."""
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None
