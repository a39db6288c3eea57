"""Client for the dummyjson products API."""

import json
import logging

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from src.catalog_domain.domain.repositories.catalog_source import ICatalogSource
from src.common.config.settings import settings
from src.common.dtos.product_dtos import CatalogPageDTO, ProductDTO
from src.common.exceptions.custom_exceptions import APIError
from src.common.utils.error_handler import handle_error

logger = logging.getLogger(__name__)


class DummyJsonCatalogApiClient(ICatalogSource):
    def __init__(self) -> None:
        self.base_url = settings.CATALOG_API_BASE_URL.rstrip("/")
        self.timeout = settings.CATALOG_API_TIMEOUT

        # Configure session with connection pooling and retry strategy
        self.session = requests.Session()
        retry_strategy = Retry(
            total=3,
            status_forcelist=[429, 500, 502, 503, 504],
            allowed_methods=["HEAD", "GET", "OPTIONS"],
            backoff_factor=1,
        )
        adapter = HTTPAdapter(max_retries=retry_strategy, pool_connections=4, pool_maxsize=4)
        self.session.mount("http://", adapter)
        self.session.mount("https://", adapter)

    def search(self, query: str | None, limit: int, offset: int) -> CatalogPageDTO:
        """
        Fetches one page of products.
        Non-blank queries go to the search endpoint, everything else to the plain listing.
        """
        params: dict[str, object] = {"limit": limit, "skip": offset}
        if query and query.strip():
            url = f"{self.base_url}/products/search"
            params["q"] = query
        else:
            url = f"{self.base_url}/products"

        logger.debug(f"Fetching products from {url} with {params}")

        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.RequestException as e:
            status_code = e.response.status_code if e.response is not None else None
            raise APIError(
                f"Error fetching products from {url}: {e}",
                original_exception=e,
                status_code=status_code,
                user_message=handle_error(e),
            )
        except (json.JSONDecodeError, ValueError) as e:
            raise APIError(f"Failed to decode products response from {url}: {e}", original_exception=e)

        if not isinstance(data, dict):
            raise APIError(f"Unexpected products response shape from {url}")

        total = data.get("total") or 0
        if isinstance(total, bool) or not isinstance(total, int):
            raise APIError(f"Unexpected total {total!r} in products response from {url}")

        items: list[ProductDTO] = []
        for record in data.get("products") or []:
            try:
                items.append(ProductDTO.from_api_response(record))
            except (TypeError, ValueError, OverflowError, AttributeError) as e:
                logger.warning(f"Skipping malformed product record {record!r}: {e}")

        return CatalogPageDTO(items=items, total=total, offset=offset, limit=limit)

    def __del__(self) -> None:
        """Clean up the session when the object is destroyed."""
        if hasattr(self, "session"):
            self.session.close()
