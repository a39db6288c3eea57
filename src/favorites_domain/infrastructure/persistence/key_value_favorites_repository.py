# src/favorites_domain/infrastructure/persistence/key_value_favorites_repository.py
"""Favorites repository storing product snapshots as a JSON array in the local key/value store."""

import json
import logging

from src.common.config.settings import settings
from src.common.dtos.product_dtos import ProductDTO
from src.common.dtos.storage_dtos import StorageResult
from src.common.exceptions.custom_exceptions import StorageError
from src.favorites_domain.domain.repositories.favorites_repository import IFavoritesRepository
from src.storage_domain.domain.repositories.key_value_store import IKeyValueStore

logger = logging.getLogger(__name__)


class KeyValueFavoritesRepository(IFavoritesRepository):

    def __init__(self, store: IKeyValueStore, storage_key: str | None = None) -> None:
        self.store = store
        self.storage_key = storage_key or settings.FAVORITES_STORAGE_KEY

    def load_favorites(self) -> list[ProductDTO]:
        try:
            raw = self.store.get(self.storage_key)
        except StorageError as e:
            logger.warning(f"Could not read favorites from storage: {e}")
            return []

        if not raw:
            return []

        try:
            records = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning(f"Stored favorites under '{self.storage_key}' are not valid JSON: {e}")
            return []

        if not isinstance(records, list):
            return []

        favorites: list[ProductDTO] = []
        seen_ids = set()
        for record in records:
            if not isinstance(record, dict):
                continue
            try:
                product = ProductDTO.from_api_response(record)
            except (TypeError, ValueError, OverflowError) as e:
                logger.warning(f"Skipping invalid favorite record {record.get('id')}: {e}")
                continue
            if product.id in seen_ids:
                continue
            seen_ids.add(product.id)
            favorites.append(product)

        logger.info(f"Loaded {len(favorites)} favorites from storage")
        return favorites

    def save_favorites(self, favorites: list[ProductDTO]) -> StorageResult:
        try:
            payload = json.dumps([product.to_dict() for product in favorites], ensure_ascii=False)
            self.store.set(self.storage_key, payload)
        except (StorageError, TypeError, ValueError) as e:
            return StorageResult.failure(self.storage_key, e)
        return StorageResult.success(self.storage_key)
