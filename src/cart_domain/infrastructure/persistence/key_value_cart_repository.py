# src/cart_domain/infrastructure/persistence/key_value_cart_repository.py
"""Cart repository storing the ledger as a JSON array in the local key/value store."""

import json
import logging

from src.cart_domain.domain.entities.cart_line import CartLine
from src.cart_domain.domain.repositories.cart_repository import ICartRepository
from src.common.config.settings import settings
from src.common.dtos.storage_dtos import StorageResult
from src.common.exceptions.custom_exceptions import StorageError
from src.storage_domain.domain.repositories.key_value_store import IKeyValueStore

logger = logging.getLogger(__name__)


class KeyValueCartRepository(ICartRepository):

    def __init__(self, store: IKeyValueStore, storage_key: str | None = None) -> None:
        self.store = store
        self.storage_key = storage_key or settings.CART_STORAGE_KEY

    def load_lines(self) -> list[CartLine]:
        """
        Reads the cart from storage.
        Missing or corrupt data yields an empty cart; broken records are skipped and
        repeated product ids are folded into the first line so the ledger starts consistent.
        """
        try:
            raw = self.store.get(self.storage_key)
        except StorageError as e:
            logger.warning(f"Could not read cart from storage: {e}")
            return []

        if not raw:
            return []

        try:
            records = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning(f"Stored cart under '{self.storage_key}' is not valid JSON: {e}")
            return []

        if not isinstance(records, list):
            logger.warning(f"Stored cart under '{self.storage_key}' is not a list, ignoring it")
            return []

        lines: list[CartLine] = []
        index_by_id: dict = {}
        for record in records:
            if not isinstance(record, dict):
                continue
            try:
                line = CartLine.from_dict(record)
            except (TypeError, ValueError, OverflowError) as e:
                logger.warning(f"Skipping invalid cart record {record.get('id')}: {e}")
                continue

            if line.product_id in index_by_id:
                position = index_by_id[line.product_id]
                lines[position] = lines[position].with_quantity(lines[position].quantity + line.quantity)
                continue
            index_by_id[line.product_id] = len(lines)
            lines.append(line)

        logger.info(f"Loaded {len(lines)} cart lines from storage")
        return lines

    def save_lines(self, lines: list[CartLine]) -> StorageResult:
        """Writes the full ledger; failures are returned, not raised."""
        try:
            payload = json.dumps([line.to_dict() for line in lines], ensure_ascii=False)
            self.store.set(self.storage_key, payload)
        except (StorageError, TypeError, ValueError) as e:
            return StorageResult.failure(self.storage_key, e)
        return StorageResult.success(self.storage_key)
