"""
JSON-file-backed store for the museum's own items and collections.

The whole catalog is held in memory and the whole document is rewritten on
every change. Mutations are serialized with a lock.
"""

import json
import logging
import threading
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from museum.src.services.catalog.errors import (
    CollectionInUse,
    CollectionNotFound,
    DuplicateCollection,
    ItemNotFound,
)
from museum.src.services.catalog.models import (
    Collection,
    CollectionPayload,
    Item,
    ItemPayload,
)

logger = logging.getLogger(__name__)


def _next_id(records: list[Item] | list[Collection]) -> int:
    return max((record.id for record in records), default=0) + 1


class JsonCatalogStore:
    def __init__(self, path: Path | str):
        self.path = Path(path)
        self._lock = threading.Lock()
        self._items: list[Item] = []
        self._collections: list[Collection] = []
        self.load()

    def load(self) -> None:
        """(Re)load the catalog from disk. A missing or unreadable file yields an empty catalog."""
        try:
            document = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            logger.info(f"No catalog file at {self.path}, starting empty")
            document = {}
        except (OSError, ValueError) as e:
            logger.error(f"Error loading catalog from {self.path}: {e}")
            document = {}

        if not isinstance(document, dict):
            logger.error(f"Catalog file {self.path} does not hold a JSON object")
            document = {}

        with self._lock:
            self._items = self._parse_records(Item, document.get("items", []))
            self._collections = self._parse_records(
                Collection, document.get("collections", [])
            )
        logger.info(
            f"Catalog loaded: {len(self._items)} items, "
            f"{len(self._collections)} collections"
        )

    @staticmethod
    def _parse_records(model: type[Item] | type[Collection], raw_records: Any) -> list:
        records = []
        for raw_record in raw_records or []:
            try:
                records.append(model.model_validate(raw_record))
            except ValidationError as e:
                logger.warning(f"Skipping invalid {model.__name__.lower()} record: {e}")
        return records

    def _commit(
        self,
        items: list[Item] | None = None,
        collections: list[Collection] | None = None,
    ) -> None:
        """
        Write the catalog with the given lists, then make them current.

        Memory is only updated once the file has been replaced, so a failed
        write leaves both untouched. Caller holds the lock.
        """
        items = self._items if items is None else items
        collections = self._collections if collections is None else collections
        document = {
            "items": [item.model_dump() for item in items],
            "collections": [collection.model_dump() for collection in collections],
        }
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            tmp_path.write_text(
                json.dumps(document, indent=2, ensure_ascii=False), encoding="utf-8"
            )
            tmp_path.replace(self.path)
        except OSError as e:
            logger.error(f"Error saving catalog to {self.path}: {e}")
            tmp_path.unlink(missing_ok=True)
            raise
        self._items = items
        self._collections = collections
        logger.info(f"Catalog saved to {self.path}")

    # ---- Items ----

    def list_items(self) -> list[Item]:
        return list(self._items)

    def get_item(self, item_id: int) -> Item:
        for item in self._items:
            if item.id == item_id:
                return item
        raise ItemNotFound(f"Item {item_id} not found")

    def items_in_collection(self, collection_name: str) -> list[Item]:
        return [item for item in self._items if item.collection == collection_name]

    def create_item(self, payload: dict[str, Any]) -> Item:
        item_payload = ItemPayload.model_validate(payload)
        with self._lock:
            item = item_payload.to_item(_next_id(self._items))
            self._commit(items=[*self._items, item])
        logger.info(f"Item {item.id} created")
        return item

    def update_item(self, item_id: int, payload: dict[str, Any]) -> Item:
        item_payload = ItemPayload.model_validate(payload)
        with self._lock:
            index = self._item_index(item_id)
            item = item_payload.to_item(item_id)
            items = list(self._items)
            items[index] = item
            self._commit(items=items)
        logger.info(f"Item {item_id} updated")
        return item

    def delete_item(self, item_id: int) -> None:
        with self._lock:
            index = self._item_index(item_id)
            self._commit(items=self._items[:index] + self._items[index + 1 :])
        logger.info(f"Item {item_id} deleted")

    def _item_index(self, item_id: int) -> int:
        for index, item in enumerate(self._items):
            if item.id == item_id:
                return index
        raise ItemNotFound(f"Item {item_id} not found")

    # ---- Collections ----

    def list_collections(self) -> list[Collection]:
        return list(self._collections)

    def create_collection(self, payload: dict[str, Any]) -> Collection:
        collection_payload = CollectionPayload.model_validate(payload)
        with self._lock:
            collection = collection_payload.to_collection(_next_id(self._collections))
            if any(c.name == collection.name for c in self._collections):
                raise DuplicateCollection("Collection already exists")
            self._commit(collections=[*self._collections, collection])
        logger.info(f"Collection {collection.id} ({collection.name}) created")
        return collection

    def update_collection(
        self, collection_id: int, payload: dict[str, Any]
    ) -> Collection:
        collection_payload = CollectionPayload.model_validate(payload)
        with self._lock:
            index = self._collection_index(collection_id)
            collection = collection_payload.to_collection(collection_id)
            if any(
                c.name == collection.name and c.id != collection_id
                for c in self._collections
            ):
                raise DuplicateCollection("Collection already exists")
            collections = list(self._collections)
            collections[index] = collection
            self._commit(collections=collections)
        logger.info(f"Collection {collection_id} updated")
        return collection

    def delete_collection(self, collection_id: int) -> None:
        with self._lock:
            index = self._collection_index(collection_id)
            name = self._collections[index].name
            item_count = len(self.items_in_collection(name))
            if item_count:
                raise CollectionInUse(name, item_count)
            self._commit(
                collections=self._collections[:index] + self._collections[index + 1 :]
            )
        logger.info(f"Collection {collection_id} ({name}) deleted")

    def _collection_index(self, collection_id: int) -> int:
        for index, collection in enumerate(self._collections):
            if collection.id == collection_id:
                return index
        raise CollectionNotFound(f"Collection {collection_id} not found")
