import json
import logging
import os
import threading
from pathlib import Path
from typing import Any, Dict, List, Union

import pydantic

from .core import (
    NotFoundError, StorageError, _make_product_dict, _next_id,
    parse_product_input
)
from .models import Product

# The whole catalog lives in one JSON document shaped {"products": [...]}.
# Every call re-reads it; every mutation rewrites it.

logger = logging.getLogger(__name__)

SEED_PRODUCTS: List[Dict[str, Any]] = [
    {
        "id": 1,
        "name": "Laptop Pro",
        "description": "Powerful laptop for professionals",
        "price": 1299.99,
        "category": "electronics"
    },
    {
        "id": 2,
        "name": "Smartphone X",
        "description": "Latest smartphone with advanced features",
        "price": 799.99,
        "category": "electronics"
    },
    {
        "id": 3,
        "name": "Coffee Maker",
        "description": "Automatic coffee maker with timer",
        "price": 49.99,
        "category": "home"
    },
]


class ProductStore:
    """File-backed product collection.

    One handle owns one document path.  Mutations through the same handle
    are serialized by ``_lock``; separate processes writing the same file
    still race and the last write wins.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._lock = threading.Lock()
        self.initialized = False

    def initialize(self) -> None:
        """Create the data directory and seed the document if it is missing.

        Raises ``StorageError`` when the directory or document is unusable.
        Callers treat that as a startup failure.
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StorageError(f"cannot create data directory {self.path.parent}: {exc}") from exc

        if self.path.exists():
            self._read()
        else:
            self._write([dict(p) for p in SEED_PRODUCTS])
            logger.info("Created initial products data file at %s", self.path)
        self.initialized = True

    # ---------------------------
    # Reads
    # ---------------------------
    def list_all(self) -> List[Product]:
        return [self._to_product(r) for r in self._read()]

    def get_by_id(self, product_id: int) -> Product:
        for record in self._read():
            if record.get("id") == product_id:
                return self._to_product(record)
        raise NotFoundError(product_id)

    # ---------------------------
    # Mutations
    # ---------------------------
    def create(self, data: Any) -> Product:
        payload = parse_product_input(data)
        with self._lock:
            records = self._read()
            record = _make_product_dict(_next_id(records), payload)
            records.append(record)
            self._write(records)
        logger.info("Created product %s (%s)", record["id"], record["name"])
        return self._to_product(record)

    def update(self, product_id: int, data: Any) -> Product:
        with self._lock:
            records = self._read()
            index = self._index_of(records, product_id)
            payload = parse_product_input(data)
            record = _make_product_dict(product_id, payload)
            records[index] = record
            self._write(records)
        logger.info("Updated product %s", product_id)
        return self._to_product(record)

    def delete(self, product_id: int) -> None:
        with self._lock:
            records = self._read()
            del records[self._index_of(records, product_id)]
            self._write(records)
        logger.info("Deleted product %s", product_id)

    # ---------------------------
    # Helpers
    # ---------------------------
    @staticmethod
    def _index_of(records: List[Dict[str, Any]], product_id: int) -> int:
        for i, record in enumerate(records):
            if record.get("id") == product_id:
                return i
        raise NotFoundError(product_id)

    def _to_product(self, record: Dict[str, Any]) -> Product:
        try:
            return Product.model_validate(record)
        except pydantic.ValidationError as exc:
            raise StorageError(f"invalid record in {self.path}: {record!r}") from exc

    def _read(self) -> List[Dict[str, Any]]:
        try:
            with self.path.open("r", encoding="utf-8") as fh:
                document = json.load(fh)
        except (OSError, ValueError) as exc:
            logger.error("Failed to read %s: %s", self.path, exc)
            raise StorageError(f"cannot read {self.path}: {exc}") from exc

        products = document.get("products") if isinstance(document, dict) else None
        if not isinstance(products, list):
            raise StorageError(f"{self.path} has no 'products' list")
        return products

    def _write(self, records: List[Dict[str, Any]]) -> None:
        # Write to a sibling file first so readers never see a partial document.
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            with tmp_path.open("w", encoding="utf-8") as fh:
                json.dump({"products": records}, fh, indent=2, ensure_ascii=False)
                fh.write("\n")
            os.replace(tmp_path, self.path)
        except OSError as exc:
            logger.error("Failed to write %s: %s", self.path, exc)
            raise StorageError(f"cannot write {self.path}: {exc}") from exc
