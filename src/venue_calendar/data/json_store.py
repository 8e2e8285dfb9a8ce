from __future__ import annotations

import logging
import threading
from copy import deepcopy
from pathlib import Path
from typing import Dict, List, Optional

import orjson

from ..errors import InfrastructureError, NotFoundError
from ..domain.identifiers import new_identifier
from .filters import Predicate, matches_all
from .store import COLLECTIONS, Record

logger = logging.getLogger(__name__)


class JsonDocumentStore:
    """Single-file document store used for local runs and tests.

    The whole document is held in memory after the first read and rewritten
    on every mutation. A lock serializes access from concurrent requests.
    """

    def __init__(self, path: Path) -> None:
        self._path = path
        self._lock = threading.RLock()
        self._cache: Optional[Dict[str, List[Record]]] = None

    @property
    def path(self) -> Path:
        return self._path

    def _load_raw(self) -> Dict[str, List[Record]]:
        if self._cache is None:
            try:
                if not self._path.exists():
                    self._path.parent.mkdir(parents=True, exist_ok=True)
                    self._path.write_bytes(orjson.dumps({name: [] for name in COLLECTIONS}) + b"\n")
                data = orjson.loads(self._path.read_bytes() or b"{}")
            except (OSError, orjson.JSONDecodeError) as exc:
                logger.exception("Failed to load document store from %s", self._path)
                raise InfrastructureError(f"Document store at {self._path} is unavailable.") from exc
            self._cache = {name: list(data.get(name, [])) for name in COLLECTIONS}
        return self._cache

    def _persist(self) -> None:
        if self._cache is None:
            return
        payload = orjson.dumps(self._cache, option=orjson.OPT_INDENT_2)
        try:
            self._path.write_bytes(payload + b"\n")
        except OSError as exc:
            logger.exception("Failed to write document store to %s", self._path)
            raise InfrastructureError(f"Document store at {self._path} is unavailable.") from exc

    def _collection(self, collection: str) -> List[Record]:
        data = self._load_raw()
        if collection not in data:
            raise InfrastructureError(f"Unknown collection '{collection}'.")
        return data[collection]

    def list(self, collection: str, predicate: Predicate = ()) -> List[Record]:
        with self._lock:
            items = self._collection(collection)
            return [deepcopy(item) for item in items if matches_all(predicate, item)]

    def find(self, collection: str, identifier: str) -> Record:
        with self._lock:
            for item in self._collection(collection):
                if item["id"] == identifier:
                    return deepcopy(item)
        raise NotFoundError(collection, identifier)

    def insert(self, collection: str, record: Record) -> str:
        with self._lock:
            items = self._collection(collection)
            identifier = record.get("id") or new_identifier()
            items.append({**deepcopy(record), "id": identifier})
            self._persist()
        logger.debug("Inserted %s/%s", collection, identifier)
        return identifier

    def replace(self, collection: str, identifier: str, record: Record) -> None:
        with self._lock:
            items = self._collection(collection)
            for idx, existing in enumerate(items):
                if existing["id"] == identifier:
                    items[idx] = {**deepcopy(record), "id": identifier}
                    self._persist()
                    return
        raise NotFoundError(collection, identifier)

    def delete(self, collection: str, identifier: str) -> None:
        with self._lock:
            items = self._collection(collection)
            for idx, existing in enumerate(items):
                if existing["id"] == identifier:
                    del items[idx]
                    self._persist()
                    return
        raise NotFoundError(collection, identifier)

    def close(self) -> None:
        with self._lock:
            self._cache = None
