from __future__ import annotations

from typing import Any, Dict, List, Protocol

from .filters import Predicate

VENUES = "venues"
ROOMS = "rooms"
EVENTS = "events"

COLLECTIONS = (VENUES, ROOMS, EVENTS)

Record = Dict[str, Any]


class ResourceStore(Protocol):
    """CRUD primitives over named collections of records keyed by ``id``.

    ``find``, ``replace`` and ``delete`` raise ``NotFoundError`` for unknown
    identifiers. Backend failures surface as ``InfrastructureError``.
    """

    def list(self, collection: str, predicate: Predicate = ()) -> List[Record]: ...

    def find(self, collection: str, identifier: str) -> Record: ...

    def insert(self, collection: str, record: Record) -> str: ...

    def replace(self, collection: str, identifier: str, record: Record) -> None: ...

    def delete(self, collection: str, identifier: str) -> None: ...

    def close(self) -> None: ...
