from __future__ import annotations

from dataclasses import dataclass
from typing import List

from ...domain import Event, local_now
from ..filters import Predicate
from ..store import EVENTS, ResourceStore


@dataclass(slots=True)
class EventRepository:
    store: ResourceStore
    collection: str = EVENTS

    def list_matching(self, predicate: Predicate) -> List[Event]:
        return [Event.from_record(record) for record in self.store.list(self.collection, predicate)]

    def get(self, event_id: str) -> Event:
        return Event.from_record(self.store.find(self.collection, event_id))

    def create(self, event: Event) -> Event:
        event.created_at = event.updated_at = local_now()
        payload = event.to_record()
        payload.pop("id")
        event.id = self.store.insert(self.collection, payload)
        return event

    def update(self, event_id: str, event: Event) -> Event:
        """Replace the stored event wholesale, keeping its creation stamp."""

        existing = self.get(event_id)
        event.id = event_id
        event.created_at = existing.created_at
        event.updated_at = local_now()
        self.store.replace(self.collection, event_id, event.to_record())
        return event

    def delete(self, event_id: str) -> None:
        self.store.delete(self.collection, event_id)
