from __future__ import annotations

from dataclasses import dataclass

from ...domain import Venue, local_now
from ..store import VENUES, ResourceStore


@dataclass(slots=True)
class VenueRepository:
    store: ResourceStore
    collection: str = VENUES

    def list_all(self) -> list[Venue]:
        return [Venue.from_record(record) for record in self.store.list(self.collection)]

    def get(self, venue_id: str) -> Venue:
        return Venue.from_record(self.store.find(self.collection, venue_id))

    def create(self, venue: Venue) -> Venue:
        venue.created_at = venue.updated_at = local_now()
        payload = venue.to_record()
        payload.pop("id")
        venue.id = self.store.insert(self.collection, payload)
        return venue

    def update(self, venue_id: str, venue: Venue) -> Venue:
        existing = self.get(venue_id)
        venue.id = venue_id
        venue.created_at = existing.created_at
        venue.updated_at = local_now()
        self.store.replace(self.collection, venue_id, venue.to_record())
        return venue

    def delete(self, venue_id: str) -> None:
        self.store.delete(self.collection, venue_id)
