from __future__ import annotations

from dataclasses import dataclass

from ...domain import Room, local_now
from ..filters import Eq
from ..store import ROOMS, ResourceStore


@dataclass(slots=True)
class RoomRepository:
    store: ResourceStore
    collection: str = ROOMS

    def list_all(self) -> list[Room]:
        return [Room.from_record(record) for record in self.store.list(self.collection)]

    def list_by_venue(self, venue_id: str) -> list[Room]:
        records = self.store.list(self.collection, (Eq("venue_id", venue_id),))
        return [Room.from_record(record) for record in records]

    def get(self, room_id: str) -> Room:
        return Room.from_record(self.store.find(self.collection, room_id))

    def create(self, room: Room) -> Room:
        room.created_at = room.updated_at = local_now()
        payload = room.to_record()
        payload.pop("id")
        room.id = self.store.insert(self.collection, payload)
        return room

    def update(self, room_id: str, room: Room) -> Room:
        existing = self.get(room_id)
        room.id = room_id
        room.created_at = existing.created_at
        room.updated_at = local_now()
        self.store.replace(self.collection, room_id, room.to_record())
        return room

    def delete(self, room_id: str) -> None:
        self.store.delete(self.collection, room_id)
