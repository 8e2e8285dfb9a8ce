from __future__ import annotations

from dataclasses import dataclass

from ..domain import Room, Venue
from .context import ServiceContext


@dataclass(slots=True)
class VenueService:
    context: ServiceContext

    def list_venues(self) -> list[Venue]:
        """Return every venue with its rooms attached by a per-venue lookup."""

        venues = self.context.venues.list_all()
        for venue in venues:
            venue.rooms = self.context.rooms.list_by_venue(venue.id)
        return venues

    def get_venue(self, venue_id: str) -> Venue:
        return self.context.venues.get(venue_id)

    def create_venue(self, venue: Venue) -> Venue:
        return self.context.venues.create(venue)

    def update_venue(self, venue_id: str, venue: Venue) -> Venue:
        return self.context.venues.update(venue_id, venue)

    def delete_venue(self, venue_id: str) -> None:
        self.context.venues.delete(venue_id)

    def list_rooms(self) -> list[Room]:
        return self.context.rooms.list_all()

    def rooms_for_venue(self, venue_id: str) -> list[Room]:
        return self.context.rooms.list_by_venue(venue_id)

    def get_room(self, room_id: str) -> Room:
        return self.context.rooms.get(room_id)

    def create_room(self, room: Room) -> Room:
        return self.context.rooms.create(room)

    def update_room(self, room_id: str, room: Room) -> Room:
        return self.context.rooms.update(room_id, room)

    def delete_room(self, room_id: str) -> None:
        self.context.rooms.delete(room_id)
