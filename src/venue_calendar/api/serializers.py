from __future__ import annotations

from typing import Any, Dict

from ..domain import DecomposedEvent, Room, Venue
from .models import EventPayload, RoomPayload, VenuePayload


def serialize_venue(venue: Venue) -> Dict[str, Any]:
    return VenuePayload.from_domain(venue).model_dump(mode="json", exclude_none=True)


def serialize_room(room: Room) -> Dict[str, Any]:
    return RoomPayload.from_domain(room).model_dump(mode="json", exclude_none=True)


def serialize_event(event: DecomposedEvent) -> Dict[str, Any]:
    return EventPayload.from_domain(event).model_dump(mode="json", exclude_none=True)
