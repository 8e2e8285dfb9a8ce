"""Domain models for venues, rooms and events."""

from __future__ import annotations

from .clock import LOCAL_OFFSET, local_now, parse_timestamp, to_local
from .identifiers import is_identifier, new_identifier, parse_identifier
from .models import DecomposedEvent, Event, Room, Venue

__all__ = [
    "DecomposedEvent",
    "Event",
    "LOCAL_OFFSET",
    "Room",
    "Venue",
    "is_identifier",
    "local_now",
    "new_identifier",
    "parse_identifier",
    "parse_timestamp",
    "to_local",
]
