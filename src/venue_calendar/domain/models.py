from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from .clock import parse_timestamp, to_local


def _parse_datetime(value: Any) -> datetime:
    if isinstance(value, datetime):
        return to_local(value)
    if isinstance(value, str):
        return to_local(parse_timestamp(value))
    raise ValueError(f"Unsupported datetime value: {value!r}")


def _optional_datetime(value: Any) -> Optional[datetime]:
    return _parse_datetime(value) if value else None


def _iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


@dataclass(slots=True)
class Room:
    id: str
    name: str
    venue_id: str
    capacity: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Room":
        return cls(
            id=str(record["id"]),
            name=str(record.get("name") or ""),
            venue_id=str(record.get("venue_id") or ""),
            capacity=str(record.get("capacity") or ""),
            created_at=_optional_datetime(record.get("created_at")),
            updated_at=_optional_datetime(record.get("updated_at")),
        )

    def to_record(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "venue_id": self.venue_id,
            "capacity": self.capacity,
            "created_at": _iso(self.created_at),
            "updated_at": _iso(self.updated_at),
        }


@dataclass(slots=True)
class Venue:
    id: str
    name: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    # Filled in at read time only, never persisted.
    rooms: Optional[List[Room]] = None

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Venue":
        return cls(
            id=str(record["id"]),
            name=str(record.get("name") or ""),
            created_at=_optional_datetime(record.get("created_at")),
            updated_at=_optional_datetime(record.get("updated_at")),
        )

    def to_record(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "created_at": _iso(self.created_at),
            "updated_at": _iso(self.updated_at),
        }


@dataclass(slots=True)
class Event:
    id: str
    name: str
    location_id: str
    owner: str
    start_time: datetime
    end_time: datetime
    location: str = ""
    description: str = ""
    guests: List[str] = field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Event":
        return cls(
            id=str(record["id"]),
            name=str(record.get("name") or ""),
            location_id=str(record.get("location_id") or ""),
            owner=str(record.get("owner") or ""),
            start_time=_parse_datetime(record["start_time"]),
            end_time=_parse_datetime(record["end_time"]),
            location=record.get("location") or "",
            description=record.get("description") or "",
            guests=[str(guest) for guest in record.get("guests") or []],
            created_at=_optional_datetime(record.get("created_at")),
            updated_at=_optional_datetime(record.get("updated_at")),
        )

    def to_record(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "location_id": self.location_id,
            "location": self.location,
            "description": self.description,
            "guests": list(self.guests),
            "owner": self.owner,
            "start_time": self.start_time.isoformat(),
            "end_time": self.end_time.isoformat(),
            "created_at": _iso(self.created_at),
            "updated_at": _iso(self.updated_at),
        }


@dataclass(slots=True)
class DecomposedEvent:
    """Event with its timing split into calendar fields in the local offset.

    ``year``, ``month`` and ``date`` are shared by start and end, so an event
    crossing midnight cannot be expressed in this shape.
    """

    id: str
    name: str
    location_id: str
    owner: str
    year: int
    month: int
    date: int
    start_hour: int
    start_minute: int
    end_hour: int
    end_minute: int
    location: str = ""
    description: str = ""
    guests: List[str] = field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
