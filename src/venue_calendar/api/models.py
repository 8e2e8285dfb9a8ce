from __future__ import annotations

from datetime import datetime
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..domain import DecomposedEvent, Room, Venue


class VenueInput(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str


class RoomInput(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str
    venue_id: str
    capacity: Union[str, int] = Field(default="")

    @field_validator("capacity")
    @classmethod
    def _capacity_as_text(cls, value: Union[str, int]) -> str:
        return str(value)


class EventInput(BaseModel):
    """Event body; timing is either two RFC 3339 instants or the decomposed fields."""

    model_config = ConfigDict(extra="ignore")

    name: str
    location_id: str
    owner: str
    location: str = Field(default="")
    description: str = Field(default="")
    guests: List[str] = Field(default_factory=list)
    start_time: Optional[str] = Field(default=None)
    end_time: Optional[str] = Field(default=None)
    year: Optional[int] = Field(default=None)
    month: Optional[int] = Field(default=None)
    date: Optional[int] = Field(default=None)
    start_hour: Optional[int] = Field(default=None)
    start_minute: Optional[int] = Field(default=None)
    end_hour: Optional[int] = Field(default=None)
    end_minute: Optional[int] = Field(default=None)


class RoomPayload(BaseModel):
    id: str
    name: str
    venue_id: str
    capacity: str
    created_at: Optional[datetime] = Field(default=None)
    updated_at: Optional[datetime] = Field(default=None)

    @classmethod
    def from_domain(cls, room: Room) -> "RoomPayload":
        return cls(
            id=room.id,
            name=room.name,
            venue_id=room.venue_id,
            capacity=room.capacity,
            created_at=room.created_at,
            updated_at=room.updated_at,
        )


class VenuePayload(BaseModel):
    id: str
    name: str
    rooms: Optional[List[RoomPayload]] = Field(default=None)
    created_at: Optional[datetime] = Field(default=None)
    updated_at: Optional[datetime] = Field(default=None)

    @classmethod
    def from_domain(cls, venue: Venue) -> "VenuePayload":
        rooms = [RoomPayload.from_domain(room) for room in venue.rooms] if venue.rooms is not None else None
        return cls(
            id=venue.id,
            name=venue.name,
            rooms=rooms,
            created_at=venue.created_at,
            updated_at=venue.updated_at,
        )


class EventPayload(BaseModel):
    id: str
    name: str
    location_id: str
    location: str
    description: str
    guests: List[str]
    owner: str
    year: int
    month: int
    date: int
    start_hour: int
    start_minute: int
    end_hour: int
    end_minute: int
    created_at: Optional[datetime] = Field(default=None)
    updated_at: Optional[datetime] = Field(default=None)

    @classmethod
    def from_domain(cls, event: DecomposedEvent) -> "EventPayload":
        return cls(
            id=event.id,
            name=event.name,
            location_id=event.location_id,
            location=event.location,
            description=event.description,
            guests=list(event.guests),
            owner=event.owner,
            year=event.year,
            month=event.month,
            date=event.date,
            start_hour=event.start_hour,
            start_minute=event.start_minute,
            end_hour=event.end_hour,
            end_minute=event.end_minute,
            created_at=event.created_at,
            updated_at=event.updated_at,
        )
