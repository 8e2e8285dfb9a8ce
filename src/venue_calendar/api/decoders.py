"""Turn request bodies of the form ``{"data": {...}}`` into domain objects."""

from __future__ import annotations

from typing import Any, Dict, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..domain import DecomposedEvent, Event, Room, Venue, parse_identifier
from ..errors import ValidationError
from ..scheduling import compose, parse_instant
from .models import EventInput, RoomInput, VenueInput

ModelT = TypeVar("ModelT", bound=BaseModel)

_DECOMPOSED_FIELDS = ("year", "month", "date", "start_hour", "start_minute", "end_hour", "end_minute")


def _resource_data(body: Any) -> Dict[str, Any]:
    if not isinstance(body, dict) or not isinstance(body.get("data"), dict):
        raise ValidationError('Request body must be a JSON object of the form {"data": {...}}.')
    return body["data"]


def _validate(model: Type[ModelT], body: Any) -> ModelT:
    try:
        return model.model_validate(_resource_data(body))
    except PydanticValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
        )
        raise ValidationError(f"Invalid {model.__name__.removesuffix('Input').lower()}: {problems}") from exc


def decode_venue(body: Any) -> Venue:
    payload = _validate(VenueInput, body)
    return Venue(id="", name=payload.name)


def decode_room(body: Any) -> Room:
    payload = _validate(RoomInput, body)
    try:
        venue_id = parse_identifier(payload.venue_id)
    except ValidationError as exc:
        raise ValidationError(f"Invalid room: venue_id: {exc}") from exc
    return Room(id="", name=payload.name, venue_id=venue_id, capacity=str(payload.capacity))


def decode_event(body: Any) -> Event:
    payload = _validate(EventInput, body)
    if payload.start_time is not None and payload.end_time is not None:
        return Event(
            id="",
            name=payload.name,
            location_id=payload.location_id,
            owner=payload.owner,
            start_time=parse_instant(payload.start_time, "start_time"),
            end_time=parse_instant(payload.end_time, "end_time"),
            location=payload.location,
            description=payload.description,
            guests=list(payload.guests),
        )
    if all(getattr(payload, name) is not None for name in _DECOMPOSED_FIELDS):
        view = DecomposedEvent(
            id="",
            name=payload.name,
            location_id=payload.location_id,
            owner=payload.owner,
            location=payload.location,
            description=payload.description,
            guests=list(payload.guests),
            **{name: getattr(payload, name) for name in _DECOMPOSED_FIELDS},
        )
        try:
            return compose(view)
        except ValueError as exc:
            raise ValidationError(f"Invalid event date or time: {exc}.") from exc
    raise ValidationError(
        "Event requires start_time and end_time, or all of " + ", ".join(_DECOMPOSED_FIELDS) + "."
    )


__all__ = ["decode_event", "decode_room", "decode_venue"]
