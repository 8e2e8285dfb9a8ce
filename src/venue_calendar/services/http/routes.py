from __future__ import annotations

from typing import Any, List, Optional

from fastapi import APIRouter, Body, Depends, Query, Request
from fastapi.responses import JSONResponse

from ...api import (
    decode_event,
    decode_room,
    decode_venue,
    serialize_event,
    serialize_room,
    serialize_venue,
)
from ...domain import parse_identifier
from ..calendar import CalendarService
from ..venues import VenueService
from .responses import message_response, success_response

router = APIRouter()


def get_venue_service(request: Request) -> VenueService:
    return request.app.state.venues


def get_calendar_service(request: Request) -> CalendarService:
    return request.app.state.calendar


def path_identifier(id: str) -> str:  # noqa: A002
    return parse_identifier(id)


@router.get("/health")
def health() -> dict:
    return {"status": "ok"}


# Venues -----------------------------------------------------------------------


@router.get("/venues")
def list_venues(service: VenueService = Depends(get_venue_service)) -> JSONResponse:
    return success_response([serialize_venue(venue) for venue in service.list_venues()])


@router.post("/venues")
def create_venue(body: Any = Body(default=None), service: VenueService = Depends(get_venue_service)) -> JSONResponse:
    venue = service.create_venue(decode_venue(body))
    return success_response(serialize_venue(venue), status_code=201)


@router.get("/venues/{id}")
def get_venue(
    venue_id: str = Depends(path_identifier),
    service: VenueService = Depends(get_venue_service),
) -> JSONResponse:
    return success_response(serialize_venue(service.get_venue(venue_id)))


@router.patch("/venues/{id}")
def update_venue(
    venue_id: str = Depends(path_identifier),
    body: Any = Body(default=None),
    service: VenueService = Depends(get_venue_service),
) -> JSONResponse:
    venue = service.update_venue(venue_id, decode_venue(body))
    return success_response(serialize_venue(venue), status_code=202)


@router.delete("/venues/{id}")
def delete_venue(
    venue_id: str = Depends(path_identifier),
    service: VenueService = Depends(get_venue_service),
) -> JSONResponse:
    service.delete_venue(venue_id)
    return message_response("Venue has been deleted successfully")


@router.get("/venues/{id}/rooms")
def list_venue_rooms(
    venue_id: str = Depends(path_identifier),
    service: VenueService = Depends(get_venue_service),
) -> JSONResponse:
    return success_response([serialize_room(room) for room in service.rooms_for_venue(venue_id)])


# Rooms ------------------------------------------------------------------------


@router.get("/rooms")
def list_rooms(service: VenueService = Depends(get_venue_service)) -> JSONResponse:
    return success_response([serialize_room(room) for room in service.list_rooms()])


@router.post("/rooms")
def create_room(body: Any = Body(default=None), service: VenueService = Depends(get_venue_service)) -> JSONResponse:
    room = service.create_room(decode_room(body))
    return success_response(serialize_room(room), status_code=201)


@router.get("/rooms/{id}")
def get_room(
    room_id: str = Depends(path_identifier),
    service: VenueService = Depends(get_venue_service),
) -> JSONResponse:
    return success_response(serialize_room(service.get_room(room_id)))


@router.patch("/rooms/{id}")
def update_room(
    room_id: str = Depends(path_identifier),
    body: Any = Body(default=None),
    service: VenueService = Depends(get_venue_service),
) -> JSONResponse:
    room = service.update_room(room_id, decode_room(body))
    return success_response(serialize_room(room), status_code=202)


@router.delete("/rooms/{id}")
def delete_room(
    room_id: str = Depends(path_identifier),
    service: VenueService = Depends(get_venue_service),
) -> JSONResponse:
    service.delete_room(room_id)
    return message_response("Room has been deleted successfully")


# Events -----------------------------------------------------------------------


@router.get("/events")
def list_events(
    start_time: Optional[str] = Query(default=None),
    end_time: Optional[str] = Query(default=None),
    service: CalendarService = Depends(get_calendar_service),
) -> JSONResponse:
    events = service.list_events(start_time, end_time)
    return success_response([serialize_event(event) for event in events])


@router.post("/events")
def create_event(body: Any = Body(default=None), service: CalendarService = Depends(get_calendar_service)) -> JSONResponse:
    event = service.create_event(decode_event(body))
    return success_response(serialize_event(event), status_code=201)


@router.get("/events/{id}")
def get_event(
    event_id: str = Depends(path_identifier),
    service: CalendarService = Depends(get_calendar_service),
) -> JSONResponse:
    return success_response(serialize_event(service.get_event(event_id)))


@router.patch("/events/{id}")
def update_event(
    event_id: str = Depends(path_identifier),
    body: Any = Body(default=None),
    service: CalendarService = Depends(get_calendar_service),
) -> JSONResponse:
    event = service.update_event(event_id, decode_event(body))
    return success_response(serialize_event(event), status_code=202)


@router.delete("/events/{id}")
def delete_event(
    event_id: str = Depends(path_identifier),
    service: CalendarService = Depends(get_calendar_service),
) -> JSONResponse:
    service.delete_event(event_id)
    return message_response("Event has been deleted successfully")


@router.get("/search-events")
def search_events(
    room_ids: Optional[List[str]] = Query(default=None, alias="room_ids[]"),
    owner: str = Query(default=""),
    guest_id: str = Query(default=""),
    start_time: Optional[str] = Query(default=None),
    end_time: Optional[str] = Query(default=None),
    service: CalendarService = Depends(get_calendar_service),
) -> JSONResponse:
    events = service.search_events(room_ids or [], owner, guest_id, start_time, end_time)
    return success_response([serialize_event(event) for event in events])
