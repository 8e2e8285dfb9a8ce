"""Projection between stored events and the decomposed calendar shape."""

from __future__ import annotations

from datetime import datetime

from ..domain import DecomposedEvent, Event, LOCAL_OFFSET, to_local


def decompose(event: Event) -> DecomposedEvent:
    start = to_local(event.start_time)
    end = to_local(event.end_time)
    return DecomposedEvent(
        id=event.id,
        name=event.name,
        location_id=event.location_id,
        owner=event.owner,
        year=start.year,
        month=start.month,
        date=start.day,
        start_hour=start.hour,
        start_minute=start.minute,
        end_hour=end.hour,
        end_minute=end.minute,
        location=event.location,
        description=event.description,
        guests=list(event.guests),
        created_at=event.created_at,
        updated_at=event.updated_at,
    )


def compose(view: DecomposedEvent) -> Event:
    """Rebuild absolute instants; both land on the view's single calendar day."""

    start = datetime(view.year, view.month, view.date, view.start_hour, view.start_minute, 0, tzinfo=LOCAL_OFFSET)
    end = datetime(view.year, view.month, view.date, view.end_hour, view.end_minute, 0, tzinfo=LOCAL_OFFSET)
    return Event(
        id=view.id,
        name=view.name,
        location_id=view.location_id,
        owner=view.owner,
        start_time=start,
        end_time=end,
        location=view.location,
        description=view.description,
        guests=list(view.guests),
        created_at=view.created_at,
        updated_at=view.updated_at,
    )


__all__ = ["compose", "decompose"]
