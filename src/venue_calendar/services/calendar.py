from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Optional

from ..domain import DecomposedEvent, Event
from ..scheduling import TimeWindow, decompose, resolve_window
from .context import ServiceContext


@dataclass(slots=True)
class CalendarService:
    context: ServiceContext

    def resolve(
        self,
        start_time: Optional[str] = None,
        end_time: Optional[str] = None,
        *,
        now: Optional[datetime] = None,
    ) -> TimeWindow:
        return resolve_window(start_time, end_time, now=now, policy=self.context.window_policy)

    def list_events(
        self,
        start_time: Optional[str] = None,
        end_time: Optional[str] = None,
        *,
        now: Optional[datetime] = None,
    ) -> list[DecomposedEvent]:
        window = self.resolve(start_time, end_time, now=now)
        return [decompose(event) for event in self.context.queries.list_all(window)]

    def search_events(
        self,
        room_ids: Iterable[str],
        owner: str,
        guest_id: str,
        start_time: Optional[str] = None,
        end_time: Optional[str] = None,
        *,
        now: Optional[datetime] = None,
    ) -> list[DecomposedEvent]:
        window = self.resolve(start_time, end_time, now=now)
        events = self.context.queries.query(room_ids, owner, guest_id, window)
        return [decompose(event) for event in events]

    def get_event(self, event_id: str) -> DecomposedEvent:
        return decompose(self.context.events.get(event_id))

    def create_event(self, event: Event) -> DecomposedEvent:
        return decompose(self.context.events.create(event))

    def update_event(self, event_id: str, event: Event) -> DecomposedEvent:
        return decompose(self.context.events.update(event_id, event))

    def delete_event(self, event_id: str) -> None:
        self.context.events.delete(event_id)
