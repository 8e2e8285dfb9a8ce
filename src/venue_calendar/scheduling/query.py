from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List

from ..data.filters import AnyOf, Between, Contains, Eq, In, Predicate
from ..data.repositories import EventRepository
from ..domain import Event
from .windows import TimeWindow

logger = logging.getLogger(__name__)


def window_predicate(window: TimeWindow) -> Predicate:
    return (Between("start_time", window.start, window.end),)


def event_predicate(room_ids: Iterable[str], owner_id: str, guest_id: str, window: TimeWindow) -> Predicate:
    """Room membership AND start inside the window AND (owner match OR guest membership)."""

    return (
        In("location_id", tuple(dict.fromkeys(room_ids))),
        *window_predicate(window),
        AnyOf((Eq("owner", owner_id), Contains("guests", guest_id))),
    )


@dataclass(slots=True)
class EventQueryEngine:
    events: EventRepository

    def query(self, room_ids: Iterable[str], owner_id: str, guest_id: str, window: TimeWindow) -> List[Event]:
        rooms = tuple(dict.fromkeys(room_ids))
        if not rooms:
            return []
        predicate = event_predicate(rooms, owner_id, guest_id, window)
        results = self.events.list_matching(predicate)
        logger.debug(
            "Event query rooms=%d owner=%s guest=%s window=[%s, %s] -> %d events",
            len(rooms),
            owner_id,
            guest_id,
            window.start.isoformat(),
            window.end.isoformat(),
            len(results),
        )
        return results

    def list_all(self, window: TimeWindow) -> List[Event]:
        return self.events.list_matching(window_predicate(window))
