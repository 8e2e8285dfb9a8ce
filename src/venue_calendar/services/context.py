from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ..config import AppSettings, get_settings
from ..data import JsonDocumentStore, ResourceStore, SupabaseStore
from ..data.repositories import EventRepository, RoomRepository, VenueRepository
from ..scheduling import EventQueryEngine, WindowPolicy

logger = logging.getLogger(__name__)


def build_store(settings: AppSettings) -> ResourceStore:
    backend = settings.store.backend
    if backend == "supabase":
        logger.info("Using Supabase resource store")
        return SupabaseStore.from_settings(settings.supabase, settings.store)
    if backend == "json":
        logger.info("Using JSON document store at %s", settings.store.path)
        return JsonDocumentStore(settings.store.path)
    raise ValueError(f"Unknown store backend '{backend}'. Expected 'supabase' or 'json'.")


@dataclass(slots=True)
class ServiceContext:
    """Aggregate root for services to share settings, the store handle and repositories."""

    settings: AppSettings = field(default_factory=get_settings)
    store: Optional[ResourceStore] = None
    window_policy: WindowPolicy = field(init=False)
    venues: VenueRepository = field(init=False)
    rooms: RoomRepository = field(init=False)
    events: EventRepository = field(init=False)
    queries: EventQueryEngine = field(init=False)

    def __post_init__(self) -> None:
        if self.store is None:
            self.store = build_store(self.settings)
        self.window_policy = WindowPolicy(self.settings.calendar.window_policy)
        self.venues = VenueRepository(self.store)
        self.rooms = RoomRepository(self.store)
        self.events = EventRepository(self.store)
        self.queries = EventQueryEngine(self.events)

    def close(self) -> None:
        if self.store is not None:
            self.store.close()
