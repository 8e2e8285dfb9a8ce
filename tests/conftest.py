"""Shared fixtures: settings built in-process, a JSON store per test, and the ASGI app."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Callable

import pytest

from venue_calendar.config import (
    AppSettings,
    CalendarSettings,
    ServerSettings,
    StoreSettings,
    SupabaseSettings,
)
from venue_calendar.data import JsonDocumentStore
from venue_calendar.domain import LOCAL_OFFSET, Event
from venue_calendar.services import CalendarService, ServiceContext, VenueService
from venue_calendar.services.http import create_app

SettingsFactory = Callable[..., AppSettings]


def local(*args: int) -> datetime:
    """Build a datetime in the fixed local offset."""
    return datetime(*args, tzinfo=LOCAL_OFFSET)


def make_event(
    *,
    name: str = "Standup",
    location_id: str = "R1",
    owner: str = "u1",
    guests: list[str] | None = None,
    start: datetime | None = None,
    end: datetime | None = None,
) -> Event:
    start = start or local(2024, 3, 4, 9, 0)
    return Event(
        id="",
        name=name,
        location_id=location_id,
        location=f"Room {location_id}",
        owner=owner,
        guests=list(guests or []),
        start_time=start,
        end_time=end or start.replace(hour=start.hour + 1),
    )


@pytest.fixture
def settings_factory(tmp_path: Path) -> SettingsFactory:
    def factory(
        *,
        backend: str = "json",
        window_policy: str = "week",
        enforce_media_type: bool = False,
    ) -> AppSettings:
        return AppSettings(
            supabase=SupabaseSettings(url=None, anon_key=None),
            store=StoreSettings(
                backend=backend,
                path=tmp_path / "store.json",
                timeout_seconds=5.0,
                venues_table="venues",
                rooms_table="rooms",
                events_table="events",
            ),
            calendar=CalendarSettings(window_policy=window_policy),
            server=ServerSettings(
                host="127.0.0.1",
                port=8000,
                enforce_media_type=enforce_media_type,
                cors_origins=("*",),
            ),
        )

    return factory


@pytest.fixture
def settings(settings_factory: SettingsFactory) -> AppSettings:
    return settings_factory()


@pytest.fixture
def store(tmp_path: Path) -> JsonDocumentStore:
    return JsonDocumentStore(tmp_path / "store.json")


@pytest.fixture
def context(settings: AppSettings, store: JsonDocumentStore) -> ServiceContext:
    return ServiceContext(settings=settings, store=store)


@pytest.fixture
def venue_service(context: ServiceContext) -> VenueService:
    return VenueService(context)


@pytest.fixture
def calendar_service(context: ServiceContext) -> CalendarService:
    return CalendarService(context)


@pytest.fixture
def app(settings: AppSettings, store: JsonDocumentStore):
    return create_app(settings, store=store)
