from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from platformdirs import user_data_dir

load_dotenv()

APP_NAME = "Venue Calendar"
APP_AUTHOR = "VenueCalendar"
DATA_DIR = Path(user_data_dir(APP_NAME, APP_AUTHOR))


@dataclass(frozen=True)
class SupabaseSettings:
    url: Optional[str]
    anon_key: Optional[str]

    @property
    def is_configured(self) -> bool:
        return bool(self.url and self.anon_key)

    @property
    def missing_env_vars(self) -> list[str]:
        missing = []
        if not self.url:
            missing.append("SUPABASE_URL")
        if not self.anon_key:
            missing.append("SUPABASE_ANON_KEY")
        return missing


@dataclass(frozen=True)
class StoreSettings:
    backend: str
    path: Path
    timeout_seconds: float
    venues_table: str
    rooms_table: str
    events_table: str


@dataclass(frozen=True)
class CalendarSettings:
    window_policy: str


@dataclass(frozen=True)
class ServerSettings:
    host: str
    port: int
    enforce_media_type: bool
    cors_origins: tuple[str, ...]


@dataclass(frozen=True)
class AppSettings:
    supabase: SupabaseSettings
    store: StoreSettings
    calendar: CalendarSettings
    server: ServerSettings


def _bool_from_env(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _float_from_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _origins_from_env(name: str) -> tuple[str, ...]:
    raw = os.getenv(name, "*")
    return tuple(origin.strip() for origin in raw.split(",") if origin.strip())


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    supabase = SupabaseSettings(
        url=os.getenv("SUPABASE_URL"),
        anon_key=os.getenv("SUPABASE_ANON_KEY"),
    )

    store = StoreSettings(
        backend=os.getenv("VENUE_CALENDAR_STORE", "json").strip().lower(),
        path=Path(os.getenv("VENUE_CALENDAR_STORE_PATH", str(DATA_DIR / "store.json"))),
        timeout_seconds=_float_from_env("VENUE_CALENDAR_STORE_TIMEOUT", 10.0),
        venues_table=os.getenv("SUPABASE_VENUES_TABLE", "venues"),
        rooms_table=os.getenv("SUPABASE_ROOMS_TABLE", "rooms"),
        events_table=os.getenv("SUPABASE_EVENTS_TABLE", "events"),
    )

    calendar = CalendarSettings(
        window_policy=os.getenv("VENUE_CALENDAR_WINDOW_POLICY", "week").strip().lower(),
    )

    server = ServerSettings(
        host=os.getenv("VENUE_CALENDAR_HOST", "127.0.0.1"),
        port=int(os.getenv("VENUE_CALENDAR_PORT") or os.getenv("PORT") or "8000"),
        enforce_media_type=_bool_from_env("VENUE_CALENDAR_ENFORCE_MEDIA_TYPE", False),
        cors_origins=_origins_from_env("VENUE_CALENDAR_CORS_ORIGINS"),
    )

    return AppSettings(supabase=supabase, store=store, calendar=calendar, server=server)
