"""Configuration models and helpers."""

from __future__ import annotations

from .settings import (
    DATA_DIR,
    AppSettings,
    CalendarSettings,
    ServerSettings,
    StoreSettings,
    SupabaseSettings,
    get_settings,
)

__all__ = [
    "AppSettings",
    "CalendarSettings",
    "DATA_DIR",
    "ServerSettings",
    "StoreSettings",
    "SupabaseSettings",
    "get_settings",
]
