"""Data access layer."""

from __future__ import annotations

from .filters import AnyOf, Between, Contains, Eq, In, Predicate
from .json_store import JsonDocumentStore
from .store import EVENTS, ROOMS, VENUES, ResourceStore
from .supabase import SupabaseGateway, SupabaseNotInitializedError, SupabaseStore

__all__ = [
    "AnyOf",
    "Between",
    "Contains",
    "EVENTS",
    "Eq",
    "In",
    "JsonDocumentStore",
    "Predicate",
    "ROOMS",
    "ResourceStore",
    "SupabaseGateway",
    "SupabaseNotInitializedError",
    "SupabaseStore",
    "VENUES",
]
