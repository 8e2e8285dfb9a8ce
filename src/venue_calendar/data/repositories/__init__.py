"""Repositories for first-class domain objects."""

from __future__ import annotations

from .events import EventRepository
from .rooms import RoomRepository
from .venues import VenueRepository

__all__ = ["EventRepository", "RoomRepository", "VenueRepository"]
