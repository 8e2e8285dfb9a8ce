"""Venue Calendar: venues, rooms and bookable events over JSON/HTTP."""

from __future__ import annotations

__version__ = "0.1.0"

__all__ = ["__version__"]
