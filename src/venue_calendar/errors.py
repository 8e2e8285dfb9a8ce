"""Error kinds shared by every layer of the service."""

from __future__ import annotations


class VenueCalendarError(Exception):
    """Base class for errors the HTTP boundary knows how to report."""


class ValidationError(VenueCalendarError):
    """Raised for malformed identifiers, timestamps or request bodies."""


class NotFoundError(VenueCalendarError):
    """Raised when an identifier has no matching record."""

    def __init__(self, collection: str, identifier: str) -> None:
        super().__init__(f"No record in '{collection}' with id '{identifier}'.")
        self.collection = collection
        self.identifier = identifier


class InfrastructureError(VenueCalendarError):
    """Raised when the resource store is unreachable or a query fails."""


__all__ = ["InfrastructureError", "NotFoundError", "ValidationError", "VenueCalendarError"]
