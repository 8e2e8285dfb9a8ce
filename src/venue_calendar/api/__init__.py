"""Request decoding and response payloads for the HTTP surface."""

from __future__ import annotations

from .decoders import decode_event, decode_room, decode_venue
from .serializers import serialize_event, serialize_room, serialize_venue

__all__ = [
    "decode_event",
    "decode_room",
    "decode_venue",
    "serialize_event",
    "serialize_room",
    "serialize_venue",
]
