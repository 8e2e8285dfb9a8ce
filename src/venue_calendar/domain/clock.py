from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Optional

from dateutil.parser import isoparse

# Every instant the service stores or queries is expressed in this offset.
LOCAL_OFFSET = timezone(timedelta(hours=7))


def to_local(value: datetime) -> datetime:
    """Normalize an aware datetime into ``LOCAL_OFFSET``; naive values are treated as UTC."""

    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(LOCAL_OFFSET)


def parse_timestamp(text: str) -> datetime:
    """Parse an ISO 8601 timestamp, any fraction length accepted. Raises ``ValueError``."""

    return isoparse(text.strip())


def local_now(now: Optional[datetime] = None) -> datetime:
    return to_local(now or datetime.now(timezone.utc))


__all__ = ["LOCAL_OFFSET", "local_now", "parse_timestamp", "to_local"]
