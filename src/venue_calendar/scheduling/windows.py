"""Calendar-relative time windows for event queries.

Windows are closed intervals expressed in the fixed local offset. When a
client omits a bound, the bound defaults to the edge of the calendar period
(week or month) containing the anchor instant.
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import Optional

from ..domain.clock import local_now, parse_timestamp, to_local
from ..errors import ValidationError

# Python weekday numbering; weeks run Sunday through Saturday.
WEEK_START = 6

RESOLUTION = timedelta(microseconds=1)


class WindowPolicy(str, Enum):
    WEEK = "week"
    MONTH = "month"


@dataclass(frozen=True)
class TimeWindow:
    start: datetime
    end: datetime

    @property
    def span(self) -> timedelta:
        """Length of the window counting the final instant."""

        return self.end - self.start + RESOLUTION


def _beginning_of_day(value: datetime) -> datetime:
    return value.replace(hour=0, minute=0, second=0, microsecond=0)


def beginning_of_week(anchor: datetime) -> datetime:
    day = _beginning_of_day(to_local(anchor))
    return day - timedelta(days=(day.weekday() - WEEK_START) % 7)


def end_of_week(anchor: datetime) -> datetime:
    return beginning_of_week(anchor) + timedelta(days=7) - RESOLUTION


def beginning_of_month(anchor: datetime) -> datetime:
    return _beginning_of_day(to_local(anchor)).replace(day=1)


def end_of_month(anchor: datetime) -> datetime:
    start = beginning_of_month(anchor)
    days = calendar.monthrange(start.year, start.month)[1]
    return start + timedelta(days=days) - RESOLUTION


def period_window(anchor: datetime, policy: WindowPolicy = WindowPolicy.WEEK) -> TimeWindow:
    if policy is WindowPolicy.MONTH:
        return TimeWindow(beginning_of_month(anchor), end_of_month(anchor))
    return TimeWindow(beginning_of_week(anchor), end_of_week(anchor))


def parse_instant(raw: str, name: str = "timestamp") -> datetime:
    """Parse an RFC 3339 timestamp and normalize it into the local offset."""

    text = (raw or "").strip()
    try:
        parsed = parse_timestamp(text)
    except ValueError as exc:
        raise ValidationError(f"{name} must be an RFC 3339 timestamp, got {raw!r}.") from exc
    if parsed.tzinfo is None:
        raise ValidationError(f"{name} must include a UTC offset, got {raw!r}.")
    return to_local(parsed)


def resolve_window(
    start_time: Optional[str] = None,
    end_time: Optional[str] = None,
    *,
    now: Optional[datetime] = None,
    policy: WindowPolicy = WindowPolicy.WEEK,
) -> TimeWindow:
    default = period_window(local_now(now), policy)
    start = parse_instant(start_time, "start_time") if start_time else default.start
    end = parse_instant(end_time, "end_time") if end_time else default.end
    return TimeWindow(start, end)


__all__ = [
    "RESOLUTION",
    "TimeWindow",
    "WEEK_START",
    "WindowPolicy",
    "beginning_of_month",
    "beginning_of_week",
    "end_of_month",
    "end_of_week",
    "parse_instant",
    "period_window",
    "resolve_window",
]
