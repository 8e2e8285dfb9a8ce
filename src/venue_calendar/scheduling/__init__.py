"""Time windows, event queries and the decomposed event projection."""

from __future__ import annotations

from .presentation import compose, decompose
from .query import EventQueryEngine, event_predicate, window_predicate
from .windows import TimeWindow, WindowPolicy, parse_instant, period_window, resolve_window

__all__ = [
    "EventQueryEngine",
    "TimeWindow",
    "WindowPolicy",
    "compose",
    "decompose",
    "event_predicate",
    "parse_instant",
    "period_window",
    "resolve_window",
    "window_predicate",
]
