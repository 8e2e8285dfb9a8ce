"""Structured filter clauses understood by every resource store.

A predicate is a tuple of clauses that must all hold. The JSON store
evaluates clauses in-process through ``matches``; the Supabase store
translates them into PostgREST filters.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Iterable, Optional, Tuple, Union

from ..domain.clock import parse_timestamp, to_local


def _as_datetime(value: Any) -> Optional[datetime]:
    if isinstance(value, datetime):
        return to_local(value)
    if isinstance(value, str) and value:
        try:
            return to_local(parse_timestamp(value))
        except ValueError:
            return None
    return None


@dataclass(frozen=True)
class Eq:
    field: str
    value: Any

    def matches(self, record: Dict[str, Any]) -> bool:
        return record.get(self.field) == self.value


@dataclass(frozen=True)
class In:
    field: str
    values: Tuple[Any, ...]

    def matches(self, record: Dict[str, Any]) -> bool:
        return record.get(self.field) in self.values


@dataclass(frozen=True)
class Between:
    """Inclusive on both ends."""

    field: str
    lower: datetime
    upper: datetime

    def matches(self, record: Dict[str, Any]) -> bool:
        value = _as_datetime(record.get(self.field))
        if value is None:
            return False
        return self.lower <= value <= self.upper


@dataclass(frozen=True)
class Contains:
    """Array field holds ``value`` as one of its members."""

    field: str
    value: Any

    def matches(self, record: Dict[str, Any]) -> bool:
        members = record.get(self.field) or []
        return self.value in members


@dataclass(frozen=True)
class AnyOf:
    clauses: Tuple["Clause", ...]

    def matches(self, record: Dict[str, Any]) -> bool:
        return any(clause.matches(record) for clause in self.clauses)


Clause = Union[Eq, In, Between, Contains, AnyOf]
Predicate = Tuple[Clause, ...]


def matches_all(predicate: Iterable[Clause], record: Dict[str, Any]) -> bool:
    return all(clause.matches(record) for clause in predicate)


__all__ = ["AnyOf", "Between", "Clause", "Contains", "Eq", "In", "Predicate", "matches_all"]
