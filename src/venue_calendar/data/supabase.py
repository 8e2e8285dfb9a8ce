from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional

import httpx
from postgrest.exceptions import APIError
from supabase import Client, create_client
from supabase.client import ClientOptions

from ..config.settings import StoreSettings, SupabaseSettings
from ..domain.identifiers import new_identifier
from ..errors import InfrastructureError, NotFoundError
from .filters import AnyOf, Between, Clause, Contains, Eq, In, Predicate
from .store import EVENTS, ROOMS, VENUES, Record

logger = logging.getLogger(__name__)


class SupabaseNotInitializedError(InfrastructureError):
    """Raised when accessing the Supabase client without URL or key configured."""


def _quote(value: Any) -> str:
    text = str(value).replace("\\", "\\\\").replace('"', '\\"')
    return f'"{text}"'


def _or_term(clause: Clause) -> str:
    if isinstance(clause, Eq):
        return f"{clause.field}.eq.{_quote(clause.value)}"
    if isinstance(clause, Contains):
        return f"{clause.field}.cs.{{{_quote(clause.value)}}}"
    if isinstance(clause, In):
        values = ",".join(_quote(value) for value in clause.values)
        return f"{clause.field}.in.({values})"
    if isinstance(clause, Between):
        return (
            f"and({clause.field}.gte.{clause.lower.isoformat()},"
            f"{clause.field}.lte.{clause.upper.isoformat()})"
        )
    if isinstance(clause, AnyOf):
        return f"or({','.join(_or_term(inner) for inner in clause.clauses)})"
    raise TypeError(f"Unsupported filter clause: {clause!r}")


def apply_clause(query: Any, clause: Clause) -> Any:
    """Chain the PostgREST filter for ``clause`` onto a select builder."""

    if isinstance(clause, Eq):
        return query.eq(clause.field, clause.value)
    if isinstance(clause, In):
        return query.in_(clause.field, list(clause.values))
    if isinstance(clause, Between):
        return query.gte(clause.field, clause.lower.isoformat()).lte(clause.field, clause.upper.isoformat())
    if isinstance(clause, Contains):
        return query.contains(clause.field, [clause.value])
    if isinstance(clause, AnyOf):
        return query.or_(",".join(_or_term(inner) for inner in clause.clauses))
    raise TypeError(f"Unsupported filter clause: {clause!r}")


@dataclass
class SupabaseGateway:
    """Thin wrapper around the Supabase Python client."""

    settings: SupabaseSettings
    timeout_seconds: float = 10.0
    _client: Optional[Client] = None

    def ensure_client(self) -> Client:
        if self._client is not None:
            return self._client
        if not self.settings.is_configured:
            missing = ", ".join(self.settings.missing_env_vars)
            raise SupabaseNotInitializedError(f"Supabase settings are missing: {missing}.")
        options = ClientOptions(postgrest_client_timeout=self.timeout_seconds)
        self._client = create_client(self.settings.url, self.settings.anon_key, options=options)
        return self._client

    def table(self, name: str):
        return self.ensure_client().table(name)

    def close(self) -> None:
        self._client = None


@contextmanager
def _translate_errors(action: str, collection: str) -> Iterator[None]:
    try:
        yield
    except APIError as exc:
        logger.error("Supabase %s on %s failed: %s", action, collection, exc.message)
        raise InfrastructureError(f"Store {action} on '{collection}' failed.") from exc
    except httpx.TimeoutException as exc:
        logger.error("Supabase %s on %s timed out", action, collection)
        raise InfrastructureError(f"Store {action} on '{collection}' timed out.") from exc
    except httpx.HTTPError as exc:
        logger.error("Supabase %s on %s unreachable: %s", action, collection, exc)
        raise InfrastructureError(f"Store {action} on '{collection}' is unreachable.") from exc


@dataclass
class SupabaseStore:
    """Resource store backed by one Supabase table per collection."""

    gateway: SupabaseGateway
    tables: Dict[str, str] = field(default_factory=lambda: {VENUES: VENUES, ROOMS: ROOMS, EVENTS: EVENTS})

    @classmethod
    def from_settings(cls, supabase: SupabaseSettings, store: StoreSettings) -> "SupabaseStore":
        gateway = SupabaseGateway(supabase, timeout_seconds=store.timeout_seconds)
        tables = {VENUES: store.venues_table, ROOMS: store.rooms_table, EVENTS: store.events_table}
        return cls(gateway=gateway, tables=tables)

    def _table(self, collection: str):
        try:
            name = self.tables[collection]
        except KeyError as exc:
            raise InfrastructureError(f"Unknown collection '{collection}'.") from exc
        return self.gateway.table(name)

    def list(self, collection: str, predicate: Predicate = ()) -> List[Record]:
        with _translate_errors("list", collection):
            query = self._table(collection).select("*")
            for clause in predicate:
                query = apply_clause(query, clause)
            response = query.execute()
        return list(response.data or [])

    def find(self, collection: str, identifier: str) -> Record:
        with _translate_errors("find", collection):
            response = self._table(collection).select("*").eq("id", identifier).limit(1).execute()
        if not response.data:
            raise NotFoundError(collection, identifier)
        return response.data[0]

    def insert(self, collection: str, record: Record) -> str:
        identifier = record.get("id") or new_identifier()
        payload = {**record, "id": identifier}
        with _translate_errors("insert", collection):
            self._table(collection).insert(payload).execute()
        logger.debug("Inserted %s/%s", collection, identifier)
        return identifier

    def replace(self, collection: str, identifier: str, record: Record) -> None:
        payload = {**record, "id": identifier}
        with _translate_errors("replace", collection):
            response = self._table(collection).update(payload).eq("id", identifier).execute()
        if not response.data:
            raise NotFoundError(collection, identifier)

    def delete(self, collection: str, identifier: str) -> None:
        with _translate_errors("delete", collection):
            response = self._table(collection).delete().eq("id", identifier).execute()
        if not response.data:
            raise NotFoundError(collection, identifier)

    def close(self) -> None:
        self.gateway.close()
