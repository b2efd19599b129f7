"""Row store - the golf_courses table behind Supabase's PostgREST API.

Exposes the handful of operations the rest of the app needs (count, query,
insert, delete, describe) and turns every client failure into a StoreError
carrying the PostgREST error code, so callers can tell "relation does not
exist" apart from everything else.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Sequence

import httpx
from postgrest.exceptions import APIError
from supabase import Client, create_client

from course_rankings.config import RankingsConfig
from course_rankings.constants import FETCH_ALL_CHUNK_SIZE, RELATION_MISSING_CODE, SCHEMA_RPC
from course_rankings.observability import get_logger
from course_rankings.sorting import OrderBy

logger = get_logger("gcr.store")

SUPPORTED_FILTER_OPS = ("eq", "neq", "gt", "gte", "lt", "lte")


class StoreError(RuntimeError):
    """Raised when a row store request fails (API error or transport error)."""

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[str] = None,
        hint: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details
        self.hint = hint

    @property
    def relation_missing(self) -> bool:
        return self.code == RELATION_MISSING_CODE

    def payload(self) -> dict:
        """Raw error fields for display in diagnostics."""
        return {
            "message": self.message,
            "code": self.code,
            "details": self.details,
            "hint": self.hint,
        }

    @classmethod
    def from_api_error(cls, err: APIError) -> "StoreError":
        return cls(
            err.message or str(err),
            code=err.code,
            details=err.details,
            hint=err.hint,
        )


@dataclass(frozen=True)
class Filter:
    column: str
    op: str
    value: Any

    def __post_init__(self):
        if self.op not in SUPPORTED_FILTER_OPS:
            raise ValueError(f"Unsupported filter op: {self.op}")


def _apply_filters(builder, filters: Sequence[Filter] | None):
    for f in filters or ():
        builder = getattr(builder, f.op)(f.column, f.value)
    return builder


def _apply_order(builder, order_by: Sequence[OrderBy] | None):
    for o in order_by or ():
        if o.nulls_last is None:
            builder = builder.order(o.column, desc=o.desc)
        else:
            builder = builder.order(o.column, desc=o.desc, nullsfirst=not o.nulls_last)
    return builder


def _execute(builder, action: str):
    """Run a request builder, mapping client failures to StoreError."""
    try:
        return builder.execute()
    except APIError as e:
        raise StoreError.from_api_error(e) from e
    except httpx.HTTPError as e:
        raise StoreError(f"{action} failed: {e}") from e


class SupabaseRowStore:
    """Thin wrapper around a supabase-py Client."""

    def __init__(self, client: Client):
        self.client = client

    def count(self, table: str) -> int:
        """Exact row count (HEAD request, no rows transferred)."""
        resp = _execute(
            self.client.table(table).select("*", count="exact", head=True),
            f"count {table}",
        )
        return resp.count or 0

    def query(
        self,
        table: str,
        filters: Sequence[Filter] | None = None,
        order_by: Sequence[OrderBy] | None = None,
        offset: int | None = None,
        limit: int | None = None,
    ) -> list[dict]:
        """Select rows. `offset` + `limit` become an inclusive PostgREST range."""
        builder = self.client.table(table).select("*")
        builder = _apply_filters(builder, filters)
        builder = _apply_order(builder, order_by)
        if offset is not None and limit is not None:
            builder = builder.range(offset, offset + limit - 1)
        elif limit is not None:
            builder = builder.limit(limit)
        elif offset is not None:
            raise ValueError("offset requires limit")
        resp = _execute(builder, f"query {table}")
        return list(resp.data or [])

    def fetch_all(
        self,
        table: str,
        order_by: Sequence[OrderBy] | None = None,
        chunk_size: int = FETCH_ALL_CHUNK_SIZE,
    ) -> list[dict]:
        """Read the whole table in chunks under the API's max-rows cap."""
        order_by = list(order_by or [OrderBy("id")])
        rows: list[dict] = []
        offset = 0
        while True:
            chunk = self.query(table, order_by=order_by, offset=offset, limit=chunk_size)
            rows.extend(chunk)
            if len(chunk) < chunk_size:
                return rows
            offset += chunk_size

    def insert(self, table: str, records: Sequence[dict]) -> list[dict]:
        if not records:
            return []
        resp = _execute(self.client.table(table).insert(list(records)), f"insert {table}")
        return list(resp.data or [])

    def delete(self, table: str, filters: Sequence[Filter]) -> list[dict]:
        if not filters:
            # PostgREST rejects unfiltered deletes; make callers say "all rows" explicitly
            raise ValueError("delete requires at least one filter")
        builder = _apply_filters(self.client.table(table).delete(), filters)
        resp = _execute(builder, f"delete {table}")
        return list(resp.data or [])

    def describe(self, table: str) -> Optional[list[dict]]:
        """Column/type rows from the schema RPC, or None if the RPC is missing."""
        try:
            resp = _execute(self.client.rpc(SCHEMA_RPC, {"table_name": table}), f"describe {table}")
        except StoreError as e:
            logger.info("schema RPC unavailable for %s: %s", table, e.message)
            return None
        return list(resp.data or [])


def make_store(cfg: RankingsConfig) -> SupabaseRowStore:
    """Create a row store from config."""
    return SupabaseRowStore(create_client(cfg.supabase_url, cfg.supabase_key))
