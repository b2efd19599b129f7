"""Shared pytest fixtures for golf course rankings tests."""

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Add repo root (for scripts/) and lib/ to path for imports
_repo_dir = Path(__file__).parent.parent
if str(_repo_dir) not in sys.path:
    sys.path.insert(0, str(_repo_dir))

_lib_dir = _repo_dir / "lib"
if str(_lib_dir) not in sys.path:
    sys.path.insert(0, str(_lib_dir))

# Dashboard pages import their helpers as top-level `modules` / `utils`
_dashboard_dir = _repo_dir / "dashboard"
if str(_dashboard_dir) not in sys.path:
    sys.path.insert(0, str(_dashboard_dir))

from course_rankings.config import RankingsConfig  # noqa: E402
from course_rankings.store import StoreError  # noqa: E402


class FakeRowStore:
    """In-memory row store with PostgREST-like ordering semantics.

    Ordering follows PostgreSQL defaults (NULLS LAST ascending, NULLS FIRST
    descending) unless an OrderBy sets nulls_last explicitly.
    """

    def __init__(self, rows=None):
        self.rows = [dict(r) for r in rows or []]
        self.calls = []
        self.schema = None
        self.on_fetch = None  # called before each query/fetch_all returns
        self._failures = {}

    def fail(self, op: str, error: StoreError, times: int = 1):
        self._failures[op] = [error, times]

    def _maybe_fail(self, op: str):
        entry = self._failures.get(op)
        if entry and entry[1] > 0:
            entry[1] -= 1
            raise entry[0]

    @staticmethod
    def _sort(rows, order):
        nulls_last = (not order.desc) if order.nulls_last is None else order.nulls_last
        present = [r for r in rows if r.get(order.column) is not None]
        missing = [r for r in rows if r.get(order.column) is None]
        present = sorted(present, key=lambda r: r[order.column], reverse=order.desc)
        return present + missing if nulls_last else missing + present

    @staticmethod
    def _matches(row, f):
        v = row.get(f.column)
        return {
            "eq": lambda: v == f.value,
            "neq": lambda: v != f.value,
            "gt": lambda: v is not None and v > f.value,
            "gte": lambda: v is not None and v >= f.value,
            "lt": lambda: v is not None and v < f.value,
            "lte": lambda: v is not None and v <= f.value,
        }[f.op]()

    def _hook(self):
        if self.on_fetch is not None:
            self.on_fetch()

    def count(self, table):
        self.calls.append(("count", table))
        self._maybe_fail("count")
        return len(self.rows)

    def query(self, table, filters=None, order_by=None, offset=None, limit=None):
        self.calls.append(("query", table, offset, limit, tuple(order_by or ())))
        self._maybe_fail("query")
        rows = [r for r in self.rows if all(self._matches(r, f) for f in filters or ())]
        for order in reversed(list(order_by or ())):
            rows = self._sort(rows, order)
        start = offset or 0
        if limit is not None:
            rows = rows[start : start + limit]
        result = [dict(r) for r in rows]
        self._hook()
        return result

    def fetch_all(self, table, order_by=None):
        self.calls.append(("fetch_all", table))
        self._maybe_fail("fetch_all")
        result = [dict(r) for r in self.rows]
        self._hook()
        return result

    def insert(self, table, records):
        self.calls.append(("insert", table, len(records)))
        self._maybe_fail("insert")
        self.rows.extend(dict(r) for r in records)
        return list(records)

    def delete(self, table, filters):
        self.calls.append(("delete", table, tuple(filters)))
        self._maybe_fail("delete")
        removed = [r for r in self.rows if all(self._matches(r, f) for f in filters)]
        self.rows = [r for r in self.rows if r not in removed]
        return removed

    def describe(self, table):
        self.calls.append(("describe", table))
        return self.schema

    def query_calls(self):
        return [c for c in self.calls if c[0] == "query"]


def make_course(n: int, digest=None, mag=None, **fields) -> dict:
    """A course row with zero-padded id so id order == creation order."""
    return {
        "id": f"c{n:03d}",
        "club_name": f"Club {n}",
        "course_name": "",
        "city": "Springfield",
        "state_or_region": "OR",
        "country": "USA",
        "golf_digest_country_rating": digest,
        "golf_mag_country_rating": mag,
        **fields,
    }


@pytest.fixture
def sample_config():
    """Create a sample RankingsConfig for testing."""
    return RankingsConfig(
        supabase_url="https://example.supabase.co",
        supabase_key="anon-key",
        table="golf_courses",
        page_size=20,
        import_csv_url="https://example.com/courses.csv",
        import_batch_size=50,
        http_timeout=30,
        log_json=False,
    )


@pytest.fixture
def fake_store():
    """Empty in-memory row store."""
    return FakeRowStore()


@pytest.fixture
def store_with():
    """Build an in-memory row store from a list of rows."""
    return FakeRowStore


@pytest.fixture
def course():
    """Course row factory: course(n, digest=..., mag=..., **fields)."""
    return make_course


@pytest.fixture
def course_store():
    """45 courses; digest ratings 1..42 (shuffled) plus 3 unrated."""
    order = [7, 3, 41, 12, 28, 1, 35, 19, 24, 9, 40, 15, 2, 31, 22, 38, 5, 17, 27, 11,
             33, 8, 20, 42, 14, 26, 4, 37, 30, 10, 21, 6, 39, 16, 25, 13, 34, 29, 18, 36,
             23, 32]
    rows = [make_course(i + 1, digest=rating, mag=rating + 1) for i, rating in enumerate(order)]
    rows += [make_course(43, digest=None), make_course(44, digest=None), make_course(45, digest=None)]
    return FakeRowStore(rows)


@pytest.fixture
def mock_supabase_client():
    """Mocked supabase Client whose request builders chain back to themselves."""
    client = MagicMock()
    builder = MagicMock()
    for method in ("select", "order", "range", "limit", "eq", "neq", "gt", "gte", "lt", "lte", "insert", "delete"):
        getattr(builder, method).return_value = builder
    builder.execute.return_value = MagicMock(data=[], count=0)
    client.table.return_value = builder
    client.rpc.return_value = builder
    return client, builder


@pytest.fixture
def mock_env_vars(monkeypatch):
    """Set up mock environment variables."""
    env_vars = {
        "SUPABASE_URL": "https://example.supabase.co",
        "SUPABASE_ANON_KEY": "anon-key",
        "GCR_TABLE": "golf_courses",
        "GCR_PAGE_SIZE": "20",
        "GCR_IMPORT_BATCH_SIZE": "50",
        "GCR_HTTP_TIMEOUT": "30",
        "GCR_LOG_JSON": "false",
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    return env_vars
