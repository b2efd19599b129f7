"""Connection diagnostics - env vars, client creation, and three read-only checks."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Callable, Optional

from course_rankings.constants import DEFAULT_TABLE
from course_rankings.observability import get_logger, log_event
from course_rankings.store import StoreError

logger = get_logger("gcr.diagnostics")

REQUIRED_ENV_VARS = ("SUPABASE_URL", "SUPABASE_ANON_KEY")


@dataclass(frozen=True)
class CheckResult:
    success: bool
    message: str
    error: Optional[dict] = None
    data: Any = None


NOT_RUN = CheckResult(False, "Not tested yet")


@dataclass(frozen=True)
class DiagnosticsReport:
    env_vars: dict[str, bool]
    client_initialized: bool
    connection_test: CheckResult = NOT_RUN
    table_test: CheckResult = NOT_RUN
    query_test: CheckResult = NOT_RUN


def _error_payload(e: Exception) -> dict:
    if isinstance(e, StoreError):
        return e.payload()
    return {"message": str(e), "type": type(e).__name__}


def check_env_vars() -> dict[str, bool]:
    """Which connection settings are defined (non-empty)."""
    return {name: bool(os.getenv(name)) for name in REQUIRED_ENV_VARS}


def check_connection(store, table: str) -> CheckResult:
    try:
        store.count(table)
        return CheckResult(True, "Successfully connected to Supabase")
    except StoreError as e:
        log_event(logger, "connection_test_failed", level=logging.ERROR, error=e.message)
        return CheckResult(False, "Failed to connect to Supabase", error=_error_payload(e))


def check_table(store, table: str) -> CheckResult:
    try:
        store.count(table)
        return CheckResult(True, f"Found '{table}' table")
    except StoreError as e:
        log_event(logger, "table_test_failed", level=logging.ERROR, code=e.code, error=e.message)
        if e.relation_missing:
            return CheckResult(False, f"The '{table}' table does not exist", error=_error_payload(e))
        return CheckResult(False, "Failed to check tables", error=_error_payload(e))


def check_query(store, table: str) -> CheckResult:
    try:
        total = store.count(table)
        sample = store.query(table, limit=1)
        return CheckResult(
            True,
            f"Successfully queried '{table}' table. Found {total} total rows.",
            data=sample,
        )
    except StoreError as e:
        log_event(logger, "query_test_failed", level=logging.ERROR, error=e.message)
        return CheckResult(False, f"Failed to query '{table}' table", error=_error_payload(e))


def run_diagnostics(store_factory: Callable[[], Any], table: str = DEFAULT_TABLE) -> DiagnosticsReport:
    """Run every check. Never raises.

    `store_factory` builds the row store (it reads config, so a missing env
    var shows up as "client not initialized" rather than an exception).
    """
    env_vars = check_env_vars()
    try:
        store = store_factory()
    except Exception as e:  # config ValueError, bad URL from the client, ...
        log_event(logger, "client_init_failed", level=logging.ERROR, error=e)
        failed = CheckResult(False, "Client not initialized", error=_error_payload(e))
        return DiagnosticsReport(
            env_vars=env_vars,
            client_initialized=False,
            connection_test=failed,
            table_test=failed,
            query_test=failed,
        )

    log_event(logger, "diagnostics_started", table=table)
    return DiagnosticsReport(
        env_vars=env_vars,
        client_initialized=True,
        connection_test=check_connection(store, table),
        table_test=check_table(store, table),
        query_test=check_query(store, table),
    )
