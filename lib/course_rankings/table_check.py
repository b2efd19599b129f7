"""Table check - existence, row count, schema and a few sample rows."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from course_rankings.observability import get_logger
from course_rankings.store import StoreError

logger = get_logger("gcr.table_check")

SAMPLE_ROWS = 5


@dataclass(frozen=True)
class TableInfo:
    exists: bool
    row_count: int = 0
    sample_data: Optional[list[dict]] = None
    schema: Optional[list[dict]] = None  # [{"column": ..., "dataType": ...}]


def value_type(value: Any) -> str:
    """Loose JSON type name for schema inference from a sample row."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    return "object"


def infer_schema(row: dict) -> list[dict]:
    return [{"column": k, "dataType": value_type(v)} for k, v in row.items()]


def inspect_table(store, table: str) -> TableInfo:
    """Describe a table. A missing relation returns exists=False.

    Raises StoreError for any other failure, with a prefix naming the step.
    """
    schema = store.describe(table)
    if schema is None:
        logger.info("Schema RPC not available, inferring schema from sample rows")

    try:
        count = store.count(table)
    except StoreError as e:
        if e.relation_missing:
            return TableInfo(exists=False)
        raise StoreError(f"Error getting row count: {e.message}", code=e.code, details=e.details) from e

    try:
        sample = store.query(table, limit=SAMPLE_ROWS)
    except StoreError as e:
        raise StoreError(f"Error getting sample data: {e.message}", code=e.code, details=e.details) from e

    if not schema and sample:
        schema = infer_schema(sample[0])

    return TableInfo(exists=True, row_count=count, sample_data=sample, schema=schema or None)
