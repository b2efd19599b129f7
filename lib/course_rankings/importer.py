"""CSV import - fetch the rankings sheet and load it into the golf_courses table.

Steps:
1. Download the CSV export of the master rankings sheet
2. Map headers to column names (snake_case, with the redesign/restoration
   headers collapsed to fixed names)
3. Drop rows without a club name
4. Clear the table if it already has rows
5. Insert in fixed-size batches, stopping at the first failing batch

Usage:
    result = import_courses(cfg, store)
    if not result.success:
        print(result.details)
"""

from __future__ import annotations

import csv
import io
import re
from dataclasses import dataclass
from typing import Iterable, Optional

import requests

from course_rankings.config import RankingsConfig
from course_rankings.constants import NIL_UUID
from course_rankings.observability import get_logger, log_event
from course_rankings.store import Filter, StoreError

logger = get_logger("gcr.importer")


@dataclass(frozen=True)
class ImportResult:
    """Outcome of an import run, shaped for display."""

    success: bool
    message: str
    details: Optional[str] = None
    count: Optional[int] = None


def normalize_header(header: str) -> str:
    """Map a sheet header to a column name.

    Examples:
        "Club Name" → "club_name"
        "Redesign(s)" → "redesigns"
        "Restoration (Year)" → "restorations"
    """
    h = header.strip()
    lowered = h.lower()
    if "redesign" in lowered:
        return "redesigns"
    if "restoration" in lowered:
        return "restorations"
    return re.sub(r"\s+", "_", lowered)


def parse_courses(csv_text: str) -> list[dict]:
    """Parse CSV text into course dicts, dropping rows without a club name.

    Cells are trimmed; empty cells become None so rating columns sort as
    NULL in the store.
    """
    reader = csv.reader(io.StringIO(csv_text, newline=""))
    try:
        raw_headers = next(reader)
    except StopIteration:
        return []
    headers = [normalize_header(h) for h in raw_headers]

    courses = []
    for values in reader:
        course: dict = {}
        for i, name in enumerate(headers):
            if not name:
                continue
            value = values[i].strip() if i < len(values) else ""
            course[name] = value or None
        if course.get("club_name"):
            courses.append(course)
    return courses


def fetch_csv(url: str, timeout: int = 30) -> str:
    """Download the sheet export. Raises RuntimeError with the HTTP status on failure."""
    response = requests.get(url, timeout=timeout)
    if not response.ok:
        raise RuntimeError(f"Failed to fetch CSV: {response.status_code} {response.reason}")
    return response.text


def _batches(rows: list[dict], size: int) -> Iterable[tuple[int, list[dict]]]:
    for i in range(0, len(rows), size):
        yield i // size + 1, rows[i : i + size]


def replace_courses(store, table: str, courses: list[dict], batch_size: int) -> int:
    """Clear the table (if not empty) and insert courses batch by batch.

    Raises RuntimeError naming the first batch that failed.
    """
    existing = store.count(table)
    if existing > 0:
        store.delete(table, [Filter("id", "neq", NIL_UUID)])
        log_event(logger, "table_cleared", table=table, rows=existing)

    inserted = 0
    for batch_no, batch in _batches(courses, batch_size):
        try:
            store.insert(table, batch)
        except StoreError as e:
            raise RuntimeError(f"Error inserting batch {batch_no}: {e.message}") from e
        inserted += len(batch)
        log_event(
            logger,
            "batch_inserted",
            table=table,
            batch=batch_no,
            inserted=inserted,
            total=len(courses),
        )
    return inserted


def import_courses(cfg: RankingsConfig, store, csv_url: Optional[str] = None) -> ImportResult:
    """Run the full import. Never raises; failures come back as ImportResult."""
    url = csv_url or cfg.import_csv_url
    try:
        csv_text = fetch_csv(url, timeout=cfg.http_timeout)
        courses = parse_courses(csv_text)
        log_event(logger, "csv_parsed", rows=len(courses))

        count = replace_courses(store, cfg.table, courses, cfg.import_batch_size)
        return ImportResult(success=True, message="Data imported successfully!", count=count)
    # StoreError is a RuntimeError (count/delete failures land here too)
    except (requests.RequestException, RuntimeError, csv.Error) as e:
        logger.error("Import error: %s", e)
        return ImportResult(success=False, message="Failed to import data", details=str(e))
