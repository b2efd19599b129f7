#!/usr/bin/env python3
"""
Course data admin - import the rankings sheet and check the table

Usage:
    python scripts/import_courses.py import
    python scripts/import_courses.py import --csv-url https://example.com/sheet.csv
    python scripts/import_courses.py check
    python scripts/import_courses.py diagnose
"""

import argparse
import json
import os
import sys
from pathlib import Path
from typing import Optional

# Add lib to path for shared utilities
sys.path.insert(0, str(Path(__file__).parent.parent / "lib"))

from course_rankings.config import RankingsConfig
from course_rankings.constants import DEFAULT_TABLE
from course_rankings.diagnostics import run_diagnostics
from course_rankings.importer import import_courses
from course_rankings.observability import get_logger
from course_rankings.store import StoreError, make_store
from course_rankings.table_check import inspect_table


def _load_config() -> Optional[RankingsConfig]:
    """Config from env, or None after printing what is missing."""
    try:
        return RankingsConfig.from_env()
    except ValueError as e:
        print(f"❌ Configuration error: {e}")
        return None


def run_import(csv_url: Optional[str] = None) -> int:
    """Import the sheet; returns a process exit code."""
    cfg = _load_config()
    if cfg is None:
        return 1
    get_logger(json_mode=cfg.log_json)
    result = import_courses(cfg, make_store(cfg), csv_url=csv_url)

    if result.success:
        print(f"✅ {result.message} Imported {result.count} rows.")
        return 0
    print(f"❌ {result.message}")
    if result.details:
        print(f"   {result.details}")
    return 1


def show_table() -> int:
    """Print table status, schema and sample rows."""
    cfg = _load_config()
    if cfg is None:
        return 1
    try:
        info = inspect_table(make_store(cfg), cfg.table)
    except StoreError as e:
        print(f"❌ Error: {e.message}")
        return 1

    print(f"Table:      {cfg.table}")
    print(f"Exists:     {'Yes' if info.exists else 'No'}")
    print(f"Row count:  {info.row_count}")

    if info.schema:
        print("\nSchema:")
        for col in info.schema:
            print(f"  {col['column']:30} {col['dataType']}")

    if info.sample_data:
        print(f"\nSample data (first {len(info.sample_data)} rows):")
        for row in info.sample_data:
            print(f"  {json.dumps(row, default=str)}")
    elif info.exists:
        print("\nThe table exists but contains no data. Run the import first.")
    return 0


def show_diagnostics() -> int:
    """Print the diagnostics report; exit code 1 if any check failed."""

    def _factory():
        return make_store(RankingsConfig.from_env())

    # Config may be incomplete here; that is what diagnostics reports on
    report = run_diagnostics(_factory, table=os.getenv("GCR_TABLE") or DEFAULT_TABLE)

    print("Environment variables:")
    for name, defined in report.env_vars.items():
        print(f"  {'✅' if defined else '❌'} {name}: {'Defined' if defined else 'Not defined'}")
    print(f"\nClient initialized: {'Yes' if report.client_initialized else 'No'}")

    ok = True
    for label, check in (
        ("Connection test", report.connection_test),
        ("Table test", report.table_test),
        ("Query test", report.query_test),
    ):
        ok = ok and check.success
        print(f"\n{label}: {'✅' if check.success else '❌'} {check.message}")
        if check.data:
            print(f"  data: {json.dumps(check.data, default=str, indent=2)}")
        if check.error:
            print(f"  error: {json.dumps(check.error, default=str, indent=2)}")
    return 0 if ok else 1


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Golf course rankings data admin")
    subparsers = parser.add_subparsers(dest="command", help="Command")

    import_parser = subparsers.add_parser("import", help="Import the rankings CSV into the table")
    import_parser.add_argument("--csv-url", help="CSV URL (default: GCR_IMPORT_CSV_URL)")

    subparsers.add_parser("check", help="Show table status, schema and sample rows")
    subparsers.add_parser("diagnose", help="Run connection diagnostics")

    args = parser.parse_args(argv)

    if args.command == "import":
        return run_import(args.csv_url)
    elif args.command == "check":
        return show_table()
    elif args.command == "diagnose":
        return show_diagnostics()
    parser.print_help()
    return 2


if __name__ == "__main__":
    sys.exit(main())
