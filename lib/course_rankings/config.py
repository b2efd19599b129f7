"""Configuration loader for the golf course rankings app - reads env vars and provides RankingsConfig."""

from __future__ import annotations

import os
from dataclasses import dataclass

from course_rankings.constants import (
    DEFAULT_CSV_URL,
    DEFAULT_TABLE,
    IMPORT_BATCH_SIZE,
    PAGE_SIZE,
)


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================


def _env(name: str, default: str | None = None) -> str:
    """Get required env var, raise if missing (fail-fast approach)."""
    v = os.getenv(name, default)
    if v is None or v == "":
        raise ValueError(f"Missing required env var: {name}")
    return v


def _env_bool(name: str, default: bool = False) -> bool:
    """Get boolean env var (accepts 1/true/yes/y/on)."""
    v = os.getenv(name)
    if v is None:
        return default
    return v.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    """Get positive integer env var, raise on garbage."""
    v = os.getenv(name)
    if v is None or v.strip() == "":
        return default
    try:
        n = int(v)
    except ValueError:
        raise ValueError(f"Env var {name} must be an integer, got {v!r}") from None
    if n <= 0:
        raise ValueError(f"Env var {name} must be positive, got {n}")
    return n


# =============================================================================
# CONFIGURATION DATACLASS
# =============================================================================


@dataclass(frozen=True)
class RankingsConfig:
    """Immutable config object holding all app settings from env vars."""

    # Supabase connection
    supabase_url: str
    supabase_key: str  # anon key

    # Row store
    table: str  # "golf_courses"
    page_size: int  # rows per "load more"

    # CSV import
    import_csv_url: str
    import_batch_size: int  # rows per insert request
    http_timeout: int  # seconds

    # Logging
    log_json: bool

    @staticmethod
    def from_env() -> "RankingsConfig":
        """Build RankingsConfig from environment variables.

        Usage: cfg = RankingsConfig.from_env()
        """
        return RankingsConfig(
            # Connection (required - no defaults)
            supabase_url=_env("SUPABASE_URL"),
            supabase_key=_env("SUPABASE_ANON_KEY"),
            # Store
            table=_env("GCR_TABLE", DEFAULT_TABLE),
            page_size=_env_int("GCR_PAGE_SIZE", PAGE_SIZE),
            # Import
            import_csv_url=_env("GCR_IMPORT_CSV_URL", DEFAULT_CSV_URL),
            import_batch_size=_env_int("GCR_IMPORT_BATCH_SIZE", IMPORT_BATCH_SIZE),
            http_timeout=_env_int("GCR_HTTP_TIMEOUT", 30),
            # Logging
            log_json=_env_bool("GCR_LOG_JSON", False),
        )
