"""Shared constants for the golf course rankings app.

This module centralizes constants that are used across the library, the
dashboard and the import script.
"""

# =============================================================================
# ROW STORE
# =============================================================================

DEFAULT_TABLE = "golf_courses"

# PostgreSQL "undefined_table" error code, surfaced by PostgREST when the
# relation does not exist.
RELATION_MISSING_CODE = "42P01"

# Supabase caps a single select at 1000 rows by default, so full-set
# fetches are read in chunks of this size.
FETCH_ALL_CHUNK_SIZE = 1000

# Used as a "match every row" filter for deletes (PostgREST refuses a
# DELETE without a filter).
NIL_UUID = "00000000-0000-0000-0000-000000000000"

# RPC that returns (column, dataType) rows for a table, when installed.
SCHEMA_RPC = "get_table_schema"


# =============================================================================
# COLUMNS
# =============================================================================

GOLF_DIGEST_RATING = "golf_digest_country_rating"
GOLF_MAG_RATING = "golf_mag_country_rating"
CONSENSUS_RANKING = "consensus_ranking"

RATING_COLUMNS = (GOLF_DIGEST_RATING, GOLF_MAG_RATING)

# Native columns of the golf_courses table, in display order.
COURSE_COLUMNS = (
    "club_name",
    "course_name",
    "designer",
    "year_built",
    "access",
    GOLF_DIGEST_RATING,
    "city",
    "state_or_region",
    "country",
    GOLF_MAG_RATING,
    "redesigns",
    "restorations",
    "description",
)

# Columns that only exist in the in-memory projection of a record.
DERIVED_COLUMNS = (CONSENSUS_RANKING,)


# =============================================================================
# PAGINATION / IMPORT
# =============================================================================

PAGE_SIZE = 20
IMPORT_BATCH_SIZE = 50

DEFAULT_CSV_URL = (
    "https://hebbkx1anhila5yf.public.blob.vercel-storage.com/"
    "MASTER%20GCR%20-%20Sheet1%20%281%29-6MVjaazXW1nPW5wWw6qgESVm3vXJWI.csv"
)

# Displayed for missing values and an unrated consensus.
NOT_AVAILABLE = "N/A"
