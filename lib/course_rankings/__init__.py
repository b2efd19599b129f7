"""Shared library for the golf course rankings app.

Modules:
    config - Environment configuration (RankingsConfig)
    constants - Shared constants (table, columns, page/batch sizes)
    observability - Logging helpers
    store - Supabase row store (requires supabase)
    consensus - Derived consensus ranking
    sorting - Sort state and server/client sort planner
    presentation - Cell text, row details, global filter
    controller - Ranked table controller (paging + sorting)
    importer - CSV import into the row store
    diagnostics - Connection diagnostics
    table_check - Table inspection (row count, schema, sample)
"""

from .config import RankingsConfig

__all__ = ["RankingsConfig"]
