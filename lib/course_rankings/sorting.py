"""Sort state and the planner that decides where a sort runs.

Store columns are sorted by the store (server-delegated mode). The consensus
ranking is not a store column, so sorting by it means materializing the full
set and sorting it in memory (client-side mode).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from course_rankings.constants import (
    CONSENSUS_RANKING,
    COURSE_COLUMNS,
    DERIVED_COLUMNS,
    RATING_COLUMNS,
)


class SortMode(str, Enum):
    SERVER = "server"
    CLIENT = "client"


@dataclass(frozen=True)
class SortState:
    """Single-column sort. There is no "unsorted" value."""

    key: str
    desc: bool = False

    @property
    def token(self) -> str:
        # e.g. "consensus_ranking-asc"
        return f"{self.key}-{'desc' if self.desc else 'asc'}"


@dataclass(frozen=True)
class OrderBy:
    column: str
    desc: bool = False
    nulls_last: bool | None = None  # None = store default


DEFAULT_SORT = SortState(CONSENSUS_RANKING, desc=False)

SORTABLE_COLUMNS = COURSE_COLUMNS + DERIVED_COLUMNS


def toggle(state: SortState, column: str) -> SortState:
    """Header click: flip direction on the same column, else start ascending."""
    if column == state.key:
        return SortState(column, desc=not state.desc)
    return SortState(column, desc=False)


def plan(key: str) -> SortMode:
    """Pick where a sort on `key` runs."""
    if key in DERIVED_COLUMNS:
        return SortMode.CLIENT
    if key in COURSE_COLUMNS or key == "id":
        return SortMode.SERVER
    raise ValueError(f"Unknown sort column: {key}")


def order_for(state: SortState) -> list[OrderBy]:
    """Store ordering for a server-delegated sort.

    Rating columns put empty values last in both directions. The trailing
    `id` order keeps offset paging deterministic when sort values tie.
    """
    if plan(state.key) is not SortMode.SERVER:
        raise ValueError(f"{state.key} cannot be sorted by the store")

    nulls_last = True if state.key in RATING_COLUMNS else None
    orders = [OrderBy(state.key, desc=state.desc, nulls_last=nulls_last)]
    if state.key != "id":
        orders.append(OrderBy("id"))
    return orders
