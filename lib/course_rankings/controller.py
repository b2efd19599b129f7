"""Ranked table controller - paging, sorting and view state for the rankings table.

Two ways to produce a page:

- server-delegated: the store sorts and slices (one `range` request per page)
- client-side: used for the consensus ranking, which the store can't order
  by. The full table is fetched once, sorted in memory, and later pages are
  sliced out of that list without further requests.

Every fetch is tagged with the epoch that was current when it was issued.
A sort change bumps the epoch, so a response that lands after the view was
reset is dropped instead of being appended to the new view.
"""

from __future__ import annotations

import logging
from typing import Optional

from course_rankings.consensus import sort_by_consensus, with_consensus
from course_rankings.constants import DEFAULT_TABLE, PAGE_SIZE
from course_rankings.observability import get_logger, log_event
from course_rankings.presentation import matches_filter
from course_rankings.sorting import DEFAULT_SORT, SortMode, SortState, order_for, plan, toggle
from course_rankings.store import StoreError

logger = get_logger("gcr.controller")


def row_key(record: dict) -> str:
    """Row identity used for expansion state."""
    return str(record.get("id"))


class RankedTableController:
    """View state for one rankings table (one per browser session)."""

    def __init__(
        self,
        store,
        table: str = DEFAULT_TABLE,
        page_size: int = PAGE_SIZE,
        sort: SortState = DEFAULT_SORT,
    ):
        plan(sort.key)  # reject unknown columns up front
        self.store = store
        self.table = table
        self.page_size = page_size

        self._sort = sort
        self._sorted_all: Optional[list[dict]] = None  # client-side mode only

        self.rows: list[dict] = []
        self.page = 0
        self.has_more = True
        self.loading = False
        self.loading_more = False
        self.epoch = 0
        self.initial_load_complete = False

        self.expanded: set[str] = set()
        self.filter_text = ""

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def sort(self) -> SortState:
        return self._sort

    @property
    def mode(self) -> SortMode:
        return plan(self._sort.key)

    @property
    def in_flight(self) -> bool:
        return self.loading or self.loading_more

    def _is_current(self, epoch: int) -> bool:
        return epoch == self.epoch

    # -------------------------------------------------------------------------
    # Loading
    # -------------------------------------------------------------------------

    def load_initial(self) -> None:
        """Load the first page under the current sort.

        If the sort changes while this load is pending and no other load has
        replaced the view, the first page is loaded again under the new sort.
        """
        while True:
            epoch = self.epoch
            self._load_first_page()
            if self._is_current(epoch) or self.initial_load_complete:
                return

    def refresh(self) -> None:
        """Discard the view and reload from the first page (user retry)."""
        self._invalidate()
        self._load_first_page()

    def _load_first_page(self) -> bool:
        epoch = self.epoch
        sort = self._sort
        self.loading = True
        try:
            if plan(sort.key) is SortMode.CLIENT:
                records = with_consensus(self.store.fetch_all(self.table))
                sorted_all = sort_by_consensus(records, desc=sort.desc)
                if not self._is_current(epoch):
                    log_event(logger, "stale_page_dropped", epoch=epoch, current=self.epoch, page=0)
                    return False
                self._sorted_all = sorted_all
                page_rows = sorted_all[: self.page_size]
                has_more = len(sorted_all) > self.page_size
            else:
                fetched = self.store.query(
                    self.table,
                    order_by=order_for(sort),
                    offset=0,
                    limit=self.page_size,
                )
                if not self._is_current(epoch):
                    log_event(logger, "stale_page_dropped", epoch=epoch, current=self.epoch, page=0)
                    return False
                self._sorted_all = None
                page_rows = with_consensus(fetched)
                has_more = len(fetched) == self.page_size

            self.rows = page_rows
            self.page = 0
            self.has_more = has_more
            log_event(
                logger,
                "page_loaded",
                mode=plan(sort.key).value,
                sort=sort.token,
                page=0,
                rows=len(page_rows),
                epoch=epoch,
            )
            return True
        except StoreError as e:
            log_event(
                logger,
                "fetch_failed",
                level=logging.ERROR,
                sort=sort.token,
                page=0,
                code=e.code,
                error=e.message,
            )
            return False
        finally:
            if self._is_current(epoch):
                self.loading = False
                self.initial_load_complete = True

    def load_more(self) -> bool:
        """Append the next page. Returns True if rows were appended."""
        if not self.initial_load_complete or self.in_flight or not self.has_more:
            return False

        epoch = self.epoch
        sort = self._sort
        next_page = self.page + 1
        start = next_page * self.page_size
        self.loading_more = True
        try:
            if plan(sort.key) is SortMode.CLIENT:
                if self._sorted_all is None:
                    logger.warning("no sorted set cached for %s; refresh to reload", sort.token)
                    return False
                chunk = self._sorted_all[start : start + self.page_size]
                has_more = len(self._sorted_all) > start + self.page_size
            else:
                fetched = self.store.query(
                    self.table,
                    order_by=order_for(sort),
                    offset=start,
                    limit=self.page_size,
                )
                if not self._is_current(epoch):
                    log_event(
                        logger, "stale_page_dropped", epoch=epoch, current=self.epoch, page=next_page
                    )
                    return False
                chunk = with_consensus(fetched)
                has_more = len(fetched) == self.page_size

            self.rows = self.rows + chunk
            self.page = next_page
            self.has_more = has_more
            log_event(
                logger,
                "page_loaded",
                mode=plan(sort.key).value,
                sort=sort.token,
                page=next_page,
                rows=len(chunk),
                epoch=epoch,
            )
            return True
        except StoreError as e:
            log_event(
                logger,
                "fetch_failed",
                level=logging.ERROR,
                sort=sort.token,
                page=next_page,
                code=e.code,
                error=e.message,
            )
            return False
        finally:
            if self._is_current(epoch):
                self.loading_more = False

    def on_sentinel_visible(self) -> bool:
        """Infinite-scroll trigger: the marker after the last row came into view."""
        return self.load_more()

    # -------------------------------------------------------------------------
    # Sorting
    # -------------------------------------------------------------------------

    def _invalidate(self) -> None:
        self.epoch += 1
        self._sorted_all = None
        self.rows = []
        self.page = 0
        self.has_more = True
        self.loading_more = False

    def set_sort(self, key: str, desc: bool = False) -> None:
        """Change the sort; after the first load this resets and reloads the view."""
        plan(key)
        new_sort = SortState(key, desc=desc)
        if new_sort == self._sort:
            return
        self._sort = new_sort

        if not self.initial_load_complete:
            # Nothing shown yet: the pending/first load picks up the new sort.
            self.epoch += 1
            self._sorted_all = None
            return

        self._invalidate()
        self._load_first_page()

    def toggle_sort(self, column: str) -> None:
        """Header click."""
        new_sort = toggle(self._sort, column)
        self.set_sort(new_sort.key, new_sort.desc)

    # -------------------------------------------------------------------------
    # Expansion / filter
    # -------------------------------------------------------------------------

    def toggle_row(self, row_id: str) -> bool:
        """Flip a row's expanded state; returns the new state."""
        if row_id in self.expanded:
            self.expanded.discard(row_id)
            return False
        self.expanded.add(row_id)
        return True

    def is_expanded(self, row_id: str) -> bool:
        return row_id in self.expanded

    def set_filter(self, text: str) -> None:
        self.filter_text = text or ""

    def visible_rows(self) -> list[dict]:
        """Loaded rows that match the global filter (never triggers a fetch)."""
        return [r for r in self.rows if matches_filter(r, self.filter_text)]
