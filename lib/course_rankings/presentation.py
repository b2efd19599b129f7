"""Display helpers for the rankings table: cell text, row details, global filter.

Kept free of Streamlit so the dashboard and the tests render rows the same way.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from course_rankings.constants import (
    CONSENSUS_RANKING,
    GOLF_DIGEST_RATING,
    GOLF_MAG_RATING,
    NOT_AVAILABLE,
)


@dataclass(frozen=True)
class Column:
    key: str  # sort key
    label: str
    sortable: bool = True


# Main (collapsed) table columns
TABLE_COLUMNS = [
    Column("club_name", "Course"),
    Column("city", "Location", sortable=False),
    Column(GOLF_DIGEST_RATING, "Golf Digest"),
    Column(GOLF_MAG_RATING, "Golf Mag"),
    Column(CONSENSUS_RANKING, "Consensus"),
]


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def or_na(value: Any) -> str:
    """Field text, or "N/A" when empty."""
    return _text(value) or NOT_AVAILABLE


def course_label(record: dict) -> str:
    """ "Pine Valley (East)" - course name only when present."""
    club = _text(record.get("club_name"))
    course = _text(record.get("course_name"))
    return f"{club} ({course})" if course else club


def location_label(record: dict) -> str:
    city = _text(record.get("city"))
    state = _text(record.get("state_or_region"))
    return ", ".join(p for p in (city, state) if p)


def rating_label(value: Any) -> str:
    if value == 0 and not isinstance(value, str):
        return NOT_AVAILABLE
    return _text(value) or NOT_AVAILABLE


def consensus_label(value: Any) -> str:
    """One decimal place, "N/A" when unrated."""
    if not value:
        return NOT_AVAILABLE
    return f"{float(value):.1f}"


def render_cells(record: dict) -> dict[str, str]:
    """Rendered text per main table column, keyed by column key."""
    return {
        "club_name": course_label(record),
        "city": location_label(record),
        GOLF_DIGEST_RATING: rating_label(record.get(GOLF_DIGEST_RATING)),
        GOLF_MAG_RATING: rating_label(record.get(GOLF_MAG_RATING)),
        CONSENSUS_RANKING: consensus_label(record.get(CONSENSUS_RANKING)),
    }


def matches_filter(record: dict, needle: str) -> bool:
    """Case-insensitive substring match against any rendered main-table cell."""
    needle = (needle or "").strip().lower()
    if not needle:
        return True
    return any(needle in cell.lower() for cell in render_cells(record).values())


def detail_sections(record: dict) -> list[tuple[str, list[tuple[str, str]]]]:
    """Sections shown when a row is expanded, as (title, [(label, text), ...]).

    Modifications and Description only appear when they have content.
    """
    sections = [
        (
            "Course Details",
            [
                ("Designer", or_na(record.get("designer"))),
                ("Year Built", or_na(record.get("year_built"))),
                ("Access", or_na(record.get("access"))),
            ],
        ),
        (
            "Location",
            [
                ("City", or_na(record.get("city"))),
                ("State/Region", or_na(record.get("state_or_region"))),
                ("Country", or_na(record.get("country"))),
            ],
        ),
    ]

    mods = []
    if _text(record.get("redesigns")):
        mods.append(("Redesigns", _text(record.get("redesigns"))))
    if _text(record.get("restorations")):
        mods.append(("Restorations", _text(record.get("restorations"))))
    if mods:
        sections.append(("Modifications", mods))

    if _text(record.get("description")):
        sections.append(("Description", [("", _text(record.get("description")))]))

    return sections
