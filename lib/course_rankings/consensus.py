"""Consensus ranking - the derived column averaged from the two publisher ratings.

The consensus value never reaches the store; it only exists on the records
the controller holds in memory, which is why sorting by it has to happen
client-side.
"""

from __future__ import annotations

from typing import Any, Iterable

from course_rankings.constants import CONSENSUS_RANKING, GOLF_DIGEST_RATING, GOLF_MAG_RATING


def parse_rating(value: Any) -> int:
    """Parse a publisher rating to an int; anything unparseable counts as 0.

    Examples:
        "12" → 12
        " 7 " → 7
        "12.5" → 12
        "" / None / "T-3" → 0
    """
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, float) and value != value:  # NaN
        return 0
    if isinstance(value, (int, float)):
        return int(value)
    text = str(value).strip()
    # Leading-integer parse: "12.5" and "12th" both read as 12
    digits = ""
    for i, ch in enumerate(text):
        if ch.isdigit() or (i == 0 and ch in "+-"):
            digits += ch
        else:
            break
    try:
        return int(digits)
    except ValueError:
        return 0


def consensus_ranking(record: dict) -> float:
    """Average the two ratings when both exist, else whichever one does, else 0."""
    digest = parse_rating(record.get(GOLF_DIGEST_RATING))
    mag = parse_rating(record.get(GOLF_MAG_RATING))

    if digest and mag:
        return round((digest + mag) / 2, 1)

    return digest or mag or 0


def with_consensus(records: Iterable[dict]) -> list[dict]:
    """Return copies of the records with the consensus value attached."""
    return [{**r, CONSENSUS_RANKING: consensus_ranking(r)} for r in records]


def sort_by_consensus(records: list[dict], desc: bool = False) -> list[dict]:
    """Stable sort on the consensus value; ties keep their fetch order.

    `sorted(reverse=True)` keeps equal elements in their original order,
    so ties stay in fetch order in both directions.
    """
    return sorted(records, key=lambda r: r.get(CONSENSUS_RANKING) or 0, reverse=desc)
