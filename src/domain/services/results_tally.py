"""Display-side shaping of ``GET /results`` rows.

The API already computes vote totals and percentages. Splitting the rows by
race re-bases percentages on each race's own total, because the three races
are independent elections.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from src.domain.constants import find_candidate
from src.domain.entities.candidate import ElectionTier


@dataclass(frozen=True)
class ResultRow:
    candidate_id: int
    name: str
    party: str
    votes: int
    percentage: float
    color: str | None = None


def parse_result_rows(raw_rows: Iterable[dict[str, Any]]) -> list[ResultRow]:
    rows = []
    for raw in raw_rows:
        candidate = find_candidate(raw.get("candidate_id"))
        rows.append(
            ResultRow(
                candidate_id=int(raw.get("candidate_id") or 0),
                name=str(raw.get("name") or ""),
                party=str(raw.get("party") or ""),
                votes=int(raw.get("votes") or 0),
                percentage=float(raw.get("percentage") or 0.0),
                color=candidate.color if candidate else None,
            )
        )
    return rows


def sort_by_votes(rows: Sequence[ResultRow]) -> list[ResultRow]:
    """Most voted first; the sort is stable for ties."""
    return sorted(rows, key=lambda r: r.votes, reverse=True)


def leader(rows: Sequence[ResultRow]) -> ResultRow | None:
    ordered = sort_by_votes(rows)
    return ordered[0] if ordered else None


def tally_for_tier(rows: Sequence[ResultRow], tier: ElectionTier) -> list[ResultRow]:
    """Rows of catalog candidates in ``tier``, with percentages of that race."""
    tier_rows = []
    for row in rows:
        candidate = find_candidate(row.candidate_id)
        if candidate is not None and candidate.tier == tier:
            tier_rows.append(row)

    total = sum(r.votes for r in tier_rows)
    rebased = [
        ResultRow(
            candidate_id=r.candidate_id,
            name=r.name,
            party=r.party,
            votes=r.votes,
            percentage=round(r.votes * 100 / total, 1) if total else 0.0,
            color=r.color,
        )
        for r in tier_rows
    ]
    return sort_by_votes(rebased)
