"""Inspection helpers for raw vote records returned by ``GET /votes``.

Records are plain dicts with the keys ``id``, ``voter_name``, ``voter_dni``,
``voter_email``, ``voter_location``, ``candidate_id`` and ``voted_at``. Any
of them may be ``None``, blank or the ``N/A`` marker written by the
backend's null-cleaning step.
"""

import math

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from src.domain.constants import MISSING_VALUE_MARKER


VoteRecord = dict[str, Any]

ISSUE_NO_NAME = "Sin nombre"
ISSUE_NO_DNI = "Sin DNI"
ISSUE_NO_EMAIL = "Sin email"
ISSUE_INVALID_EMAIL = "Email inválido"
ISSUE_NO_LOCATION = "Sin ubicación"
ISSUE_NO_CANDIDATE = "Sin candidato"
ISSUE_DUPLICATE = "Duplicado"

VOTES_PER_PAGE = 10

_SEARCH_FIELDS = ("voter_name", "voter_email", "voter_dni", "voter_location")
_MARKER_FIELDS = ("voter_name", "voter_dni", "voter_email", "voter_location")


def is_missing(value: Any) -> bool:
    """True for ``None``, blank strings and the ``N/A`` marker."""
    if value is None:
        return True
    text = str(value).strip()
    return text == "" or text.upper() == MISSING_VALUE_MARKER


def is_marker(value: Any) -> bool:
    return value is not None and str(value).strip().upper() == MISSING_VALUE_MARKER


class VoteIssueDetector:
    """Lists data-quality problems per vote.

    Duplicate detection needs the whole batch, so the detector counts the
    emails once at construction.
    """

    def __init__(self, votes: Sequence[VoteRecord]) -> None:
        self._email_counts = Counter(
            v.get("voter_email") for v in votes if not is_missing(v.get("voter_email"))
        )

    def issues_for(self, vote: VoteRecord) -> list[str]:
        issues: list[str] = []
        if is_missing(vote.get("voter_name")):
            issues.append(ISSUE_NO_NAME)
        if is_missing(vote.get("voter_dni")):
            issues.append(ISSUE_NO_DNI)

        email = vote.get("voter_email")
        if is_missing(email):
            issues.append(ISSUE_NO_EMAIL)
        elif "@" not in str(email):
            issues.append(ISSUE_INVALID_EMAIL)

        if is_missing(vote.get("voter_location")):
            issues.append(ISSUE_NO_LOCATION)
        if vote.get("candidate_id") is None:
            issues.append(ISSUE_NO_CANDIDATE)

        if not is_missing(email) and self._email_counts[email] > 1:
            issues.append(ISSUE_DUPLICATE)
        return issues


def search_votes(votes: Sequence[VoteRecord], term: str) -> list[VoteRecord]:
    """Case-insensitive substring search over name, email, DNI and location."""
    needle = term.strip().lower()
    if not needle:
        return list(votes)
    return [
        v
        for v in votes
        if any(needle in str(v.get(f) or "").lower() for f in _SEARCH_FIELDS)
    ]


@dataclass(frozen=True)
class Page:
    """One page of a filtered vote list."""

    items: list[VoteRecord]
    number: int
    total_pages: int
    total_items: int

    @property
    def first_index(self) -> int:
        """1-based index of the first row, 0 when the page is empty."""
        if not self.items:
            return 0
        return (self.number - 1) * VOTES_PER_PAGE + 1

    @property
    def last_index(self) -> int:
        if not self.items:
            return 0
        return self.first_index + len(self.items) - 1


def paginate(
    votes: Sequence[VoteRecord], page: int, per_page: int = VOTES_PER_PAGE
) -> Page:
    """Slice ``votes`` into pages; ``page`` is clamped into range."""
    total_pages = max(1, math.ceil(len(votes) / per_page))
    number = min(max(page, 1), total_pages)
    start = (number - 1) * per_page
    return Page(
        items=list(votes[start : start + per_page]),
        number=number,
        total_pages=total_pages,
        total_items=len(votes),
    )


def count_with_marker(votes: Sequence[VoteRecord]) -> int:
    """Votes where any identity field holds the ``N/A`` marker."""
    return sum(1 for v in votes if any(is_marker(v.get(f)) for f in _MARKER_FIELDS))


def quality_label(score: float) -> str:
    if score >= 90:
        return "Excelente"
    if score >= 70:
        return "Buena"
    return "Mejorable"
