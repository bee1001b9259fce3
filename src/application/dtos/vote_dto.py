"""DTOs for the voter-facing flows."""

from __future__ import annotations

from dataclasses import dataclass, field

from src.domain.services.results_tally import ResultRow


@dataclass(frozen=True)
class CandidateOptionDto:
    """Candidate offered by the vote form, as listed by ``GET /candidates``."""

    id: int
    name: str
    party: str
    proposals: str = ""

    @property
    def label(self) -> str:
        return f"{self.name} - {self.party}"


@dataclass
class CastVoteOutputDto:
    """Outcome of a vote submission attempt."""

    success: bool
    message: str
    already_voted: bool = False
    validation_failed: bool = False


@dataclass
class VerifyVoterAccessOutputDto:
    """Outcome of the identity verification step."""

    verified: bool
    message: str
    is_minor: bool = False


@dataclass
class ResultsOutputDto:
    """Live results, most voted first."""

    rows: list[ResultRow] = field(default_factory=list)
    total_votes: int = 0
    timestamp: str | None = None
