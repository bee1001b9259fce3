"""Voter identity data captured by the access form."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class VoterAccessData:
    """Identity fields typed by the voter before browsing candidates.

    Lives only in the browser session; it is shown again in the vote
    confirmation dialog and never sent anywhere.
    """

    dni: str
    first_names: str
    last_names: str
    birth_date: date | None
    region: str
    district: str

    @property
    def full_name(self) -> str:
        return f"{self.first_names} {self.last_names}".strip()

    @property
    def location_label(self) -> str:
        """``district, region`` as shown in the confirmation dialog."""
        parts = [p for p in (self.district, self.region) if p]
        return ", ".join(parts)
