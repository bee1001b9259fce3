"""Candidate entity."""

from enum import Enum

from src.domain.entities.base import BaseEntity


class ElectionTier(str, Enum):
    """Level of the race a candidate runs in."""

    PRESIDENTIAL = "presidential"
    REGIONAL = "regional"
    DISTRICT = "district"

    @property
    def label(self) -> str:
        return _TIER_LABELS[self]


_TIER_LABELS = {
    ElectionTier.PRESIDENTIAL: "Presidencial",
    ElectionTier.REGIONAL: "Regional",
    ElectionTier.DISTRICT: "Distrital",
}


class Candidate(BaseEntity):
    """A person running for office, as shown in the candidate browser.

    Instances are shared by every view that displays candidates, so callers
    must treat them as read-only.
    """

    def __init__(
        self,
        id: int,
        name: str,
        party: str,
        tier: ElectionTier,
        color: str,
        bio: str = "",
        education: str = "",
        experience: str = "",
        proposals: tuple[str, ...] = (),
        website: str | None = None,
        email: str | None = None,
    ) -> None:
        """Initialize a candidate.

        Args:
            id: Candidate id, matches ``candidate_id`` on the electoral API
            name: Full name
            party: Party or movement name
            tier: Race the candidate runs in
            color: CSS colour used for the avatar badge (``hsl(...)``)
            bio: Short biography
            education: Education summary
            experience: Experience summary
            proposals: Ordered campaign proposals
            website: Campaign website, if any
            email: Contact email, if any
        """
        super().__init__(id)
        self.name = name
        self.party = party
        self.tier = tier
        self.color = color
        self.bio = bio
        self.education = education
        self.experience = experience
        self.proposals = tuple(proposals)
        self.website = website
        self.email = email

    @property
    def initials(self) -> str:
        """First letter of each word of the name."""
        return "".join(part[0] for part in self.name.split() if part)

    @property
    def headline_proposals(self) -> tuple[str, ...]:
        """The two proposals shown on the candidate card."""
        return self.proposals[:2]

    @property
    def first_proposal(self) -> str | None:
        return self.proposals[0] if self.proposals else None

    @property
    def has_contact(self) -> bool:
        return bool(self.website or self.email)

    def __str__(self) -> str:
        return f"{self.name} ({self.party})"
