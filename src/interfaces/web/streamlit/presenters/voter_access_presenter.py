"""Presenter for the ``Votar`` page: identity gate plus candidate browser.

The confirmation dialog of the browser records the choice in the browser
session only. Votes reach the electoral API through the full vote form.
"""

from datetime import date
from typing import Any

from src.application.dtos.vote_dto import VerifyVoterAccessOutputDto
from src.application.usecases.verify_voter_access_usecase import (
    VerifyVoterAccessUseCase,
)
from src.common.logging import mask_dni
from src.domain.constants import candidates_by_tier, find_candidate
from src.domain.entities.candidate import Candidate, ElectionTier
from src.domain.services.location_cascade import LocationCascade
from src.domain.services.vote_form_validator import calculate_age
from src.domain.value_objects.voter_access import VoterAccessData
from src.infrastructure.di.container import Container
from src.interfaces.web.streamlit.presenters.base import BasePresenter
from src.interfaces.web.streamlit.utils.session_manager import SessionManager


MSG_NO_CANDIDATE = "No se ha seleccionado ningún candidato"
MSG_CONFIRMED = "¡Voto registrado exitosamente!"
MSG_ALREADY_CONFIRMED = "Ya confirmó su voto en esta sesión"


class VoterAccessPresenter(BasePresenter[VoterAccessData | None]):
    def __init__(self, container: Container | None = None):
        super().__init__(container)
        self.use_case: VerifyVoterAccessUseCase = (
            self.container.use_cases.verify_voter_access_usecase()
        )
        self.cascade: LocationCascade = self.container.services.location_cascade()
        self.session = SessionManager(namespace="voter_access")

    def load_data(self) -> VoterAccessData | None:
        """The verified voter, or None while the gate is closed."""
        return self.session.get("voter")

    def is_verified(self) -> bool:
        return self.load_data() is not None

    # ---- identity gate ----

    def region_options(self) -> list[str]:
        return self.cascade.department_names()

    def district_options(self, region: str | None) -> list[str]:
        """Every district of the region; the gate has no province step."""
        return self.cascade.districts_for_department(region)

    @staticmethod
    def is_minor(birth_date: date | None, today: date | None = None) -> bool:
        if birth_date is None:
            return False
        return calculate_age(birth_date, today or date.today()) < 18

    def verify(self, data: VoterAccessData) -> VerifyVoterAccessOutputDto:
        result = self._run_async(self.use_case.execute(data))
        if result.verified:
            self.session.set("voter", data)
        return result

    def sign_out_voter(self) -> None:
        self.session.delete("voter")
        self.session.delete("confirmed_candidate_id")

    # ---- candidate browser ----

    @staticmethod
    def tiers() -> list[ElectionTier]:
        return list(ElectionTier)

    @staticmethod
    def candidates_for(tier: ElectionTier) -> list[Candidate]:
        return candidates_by_tier(tier)

    @staticmethod
    def get_candidate(candidate_id: int | None) -> Candidate | None:
        return find_candidate(candidate_id)

    def confirm_vote(self, candidate_id: int | None) -> tuple[bool, str]:
        """Record the confirmed choice for this browser session."""
        voter = self.load_data()
        candidate = find_candidate(candidate_id)
        if voter is None or candidate is None:
            return False, MSG_NO_CANDIDATE
        if self.get_confirmed_candidate() is not None:
            return False, MSG_ALREADY_CONFIRMED

        self.session.set("confirmed_candidate_id", candidate.id)
        self.logger.info(
            "Vote confirmed in browser session",
            dni=mask_dni(voter.dni),
            candidate_id=candidate.id,
        )
        return True, MSG_CONFIRMED

    def get_confirmed_candidate(self) -> Candidate | None:
        return find_candidate(self.session.get("confirmed_candidate_id"))

    def handle_action(self, action: str, **kwargs: Any) -> Any:
        if action == "verify":
            data = kwargs.get("data")
            if not isinstance(data, VoterAccessData):
                raise ValueError("verify requires VoterAccessData")
            return self.verify(data)
        elif action == "confirm_vote":
            return self.confirm_vote(kwargs.get("candidate_id"))
        elif action == "sign_out":
            return self.sign_out_voter()
        else:
            raise ValueError(f"Unknown action: {action}")
