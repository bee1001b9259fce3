"""Presenter for the full vote form (``Emitir voto`` page)."""

from typing import Any

from src.application.dtos.vote_dto import CandidateOptionDto, CastVoteOutputDto
from src.application.usecases.cast_vote_usecase import CastVoteUseCase
from src.domain.services.location_cascade import LocationCascade, LocationSelection
from src.domain.value_objects.vote_submission import VoteFormData
from src.infrastructure.di.container import Container
from src.interfaces.web.streamlit.presenters.base import BasePresenter
from src.interfaces.web.streamlit.utils.session_manager import SessionManager


MSG_CANDIDATES_FAILED = "Error al cargar candidatos"


class VotePresenter(BasePresenter[list[CandidateOptionDto]]):
    """Candidates, location cascade and submission of the vote form.

    The location selection lives in session state so that picking a
    department or province survives Streamlit reruns and clears the levels
    below it.
    """

    def __init__(self, container: Container | None = None):
        super().__init__(container)
        self.use_case: CastVoteUseCase = self.container.use_cases.cast_vote_usecase()
        self.cascade: LocationCascade = self.container.services.location_cascade()
        self.session = SessionManager(namespace="vote")

    # ---- candidates ----

    def load_data(self) -> list[CandidateOptionDto]:
        """Candidates from the API, cached for the browser session."""
        cached = self.session.get("candidates")
        if cached is not None:
            return cached
        try:
            candidates = self._run_async(self.use_case.load_candidates())
        except Exception as e:
            self.logger.exception(f"Failed to load candidates: {e}")
            self.session.set("candidates_error", MSG_CANDIDATES_FAILED)
            return []
        self.session.delete("candidates_error")
        self.session.set("candidates", candidates)
        return candidates

    def get_candidates_error(self) -> str | None:
        return self.session.get("candidates_error")

    # ---- location cascade ----

    def get_location(self) -> LocationSelection:
        return self.session.get_or_create("location", LocationSelection())

    def select_department(self, department: str) -> None:
        self.session.set("location", self.get_location().select_department(department))

    def select_province(self, province: str) -> None:
        self.session.set("location", self.get_location().select_province(province))

    def select_district(self, district: str) -> None:
        self.session.set("location", self.get_location().select_district(district))

    def department_options(self) -> list[str]:
        return self.cascade.department_names()

    def province_options(self) -> list[str]:
        return self.cascade.provinces_for(self.get_location().department)

    def district_options(self) -> list[str]:
        location = self.get_location()
        return self.cascade.districts_for(location.department, location.province)

    # ---- submission ----

    def submit(self, form: VoteFormData) -> tuple[bool, str]:
        """Submit the vote; the location comes from the stored selection."""
        location = self.get_location()
        form.department = location.department
        form.province = location.province
        form.district = location.district
        try:
            result: CastVoteOutputDto = self._run_async(self.use_case.execute(form))
        except Exception as e:
            self.logger.exception(f"Failed to cast vote: {e}")
            return False, "Error al registrar el voto. Intenta nuevamente."

        if result.success:
            self.session.set(
                "submitted_voter", f"{form.first_name} {form.last_name}".strip()
            )
        return result.success, result.message

    def get_submitted_voter(self) -> str | None:
        """Name of the voter whose vote was just registered."""
        return self.session.get("submitted_voter")

    def reset(self) -> None:
        """Back to an empty form."""
        self.session.delete("submitted_voter")
        self.session.delete("location")

    def handle_action(self, action: str, **kwargs: Any) -> Any:
        if action == "load_candidates":
            return self.load_data()
        elif action == "select_department":
            return self.select_department(kwargs.get("department", ""))
        elif action == "select_province":
            return self.select_province(kwargs.get("province", ""))
        elif action == "select_district":
            return self.select_district(kwargs.get("district", ""))
        elif action == "submit":
            form = kwargs.get("form")
            if not isinstance(form, VoteFormData):
                return False, "Formulario no válido"
            return self.submit(form)
        elif action == "reset":
            return self.reset()
        else:
            raise ValueError(f"Unknown action: {action}")
