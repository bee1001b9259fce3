"""Tests for VotePresenter."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from src.application.dtos.vote_dto import CandidateOptionDto, CastVoteOutputDto
from src.domain.services.location_cascade import LocationSelection
from src.domain.value_objects.vote_submission import VoteFormData
from src.infrastructure.reference_data.ubigeo_loader import get_location_cascade
from src.interfaces.web.streamlit.presenters.vote_presenter import (
    MSG_CANDIDATES_FAILED,
    VotePresenter,
)


CANDIDATES = [
    CandidateOptionDto(id=1, name="Rafael López Aliaga", party="Renovación Popular"),
    CandidateOptionDto(id=2, name="Keiko Fujimori", party="Fuerza Popular"),
]


@pytest.fixture
def session_state():
    state: dict = {}
    with patch("src.interfaces.web.streamlit.utils.session_manager.st") as mock_st:
        mock_st.session_state = state
        yield state


@pytest.fixture
def use_case() -> AsyncMock:
    use_case = AsyncMock()
    use_case.load_candidates.return_value = CANDIDATES
    use_case.execute.return_value = CastVoteOutputDto(
        success=True, message="¡Voto registrado exitosamente!"
    )
    return use_case


@pytest.fixture
def presenter(session_state, use_case) -> VotePresenter:
    container = MagicMock()
    container.use_cases.cast_vote_usecase.return_value = use_case
    container.services.location_cascade.return_value = get_location_cascade()
    return VotePresenter(container=container)


class TestCandidates:
    def test_load_data_caches_in_session(self, presenter, use_case) -> None:
        assert presenter.load_data() == CANDIDATES
        assert presenter.load_data() == CANDIDATES

        use_case.load_candidates.assert_awaited_once()
        assert presenter.get_candidates_error() is None

    def test_load_failure_sets_error(self, presenter, use_case, session_state) -> None:
        use_case.load_candidates.side_effect = RuntimeError("connection refused")

        assert presenter.load_data() == []
        assert presenter.get_candidates_error() == MSG_CANDIDATES_FAILED
        assert "vote_candidates" not in session_state


class TestLocationCascade:
    def test_initial_selection_is_empty(self, presenter) -> None:
        assert presenter.get_location() == LocationSelection()
        assert presenter.province_options() == []
        assert presenter.district_options() == []

    def test_selection_narrows_options(self, presenter) -> None:
        presenter.select_department("Lima")

        assert "Lima" in presenter.province_options()
        assert presenter.district_options() == []

        presenter.select_province("Lima")

        assert "Miraflores" in presenter.district_options()

    def test_new_department_clears_lower_levels(self, presenter) -> None:
        presenter.select_department("Lima")
        presenter.select_province("Lima")
        presenter.select_district("Miraflores")

        presenter.select_department("Cusco")

        location = presenter.get_location()
        assert location.department == "Cusco"
        assert location.province == ""
        assert location.district == ""


class TestSubmit:
    def _fill_location(self, presenter: VotePresenter) -> None:
        presenter.select_department("Lima")
        presenter.select_province("Lima")
        presenter.select_district("Miraflores")

    def test_submit_uses_stored_location(self, presenter, use_case) -> None:
        self._fill_location(presenter)
        form = VoteFormData(candidate_id=1, first_name="Ana", last_name="Quispe")

        success, message = presenter.submit(form)

        assert success
        assert message == "¡Voto registrado exitosamente!"
        submitted: VoteFormData = use_case.execute.await_args.args[0]
        assert (submitted.department, submitted.province, submitted.district) == (
            "Lima",
            "Lima",
            "Miraflores",
        )
        assert presenter.get_submitted_voter() == "Ana Quispe"

    def test_rejected_submission_keeps_form(self, presenter, use_case) -> None:
        use_case.execute.return_value = CastVoteOutputDto(
            success=False, message="Este DNI ya ha votado", already_voted=True
        )

        success, message = presenter.submit(VoteFormData(first_name="Ana"))

        assert not success
        assert message == "Este DNI ya ha votado"
        assert presenter.get_submitted_voter() is None

    def test_unexpected_error_is_reported(self, presenter, use_case) -> None:
        use_case.execute.side_effect = RuntimeError("boom")

        success, message = presenter.submit(VoteFormData())

        assert not success
        assert "Intenta nuevamente" in message

    def test_reset_clears_voter_and_location(self, presenter) -> None:
        self._fill_location(presenter)
        presenter.submit(VoteFormData(first_name="Ana", last_name="Quispe"))

        presenter.reset()

        assert presenter.get_submitted_voter() is None
        assert presenter.get_location() == LocationSelection()


class TestHandleAction:
    def test_submit_requires_form(self, presenter) -> None:
        assert presenter.handle_action("submit", form={"dni": "1"}) == (
            False,
            "Formulario no válido",
        )

    def test_unknown_action(self, presenter) -> None:
        with pytest.raises(ValueError, match="Unknown action"):
            presenter.handle_action("nope")
