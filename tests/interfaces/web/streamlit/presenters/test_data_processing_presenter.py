"""Tests for DataProcessingPresenter."""

from datetime import date
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from src.application.dtos.admin_dto import RemediationOutputDto
from src.infrastructure.external.electoral_api.client import ElectoralApiError
from src.interfaces.web.streamlit.presenters.data_processing_presenter import (
    CSV_HEADERS,
    DataProcessingPresenter,
    cell_display,
)


def _vote(i: int, **overrides) -> dict:
    vote = {
        "id": i,
        "voter_name": f"Votante {i}",
        "voter_dni": f"{i:08d}",
        "voter_email": f"v{i}@correo.pe",
        "voter_location": "Lima, Lima, Miraflores",
        "candidate_id": 1,
        "voted_at": "2025-11-15T10:30:00",
    }
    vote.update(overrides)
    return vote


VOTES = [_vote(i) for i in range(1, 24)]


@pytest.fixture
def session_state():
    state: dict = {}
    with patch("src.interfaces.web.streamlit.utils.session_manager.st") as mock_st:
        mock_st.session_state = state
        yield state


@pytest.fixture
def use_case() -> AsyncMock:
    use_case = AsyncMock()
    use_case.load_votes.return_value = VOTES
    return use_case


@pytest.fixture
def presenter(session_state, use_case) -> DataProcessingPresenter:
    container = MagicMock()
    container.use_cases.manage_data_quality_usecase.return_value = use_case
    return DataProcessingPresenter(container=container)


class TestCellDisplay:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [(None, "NULL"), ("  ", "VACÍO"), ("n/a", "N/A"), ("Ana", "Ana"), (7, "7")],
    )
    def test_cell_display(self, value, expected) -> None:
        assert cell_display(value) == expected


class TestLoading:
    def test_load_stores_votes(self, presenter) -> None:
        assert presenter.load_data() == VOTES
        assert presenter.get_votes() == VOTES

    def test_load_failure_keeps_previous_votes(self, presenter, use_case) -> None:
        presenter.load_data()
        use_case.load_votes.side_effect = RuntimeError("timeout")

        assert presenter.load_data() == VOTES

    def test_analyze_stores_report_and_reloads(self, presenter, use_case) -> None:
        use_case.analyze.return_value = {"success": True, "quality_score": 92.5}

        assert presenter.analyze() == (True, "Análisis completado")
        assert presenter.get_report()["quality_score"] == 92.5
        assert presenter.quality_label() == "Excelente"
        use_case.load_votes.assert_awaited_once()

    def test_analyze_unsuccessful_report(self, presenter, use_case) -> None:
        use_case.analyze.return_value = {"success": False, "message": "Sin votos"}

        assert presenter.analyze() == (False, "Sin votos")
        assert presenter.get_report() is None

    def test_analyze_gateway_error(self, presenter, use_case) -> None:
        use_case.analyze.side_effect = ElectoralApiError(
            "HTTP 500", status_code=500, detail="Error del backend"
        )

        assert presenter.analyze() == (False, "Error del backend")


class TestRemediation:
    def test_clean_null_updates_votes_and_report(self, presenter, use_case) -> None:
        cleaned = VOTES[:5]
        use_case.clean_null_data.return_value = RemediationOutputDto(
            message="3 registros limpiados",
            votes=cleaned,
            report={"success": True, "quality_score": 75},
        )

        assert presenter.clean_null_data() == (True, "3 registros limpiados")
        assert presenter.get_votes() == cleaned
        assert presenter.quality_label() == "Buena"

    def test_failed_remediation_keeps_state(self, presenter, use_case) -> None:
        presenter.load_data()
        use_case.remove_duplicates.side_effect = RuntimeError("boom")

        assert presenter.remove_duplicates() == (False, "Error eliminando duplicados")
        assert presenter.get_votes() == VOTES


class TestTable:
    def test_search_resets_page(self, presenter) -> None:
        presenter.load_data()
        presenter.set_page_number(3)

        presenter.set_search_term("votante 2")

        assert presenter.get_page_number() == 1
        names = [v["voter_name"] for v in presenter.filtered_votes()]
        assert names == ["Votante 2", "Votante 20", "Votante 21", "Votante 22", "Votante 23"]

    def test_current_page_clamps(self, presenter) -> None:
        presenter.load_data()
        presenter.set_page_number(9)

        page = presenter.current_page()

        assert page.number == 3
        assert page.total_pages == 3
        assert len(page.items) == 3
        assert presenter.get_page_number() == 3

    def test_dataframe_flags_issues(self, presenter, use_case) -> None:
        use_case.load_votes.return_value = [
            _vote(1, voter_email="dup@correo.pe"),
            _vote(2, voter_email="dup@correo.pe", voter_name=None),
        ]
        presenter.load_data()

        df = presenter.to_dataframe(presenter.get_votes())

        assert df["Estado"].tolist() == ["Duplicado", "Sin nombre, Duplicado"]
        assert df["Nombre"].tolist()[1] == "NULL"
        assert df["Fecha"].tolist()[0] == "15/11/2025 10:30:00"

    def test_empty_dataframe(self, presenter) -> None:
        assert presenter.to_dataframe([]) is None

    def test_csv_export(self, presenter) -> None:
        presenter.load_data()

        csv = presenter.to_csv(VOTES[:2]).decode("utf-8").splitlines()

        assert csv[0] == ",".join(CSV_HEADERS)
        assert csv[1].endswith("Ninguno")
        assert len(csv) == 3

    def test_csv_filename(self) -> None:
        assert (
            DataProcessingPresenter.csv_filename(date(2025, 11, 15))
            == "votos_procesamiento_2025-11-15.csv"
        )

    def test_marker_count(self, presenter, use_case) -> None:
        use_case.load_votes.return_value = [_vote(1, voter_dni="N/A"), _vote(2)]
        presenter.load_data()

        assert presenter.marker_count() == 1
