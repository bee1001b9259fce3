"""Tests for AnalyticsPresenter."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from src.application.dtos.admin_dto import AnalyticsDashboardDto
from src.interfaces.web.streamlit.presenters.analytics_presenter import (
    AnalyticsPresenter,
)


DASHBOARD = AnalyticsDashboardDto(
    overview={
        "kpis": {"total_votes": 150, "participation_rate": 62.5},
        "distributions": {"gender": {"Femenino": 80, "Masculino": 70}},
    },
    demographic={"success": True},
    geographic={
        "top_departments": {
            "Lima": 60,
            "Arequipa": 25,
            "Cusco": 20,
            "Piura": 15,
            "La Libertad": 12,
            "Junín": 10,
        }
    },
    temporal={"votes_by_hour": {"14": 30, "9": 12, "10": 25}, "peak_hour": 14},
    clustering={
        "success": True,
        "clusters": [
            {
                "cluster_id": 0,
                "size": 90,
                "percentage": 60.0,
                "characteristics": {
                    "avg_age": 34.2,
                    "gender_distribution": {"Femenino": 50, "Masculino": 40},
                    "education_distribution": {"Universitaria": 70},
                    "top_candidate": "Keiko Fujimori",
                },
            },
            {"cluster_id": 1, "size": 60, "percentage": 40.0},
        ],
    },
    predictions={
        "success": True,
        "predictions": [{"candidate_id": 1, "probability": 0.41}],
        "model_info": {"algorithm": "random_forest"},
    },
)


@pytest.fixture
def session_state():
    state: dict = {}
    with patch("src.interfaces.web.streamlit.utils.session_manager.st") as mock_st:
        mock_st.session_state = state
        yield state


@pytest.fixture
def use_case() -> AsyncMock:
    use_case = AsyncMock()
    use_case.execute.return_value = DASHBOARD
    return use_case


@pytest.fixture
def presenter(session_state, use_case) -> AnalyticsPresenter:
    container = MagicMock()
    container.use_cases.load_analytics_dashboard_usecase.return_value = use_case
    return AnalyticsPresenter(container=container)


class TestRefresh:
    def test_nothing_loaded_initially(self, presenter) -> None:
        assert presenter.load_data() is None

    def test_refresh_stores_dashboard(self, presenter) -> None:
        assert presenter.refresh() == (True, "Analytics cargados exitosamente")
        assert presenter.load_data() == DASHBOARD

    def test_failed_refresh_keeps_previous_dashboard(self, presenter, use_case) -> None:
        presenter.refresh()
        use_case.execute.side_effect = RuntimeError("one request failed")

        assert presenter.refresh() == (False, "Error al cargar analytics")
        assert presenter.load_data() == DASHBOARD


class TestShaping:
    def test_kpis(self) -> None:
        assert AnalyticsPresenter.kpis(DASHBOARD)["total_votes"] == 150

    def test_votes_by_hour_sorted(self) -> None:
        df = AnalyticsPresenter.votes_by_hour(DASHBOARD)

        assert df["Hora"].tolist() == [9, 10, 14]
        assert df["Votos"].tolist() == [12, 25, 30]
        assert AnalyticsPresenter.peak_hour(DASHBOARD) == 14

    def test_distribution(self) -> None:
        df = AnalyticsPresenter.distribution(DASHBOARD, "gender")

        assert df["Categoría"].tolist() == ["Femenino", "Masculino"]
        assert AnalyticsPresenter.distribution(DASHBOARD, "education") is None

    def test_top_departments_limited_to_five(self) -> None:
        top = AnalyticsPresenter.top_departments(DASHBOARD)

        assert len(top) == 5
        assert top[0] == ("Lima", 60)

    def test_clusters(self) -> None:
        cards = AnalyticsPresenter.clusters(DASHBOARD)

        assert cards[0]["main_gender"] == "Femenino"
        assert cards[0]["top_candidate"] == "Keiko Fujimori"
        assert cards[1]["avg_age"] is None
        assert cards[1]["main_education"] is None

    def test_failed_clustering_and_predictions(self) -> None:
        dashboard = AnalyticsDashboardDto(
            overview={},
            demographic={},
            geographic={},
            temporal={},
            clustering={"success": False},
            predictions={"success": False},
        )

        assert AnalyticsPresenter.clusters(dashboard) == []
        assert AnalyticsPresenter.predictions(dashboard) == []
        assert AnalyticsPresenter.votes_by_hour(dashboard) is None
        assert AnalyticsPresenter.kpis(dashboard) == {}

    def test_predictions(self) -> None:
        assert AnalyticsPresenter.predictions(DASHBOARD)[0]["candidate_id"] == 1
        assert AnalyticsPresenter.prediction_model_info(DASHBOARD) == {
            "algorithm": "random_forest"
        }
