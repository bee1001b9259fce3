"""Presenter for the analytics tab of the admin dashboard.

The dashboard is all-or-nothing: the six payloads are loaded together and
kept in session state only when every request succeeded.
"""

from typing import Any

import pandas as pd

from src.application.dtos.admin_dto import AnalyticsDashboardDto
from src.application.usecases.load_analytics_dashboard_usecase import (
    LoadAnalyticsDashboardUseCase,
)
from src.infrastructure.di.container import Container
from src.interfaces.web.streamlit.presenters.base import BasePresenter
from src.interfaces.web.streamlit.utils.session_manager import SessionManager


TOP_DEPARTMENTS = 5


class AnalyticsPresenter(BasePresenter[AnalyticsDashboardDto | None]):
    def __init__(self, container: Container | None = None):
        super().__init__(container)
        self.use_case: LoadAnalyticsDashboardUseCase = (
            self.container.use_cases.load_analytics_dashboard_usecase()
        )
        self.session = SessionManager(namespace="analytics")

    def load_data(self) -> AnalyticsDashboardDto | None:
        """Dashboard from the last successful load, if any."""
        return self.session.get("dashboard")

    def refresh(self) -> tuple[bool, str]:
        try:
            dashboard = self._run_async(self.use_case.execute())
        except Exception as e:
            self.logger.exception(f"Failed to load analytics: {e}")
            return False, "Error al cargar analytics"
        self.session.set("dashboard", dashboard)
        return True, "Analytics cargados exitosamente"

    # ---- shaping ----

    @staticmethod
    def kpis(dashboard: AnalyticsDashboardDto) -> dict[str, Any]:
        return dict(dashboard.overview.get("kpis") or {})

    @staticmethod
    def votes_by_hour(dashboard: AnalyticsDashboardDto) -> pd.DataFrame | None:
        """Votes per hour of day, sorted by hour."""
        raw = dashboard.temporal.get("votes_by_hour") or {}
        if not raw:
            return None
        df = pd.DataFrame(
            [{"Hora": int(hour), "Votos": votes} for hour, votes in raw.items()]
        )
        return df.sort_values("Hora").reset_index(drop=True)

    @staticmethod
    def peak_hour(dashboard: AnalyticsDashboardDto) -> int | None:
        return dashboard.temporal.get("peak_hour")

    @staticmethod
    def distribution(
        dashboard: AnalyticsDashboardDto, key: str
    ) -> pd.DataFrame | None:
        """``gender`` or ``education`` distribution from the overview."""
        raw = (dashboard.overview.get("distributions") or {}).get(key) or {}
        if not raw:
            return None
        return pd.DataFrame(
            [{"Categoría": name, "Votos": value} for name, value in raw.items()]
        )

    @staticmethod
    def top_departments(dashboard: AnalyticsDashboardDto) -> list[tuple[str, int]]:
        raw = dashboard.geographic.get("top_departments") or {}
        return [(dept, int(votes)) for dept, votes in raw.items()][:TOP_DEPARTMENTS]

    @staticmethod
    def clusters(dashboard: AnalyticsDashboardDto) -> list[dict[str, Any]]:
        """Cluster cards; empty when clustering was not successful."""
        clustering = dashboard.clustering
        if not clustering.get("success"):
            return []
        cards = []
        for cluster in clustering.get("clusters") or []:
            traits = cluster.get("characteristics") or {}
            cards.append(
                {
                    "cluster_id": cluster.get("cluster_id"),
                    "size": cluster.get("size", 0),
                    "percentage": cluster.get("percentage", 0),
                    "avg_age": traits.get("avg_age"),
                    "main_gender": _first_key(traits.get("gender_distribution")),
                    "main_education": _first_key(traits.get("education_distribution")),
                    "top_candidate": traits.get("top_candidate"),
                }
            )
        return cards

    @staticmethod
    def predictions(dashboard: AnalyticsDashboardDto) -> list[dict[str, Any]]:
        if not dashboard.predictions.get("success"):
            return []
        return list(dashboard.predictions.get("predictions") or [])

    @staticmethod
    def prediction_model_info(dashboard: AnalyticsDashboardDto) -> dict[str, Any]:
        return dict(dashboard.predictions.get("model_info") or {})

    def handle_action(self, action: str, **kwargs: Any) -> Any:
        if action == "refresh":
            return self.refresh()
        raise ValueError(f"Unknown action: {action}")


def _first_key(mapping: dict[str, Any] | None) -> str | None:
    if not mapping:
        return None
    return next(iter(mapping))
