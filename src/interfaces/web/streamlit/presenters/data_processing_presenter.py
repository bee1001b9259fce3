"""Presenter for the data-processing tab of the admin dashboard."""

from collections.abc import Awaitable, Callable
from datetime import date, datetime
from typing import Any

import pandas as pd

from src.application.dtos.admin_dto import RemediationOutputDto
from src.application.usecases.manage_data_quality_usecase import (
    ManageDataQualityUseCase,
)
from src.domain.services.interfaces.electoral_gateway import ElectoralGatewayError
from src.domain.services.vote_records import (
    Page,
    VoteIssueDetector,
    count_with_marker,
    is_marker,
    paginate,
    quality_label,
    search_votes,
)
from src.infrastructure.di.container import Container
from src.interfaces.web.streamlit.presenters.base import BasePresenter
from src.interfaces.web.streamlit.utils.session_manager import SessionManager


CSV_HEADERS = [
    "ID",
    "Nombre",
    "DNI",
    "Email",
    "Ubicación",
    "Candidato",
    "Fecha",
    "Problemas",
]
NO_ISSUES = "Ninguno"


def cell_display(value: Any) -> str:
    """Render a raw cell so that nulls, blanks and markers stand out."""
    if value is None:
        return "NULL"
    text = str(value).strip()
    if text == "":
        return "VACÍO"
    if is_marker(text):
        return "N/A"
    return str(value)


def _format_voted_at(value: Any) -> str:
    if not value:
        return "N/A"
    try:
        return datetime.fromisoformat(str(value)).strftime("%d/%m/%Y %H:%M:%S")
    except ValueError:
        return str(value)


class DataProcessingPresenter(BasePresenter[list[dict[str, Any]]]):
    """Vote table, quality report and remediation actions."""

    def __init__(self, container: Container | None = None):
        super().__init__(container)
        self.use_case: ManageDataQualityUseCase = (
            self.container.use_cases.manage_data_quality_usecase()
        )
        self.session = SessionManager(namespace="data_processing")

    # ---- state ----

    def get_votes(self) -> list[dict[str, Any]]:
        return self.session.get("votes", [])

    def get_report(self) -> dict[str, Any] | None:
        return self.session.get("report")

    def get_search_term(self) -> str:
        return self.session.get("search_term", "")

    def set_search_term(self, term: str) -> None:
        if term != self.get_search_term():
            self.session.set("page", 1)
        self.session.set("search_term", term)

    def get_page_number(self) -> int:
        return self.session.get("page", 1)

    def set_page_number(self, page: int) -> None:
        self.session.set("page", page)

    # ---- loading ----

    def load_data(self) -> list[dict[str, Any]]:
        """Reload the vote list from the API into the session."""
        try:
            votes = self._run_async(self.use_case.load_votes())
        except Exception as e:
            self.logger.exception(f"Failed to load votes: {e}")
            return self.get_votes()
        self.session.set("votes", votes)
        return votes

    def analyze(self) -> tuple[bool, str]:
        try:
            report = self._run_async(self.use_case.analyze())
        except ElectoralGatewayError as e:
            self.logger.warning("Quality analysis failed", status_code=e.status_code)
            return False, e.detail or "Error del servidor"
        except Exception as e:
            self.logger.exception(f"Failed to analyze data quality: {e}")
            return False, "Error del servidor"

        if not report.get("success"):
            return False, report.get("message") or "Error en análisis"

        self.session.set("report", report)
        self.load_data()
        return True, "Análisis completado"

    # ---- remediation ----

    def clean_null_data(self) -> tuple[bool, str]:
        return self._remediate(self.use_case.clean_null_data, "Error limpiando datos")

    def remove_duplicates(self) -> tuple[bool, str]:
        return self._remediate(
            self.use_case.remove_duplicates, "Error eliminando duplicados"
        )

    def normalize_data(self) -> tuple[bool, str]:
        return self._remediate(self.use_case.normalize_data, "Error normalizando")

    def _remediate(
        self,
        action: Callable[[], Awaitable[RemediationOutputDto]],
        fallback_error: str,
    ) -> tuple[bool, str]:
        try:
            result = self._run_async(action())
        except ElectoralGatewayError as e:
            self.logger.warning("Remediation failed", status_code=e.status_code)
            return False, e.detail or fallback_error
        except Exception as e:
            self.logger.exception(f"Remediation failed: {e}")
            return False, fallback_error

        self.session.set("votes", result.votes)
        if result.report is not None and result.report.get("success"):
            self.session.set("report", result.report)
        return True, result.message

    # ---- table ----

    def filtered_votes(self) -> list[dict[str, Any]]:
        return search_votes(self.get_votes(), self.get_search_term())

    def current_page(self) -> Page:
        page = paginate(self.filtered_votes(), self.get_page_number())
        if page.number != self.get_page_number():
            self.set_page_number(page.number)
        return page

    def marker_count(self) -> int:
        return count_with_marker(self.get_votes())

    def quality_label(self) -> str | None:
        report = self.get_report()
        if not report:
            return None
        return quality_label(float(report.get("quality_score") or 0))

    def to_dataframe(self, votes: list[dict[str, Any]]) -> pd.DataFrame | None:
        """Vote rows for display, issues computed against the whole vote list."""
        if not votes:
            return None

        detector = VoteIssueDetector(self.get_votes())
        df_data = []
        for vote in votes:
            issues = detector.issues_for(vote)
            df_data.append(
                {
                    "ID": vote.get("id"),
                    "Nombre": cell_display(vote.get("voter_name")),
                    "DNI": cell_display(vote.get("voter_dni")),
                    "Email": cell_display(vote.get("voter_email")),
                    "Ubicación": cell_display(vote.get("voter_location")),
                    "Candidato": cell_display(vote.get("candidate_id")),
                    "Fecha": _format_voted_at(vote.get("voted_at")),
                    "Estado": ", ".join(issues) if issues else "OK",
                }
            )
        return pd.DataFrame(df_data)

    def to_csv(self, votes: list[dict[str, Any]]) -> bytes:
        """CSV export of ``votes`` with one issue column."""
        detector = VoteIssueDetector(self.get_votes())
        rows = [
            [
                vote.get("id"),
                vote.get("voter_name") or "N/A",
                vote.get("voter_dni") or "N/A",
                vote.get("voter_email") or "N/A",
                vote.get("voter_location") or "N/A",
                vote.get("candidate_id") or "N/A",
                _format_voted_at(vote.get("voted_at")),
                ", ".join(detector.issues_for(vote)) or NO_ISSUES,
            ]
            for vote in votes
        ]
        df = pd.DataFrame(rows, columns=CSV_HEADERS)
        return df.to_csv(index=False).encode("utf-8")

    @staticmethod
    def csv_filename(today: date | None = None) -> str:
        day = today or date.today()
        return f"votos_procesamiento_{day.isoformat()}.csv"

    def handle_action(self, action: str, **kwargs: Any) -> Any:
        if action == "load":
            return self.load_data()
        elif action == "analyze":
            return self.analyze()
        elif action == "clean_null":
            return self.clean_null_data()
        elif action == "remove_duplicates":
            return self.remove_duplicates()
        elif action == "normalize":
            return self.normalize_data()
        elif action == "search":
            self.set_search_term(kwargs.get("term", ""))
            return self.filtered_votes()
        else:
            raise ValueError(f"Unknown action: {action}")
