"""Presenter for the live results views (public page and admin tab)."""

from typing import Any

import pandas as pd

from src.application.dtos.vote_dto import ResultsOutputDto
from src.application.usecases.load_results_usecase import LoadResultsUseCase
from src.domain.entities.candidate import ElectionTier
from src.domain.services.interfaces.electoral_gateway import ElectoralGatewayError
from src.domain.services.results_tally import ResultRow, leader, tally_for_tier
from src.infrastructure.di.container import Container
from src.interfaces.web.streamlit.presenters.base import BasePresenter


MSG_RESULTS_FAILED = "Error al cargar resultados"


class ResultsPresenter(BasePresenter[ResultsOutputDto | None]):
    """Fetches ``GET /results`` on every refresh; nothing is cached."""

    def __init__(self, container: Container | None = None):
        super().__init__(container)
        self.use_case: LoadResultsUseCase = (
            self.container.use_cases.load_results_usecase()
        )
        self.last_error: str | None = None

    def load_data(self) -> ResultsOutputDto | None:
        try:
            results = self._run_async(self.use_case.execute())
        except ElectoralGatewayError as e:
            self.logger.warning("Results fetch failed", status_code=e.status_code)
            self.last_error = e.detail or MSG_RESULTS_FAILED
            return None
        except Exception as e:
            self.logger.exception(f"Failed to load results: {e}")
            self.last_error = MSG_RESULTS_FAILED
            return None
        self.last_error = None
        return results

    @staticmethod
    def rows_for_tier(
        results: ResultsOutputDto, tier: ElectionTier
    ) -> list[ResultRow]:
        return tally_for_tier(results.rows, tier)

    @staticmethod
    def leader(rows: list[ResultRow]) -> ResultRow | None:
        return leader(rows)

    @staticmethod
    def total_votes(rows: list[ResultRow]) -> int:
        return sum(r.votes for r in rows)

    def to_dataframe(self, rows: list[ResultRow]) -> pd.DataFrame | None:
        if not rows:
            return None
        return pd.DataFrame(
            [
                {
                    "Candidato": r.name,
                    "Partido": r.party,
                    "Votos": r.votes,
                    "Porcentaje": r.percentage,
                }
                for r in rows
            ]
        )

    def handle_action(self, action: str, **kwargs: Any) -> Any:
        if action == "refresh":
            return self.load_data()
        raise ValueError(f"Unknown action: {action}")
