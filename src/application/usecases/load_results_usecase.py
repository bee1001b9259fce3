"""Live election results use case."""

from __future__ import annotations

from src.application.dtos.vote_dto import ResultsOutputDto
from src.domain.services.interfaces.electoral_gateway import IElectoralGateway
from src.domain.services.results_tally import parse_result_rows, sort_by_votes


class LoadResultsUseCase:
    """Fetch ``GET /results`` and order the rows by votes."""

    def __init__(self, gateway: IElectoralGateway) -> None:
        self._gateway = gateway

    async def execute(self) -> ResultsOutputDto:
        data = await self._gateway.get_results()
        rows = sort_by_votes(parse_result_rows(data.get("results") or []))
        total_votes = data.get("total_votes")
        if total_votes is None:
            total_votes = sum(r.votes for r in rows)
        return ResultsOutputDto(
            rows=rows,
            total_votes=int(total_votes),
            timestamp=data.get("timestamp"),
        )
