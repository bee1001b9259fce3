"""Analytics dashboard use case.

The dashboard shows six analytics payloads side by side and only makes sense
when all of them are available, so they are fetched concurrently and a
single failure fails the whole load.
"""

from __future__ import annotations

import asyncio

from src.application.dtos.admin_dto import AnalyticsDashboardDto
from src.common.logging import get_logger
from src.domain.constants import DEFAULT_CLUSTER_COUNT
from src.domain.services.interfaces.electoral_gateway import IElectoralGateway


logger = get_logger(__name__)


class LoadAnalyticsDashboardUseCase:
    def __init__(
        self, gateway: IElectoralGateway, n_clusters: int = DEFAULT_CLUSTER_COUNT
    ) -> None:
        self._gateway = gateway
        self._n_clusters = n_clusters

    async def execute(self) -> AnalyticsDashboardDto:
        """Fetch every analytics section; raises on the first failure."""
        (
            overview,
            demographic,
            geographic,
            temporal,
            clustering,
            predictions,
        ) = await asyncio.gather(
            self._gateway.get_analytics_overview(),
            self._gateway.get_analytics_demographic(),
            self._gateway.get_analytics_geographic(),
            self._gateway.get_analytics_temporal(),
            self._gateway.get_analytics_clustering(self._n_clusters),
            self._gateway.get_analytics_predictions(),
        )
        logger.info("Analytics dashboard loaded", n_clusters=self._n_clusters)
        return AnalyticsDashboardDto(
            overview=overview,
            demographic=demographic,
            geographic=geographic,
            temporal=temporal,
            clustering=clustering,
            predictions=predictions,
        )
