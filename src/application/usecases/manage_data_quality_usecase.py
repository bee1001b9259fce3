"""Data-quality remediation use case.

The three remediation actions (null replacement, de-duplication and
normalization) run on the electoral API. After each one the vote list is
reloaded and the quality report recomputed, so the panel always shows the
state the action left behind.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any

from src.application.dtos.admin_dto import RemediationOutputDto
from src.common.logging import get_logger
from src.domain.services.interfaces.electoral_gateway import IElectoralGateway


logger = get_logger(__name__)


class ManageDataQualityUseCase:
    def __init__(self, gateway: IElectoralGateway) -> None:
        self._gateway = gateway

    async def load_votes(self) -> list[dict[str, Any]]:
        return await self._gateway.get_all_votes() or []

    async def analyze(self) -> dict[str, Any]:
        return await self._gateway.analyze_data_quality()

    async def clean_null_data(self) -> RemediationOutputDto:
        return await self._remediate("clean_null", self._gateway.clean_null_data)

    async def remove_duplicates(self) -> RemediationOutputDto:
        return await self._remediate(
            "remove_duplicates", self._gateway.remove_duplicates
        )

    async def normalize_data(self) -> RemediationOutputDto:
        return await self._remediate("normalize", self._gateway.normalize_data)

    async def _remediate(
        self, action: str, call: Callable[[], Awaitable[dict[str, Any]]]
    ) -> RemediationOutputDto:
        result = await call()
        message = str(result.get("message") or "")
        logger.info("Data remediation finished", action=action, message=message)

        votes = await self.load_votes()
        report = await self.analyze()
        return RemediationOutputDto(message=message, votes=votes, report=report)
