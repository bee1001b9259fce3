"""Identity verification before the candidate browser.

There is no identity service behind this step. After the local checks pass
the use case waits for a short, configurable delay and accepts the voter.
"""

from __future__ import annotations

import asyncio

from collections.abc import Awaitable, Callable
from datetime import date

from src.application.dtos.vote_dto import VerifyVoterAccessOutputDto
from src.common.logging import get_logger, mask_dni
from src.domain.services.vote_form_validator import (
    MSG_ACCESS_UNDERAGE,
    validate_voter_access,
)
from src.domain.value_objects.voter_access import VoterAccessData


logger = get_logger(__name__)

MSG_VERIFIED = "Identidad verificada exitosamente. Ahora puede proceder a votar."


class VerifyVoterAccessUseCase:
    """Validate the access form, then simulate the verification round-trip."""

    def __init__(
        self,
        delay_seconds: float = 1.2,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._delay_seconds = delay_seconds
        self._sleep = sleep
        self._today = today

    async def execute(self, data: VoterAccessData) -> VerifyVoterAccessOutputDto:
        validation = validate_voter_access(data, self._today())
        if not validation.is_valid:
            message = validation.error_message or ""
            return VerifyVoterAccessOutputDto(
                verified=False,
                message=message,
                is_minor=message == MSG_ACCESS_UNDERAGE,
            )

        await self._sleep(self._delay_seconds)
        logger.info("Voter access granted", dni=mask_dni(data.dni))
        return VerifyVoterAccessOutputDto(verified=True, message=MSG_VERIFIED)
