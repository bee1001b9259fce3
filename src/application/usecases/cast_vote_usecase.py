"""Vote casting use case.

Validates the form locally, asks the electoral API whether the DNI/email
already voted, then submits the vote. The check and the submission are two
separate requests; the API rejects a duplicate that slips in between with a
400, which is reported to the voter like any other rejection.
"""

from __future__ import annotations

from typing import Any

from src.application.dtos.vote_dto import CandidateOptionDto, CastVoteOutputDto
from src.common.logging import get_logger, mask_dni
from src.domain.services.interfaces.electoral_gateway import (
    ElectoralGatewayError,
    IElectoralGateway,
)
from src.domain.services.vote_form_validator import validate_vote_form
from src.domain.value_objects.vote_submission import VoteFormData


logger = get_logger(__name__)

MSG_VOTE_REGISTERED = "¡Tu voto ha sido registrado exitosamente!"
MSG_ALREADY_VOTED = "Ya has emitido tu voto anteriormente con este DNI o Email"
MSG_REJECTED_FALLBACK = "Ya has votado anteriormente"
MSG_SUBMIT_FAILED = "Error al registrar el voto. Intenta nuevamente."
MSG_NO_PROPOSALS = "Propuestas no disponibles"


class CastVoteUseCase:
    """Validate → check duplicate → submit."""

    def __init__(self, gateway: IElectoralGateway) -> None:
        self._gateway = gateway

    async def load_candidates(self) -> list[CandidateOptionDto]:
        """Candidates accepted by the API, in API order."""
        data = await self._gateway.get_candidates()
        raw_candidates: list[dict[str, Any]] = data.get("candidates") or []
        return [
            CandidateOptionDto(
                id=int(c["id"]),
                name=str(c.get("name", "")),
                party=str(c.get("party", "")),
                proposals=c.get("proposals") or MSG_NO_PROPOSALS,
            )
            for c in raw_candidates
        ]

    async def execute(self, form: VoteFormData) -> CastVoteOutputDto:
        validation = validate_vote_form(form)
        if not validation.is_valid:
            return CastVoteOutputDto(
                success=False,
                message=validation.error_message or "",
                validation_failed=True,
            )

        submission = form.to_submission()
        try:
            if await self._gateway.check_if_voted(submission.dni, submission.email):
                logger.info("Duplicate vote blocked", dni=mask_dni(submission.dni))
                return CastVoteOutputDto(
                    success=False, message=MSG_ALREADY_VOTED, already_voted=True
                )

            await self._gateway.submit_vote(submission)
        except ElectoralGatewayError as e:
            if e.status_code == 400:
                return CastVoteOutputDto(
                    success=False,
                    message=e.detail or MSG_REJECTED_FALLBACK,
                    already_voted=True,
                )
            logger.warning(
                "Vote submission failed",
                dni=mask_dni(submission.dni),
                status_code=e.status_code,
            )
            return CastVoteOutputDto(success=False, message=MSG_SUBMIT_FAILED)

        logger.info(
            "Vote registered",
            dni=mask_dni(submission.dni),
            candidate_id=submission.candidate_id,
        )
        return CastVoteOutputDto(success=True, message=MSG_VOTE_REGISTERED)
