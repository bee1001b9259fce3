"""Model training and model catalogue use case."""

from __future__ import annotations

import asyncio

from typing import Any

from src.application.dtos.admin_dto import (
    ModelDetailsOutputDto,
    TrainModelInputDto,
    TrainModelOutputDto,
)
from src.common.logging import get_logger
from src.domain.constants import (
    AVAILABLE_ALGORITHMS,
    DEFAULT_RANDOM_STATE,
    MIN_TRAINING_VOTES,
)
from src.domain.services.interfaces.electoral_gateway import IElectoralGateway
from src.domain.services.model_report import (
    choose_test_size,
    count_trainable_votes,
    summarize_metrics,
)


logger = get_logger(__name__)

MSG_TRAINING_FAILED = "Error en entrenamiento"


class ManageModelsUseCase:
    """Train models on the API and browse the saved ones."""

    def __init__(
        self, gateway: IElectoralGateway, min_training_votes: int = MIN_TRAINING_VOTES
    ) -> None:
        self._gateway = gateway
        self._min_training_votes = min_training_votes

    async def load_training_votes(self) -> list[dict[str, Any]]:
        return await self._gateway.get_all_votes() or []

    async def train(
        self,
        input_dto: TrainModelInputDto,
        votes: list[dict[str, Any]] | None = None,
    ) -> TrainModelOutputDto:
        """Request training once enough usable votes exist.

        Args:
            input_dto: Model type and algorithm
            votes: Vote list already loaded by the caller; fetched when omitted
        """
        algorithms = AVAILABLE_ALGORITHMS.get(input_dto.model_type)
        if algorithms is None or input_dto.algorithm not in algorithms:
            return TrainModelOutputDto(
                success=False,
                error_message=(
                    f"Algoritmo no válido para {input_dto.model_type}: "
                    f"{input_dto.algorithm}"
                ),
            )

        if votes is None:
            votes = await self.load_training_votes()
        valid_votes = count_trainable_votes(votes)
        if valid_votes < self._min_training_votes:
            return TrainModelOutputDto(
                success=False,
                error_message=(
                    f"Solo {valid_votes} votos válidos (DNI + candidato + fecha). "
                    f"Mínimo {self._min_training_votes}."
                ),
            )

        result = await self._gateway.train_model(
            model_type=input_dto.model_type,
            algorithm=input_dto.algorithm,
            test_size=choose_test_size(valid_votes),
            random_state=DEFAULT_RANDOM_STATE,
        )
        if not result.get("success"):
            return TrainModelOutputDto(
                success=False,
                error_message=result.get("error") or MSG_TRAINING_FAILED,
            )

        model_id = result.get("model_id")
        history: list[dict[str, Any]] = []
        if model_id is not None:
            history = await self._fetch_history(int(model_id))

        logger.info(
            "Model trained",
            model_id=model_id,
            model_type=input_dto.model_type,
            algorithm=input_dto.algorithm,
            training_samples=result.get("training_samples"),
        )
        return TrainModelOutputDto(
            success=True,
            model_id=model_id,
            metrics=summarize_metrics(result.get("metrics") or {}),
            history=history,
            training_samples=result.get("training_samples"),
            training_time=result.get("training_time"),
        )

    async def list_models(self) -> list[dict[str, Any]]:
        result = await self._gateway.get_all_models()
        if not result.get("success"):
            return []
        return list(result.get("models") or [])

    async def load_model_details(self, model_id: int) -> ModelDetailsOutputDto:
        """Fetch metrics and history concurrently."""
        metrics_result, history_result = await asyncio.gather(
            self._gateway.get_model_metrics(model_id),
            self._gateway.get_training_history(model_id),
        )
        return ModelDetailsOutputDto(
            model_id=model_id,
            metrics=summarize_metrics(metrics_result) if metrics_result else None,
            history=_history_points(history_result),
        )

    async def delete_model(self, model_id: int) -> bool:
        result = await self._gateway.delete_model(model_id)
        deleted = bool(result.get("success"))
        logger.info("Model delete requested", model_id=model_id, deleted=deleted)
        return deleted

    async def _fetch_history(self, model_id: int) -> list[dict[str, Any]]:
        return _history_points(await self._gateway.get_training_history(model_id))


def _history_points(result: dict[str, Any] | None) -> list[dict[str, Any]]:
    if not result or not result.get("success"):
        return []
    return list(result.get("history") or [])
