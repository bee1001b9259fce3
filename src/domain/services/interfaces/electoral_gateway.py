"""Interface of the electoral API gateway."""

from __future__ import annotations

from typing import Any, Protocol

from src.domain.value_objects.vote_submission import VoteSubmission


class ElectoralGatewayError(Exception):
    """A gateway call failed.

    ``status_code`` is set for HTTP error responses; ``detail`` carries the
    server-provided explanation when there is one.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        detail: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail


class IElectoralGateway(Protocol):
    """Remote persistence and computation for votes, models and analytics.

    Every method issues exactly one request and returns the decoded JSON
    body unchanged. Failures raise the gateway's error type.
    """

    async def submit_vote(self, submission: VoteSubmission) -> dict[str, Any]: ...

    async def check_if_voted(self, dni: str, email: str) -> bool: ...

    async def get_all_votes(self) -> list[dict[str, Any]]: ...

    async def get_results(self) -> dict[str, Any]: ...

    async def get_candidates(self) -> dict[str, Any]: ...

    async def analyze_data_quality(self) -> dict[str, Any]: ...

    async def clean_null_data(self) -> dict[str, Any]: ...

    async def remove_duplicates(self) -> dict[str, Any]: ...

    async def normalize_data(self) -> dict[str, Any]: ...

    async def train_model(
        self,
        model_type: str,
        algorithm: str,
        test_size: float | None = None,
        random_state: int | None = None,
    ) -> dict[str, Any]: ...

    async def get_all_models(self) -> dict[str, Any]: ...

    async def get_model_details(self, model_id: int) -> dict[str, Any]: ...

    async def get_model_metrics(self, model_id: int) -> dict[str, Any]: ...

    async def get_training_history(self, model_id: int) -> dict[str, Any]: ...

    async def predict(
        self, model_id: int, features: dict[str, Any]
    ) -> dict[str, Any]: ...

    async def delete_model(self, model_id: int) -> dict[str, Any]: ...

    async def health_check(self) -> dict[str, Any]: ...

    async def get_analytics_overview(self) -> dict[str, Any]: ...

    async def get_analytics_demographic(self) -> dict[str, Any]: ...

    async def get_analytics_geographic(
        self, departamento: str | None = None, provincia: str | None = None
    ) -> dict[str, Any]: ...

    async def get_analytics_temporal(self) -> dict[str, Any]: ...

    async def get_analytics_candidates(self) -> dict[str, Any]: ...

    async def get_analytics_clustering(self, n_clusters: int = 3) -> dict[str, Any]: ...

    async def get_analytics_correlations(self) -> dict[str, Any]: ...

    async def get_analytics_predictions(self) -> dict[str, Any]: ...
