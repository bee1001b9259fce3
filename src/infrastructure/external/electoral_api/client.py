"""Electoral API client.

httpx async client for the voting backend: vote submission, results, data
quality remediation, model training and analytics. Each method issues one
request and returns the decoded JSON body as-is. There are no retries and
no caching; callers decide what to do with a failure.
"""

from __future__ import annotations

import re

from typing import Any

import httpx

from src.common.logging import get_logger, mask_dni
from src.domain.services.interfaces.electoral_gateway import ElectoralGatewayError
from src.domain.value_objects.vote_submission import VoteSubmission

from .types import TrainModelRequest


logger = get_logger(__name__)

DEFAULT_BASE_URL = "http://localhost:8000/api"
DEFAULT_TIMEOUT_SECONDS = 30.0


class ElectoralApiError(ElectoralGatewayError):
    """Electoral API request failure."""

    @property
    def is_client_error(self) -> bool:
        return self.status_code is not None and 400 <= self.status_code < 500


class ElectoralApiClient:
    """Electoral API client (httpx async)."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._external_client = client
        self._owns_client = client is None

    @property
    def root_url(self) -> str:
        """Base URL without the trailing ``/api`` segment."""
        return re.sub(r"/api$", "", self.base_url)

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create one for this request."""
        if self._external_client is not None:
            return self._external_client
        return httpx.AsyncClient(timeout=self.timeout)

    # ============ Votes ============

    async def submit_vote(self, submission: VoteSubmission) -> dict[str, Any]:
        logger.info(
            "Submitting vote",
            dni=mask_dni(submission.dni),
            candidate_id=submission.candidate_id,
        )
        return await self._request("POST", "/votes", json=submission.to_payload())

    async def check_if_voted(self, dni: str, email: str) -> bool:
        data = await self._request(
            "GET", "/votes/check", params=self._build_params(dni=dni, email=email)
        )
        return bool(data.get("has_voted", False))

    async def get_all_votes(self) -> list[dict[str, Any]]:
        data = await self._request("GET", "/votes")
        return data or []

    async def get_results(self) -> dict[str, Any]:
        return await self._request("GET", "/results")

    async def get_candidates(self) -> dict[str, Any]:
        return await self._request("GET", "/candidates")

    # ============ Data quality ============

    async def analyze_data_quality(self) -> dict[str, Any]:
        return await self._request("GET", "/analyze")

    async def clean_null_data(self) -> dict[str, Any]:
        return await self._request("POST", "/clean-null")

    async def remove_duplicates(self) -> dict[str, Any]:
        return await self._request("POST", "/remove-duplicates")

    async def normalize_data(self) -> dict[str, Any]:
        return await self._request("POST", "/normalize")

    # ============ Models ============

    async def train_model(
        self,
        model_type: str,
        algorithm: str,
        test_size: float | None = None,
        random_state: int | None = None,
    ) -> dict[str, Any]:
        request = TrainModelRequest(
            model_type=model_type,
            algorithm=algorithm,
            test_size=test_size,
            random_state=random_state,
        )
        logger.info("Requesting model training", **request.to_payload())
        return await self._request("POST", "/train", json=request.to_payload())

    async def get_all_models(self) -> dict[str, Any]:
        return await self._request("GET", "/models")

    async def get_model_details(self, model_id: int) -> dict[str, Any]:
        return await self._request("GET", f"/models/{model_id}")

    async def get_model_metrics(self, model_id: int) -> dict[str, Any]:
        return await self._request("GET", f"/models/{model_id}/metrics")

    async def get_training_history(self, model_id: int) -> dict[str, Any]:
        return await self._request("GET", f"/models/{model_id}/history")

    async def predict(self, model_id: int, features: dict[str, Any]) -> dict[str, Any]:
        return await self._request(
            "POST", "/predict", json={"model_id": model_id, "features": features}
        )

    async def delete_model(self, model_id: int) -> dict[str, Any]:
        return await self._request("DELETE", f"/models/{model_id}")

    async def health_check(self) -> dict[str, Any]:
        return await self._request("GET", "/health", base_url=self.root_url)

    # ============ Analytics ============

    async def get_analytics_overview(self) -> dict[str, Any]:
        return await self._request("GET", "/analytics/overview")

    async def get_analytics_demographic(self) -> dict[str, Any]:
        return await self._request("GET", "/analytics/demographic")

    async def get_analytics_geographic(
        self, departamento: str | None = None, provincia: str | None = None
    ) -> dict[str, Any]:
        params = self._build_params(departamento=departamento, provincia=provincia)
        return await self._request("GET", "/analytics/geographic", params=params)

    async def get_analytics_temporal(self) -> dict[str, Any]:
        return await self._request("GET", "/analytics/temporal")

    async def get_analytics_candidates(self) -> dict[str, Any]:
        return await self._request("GET", "/analytics/candidates")

    async def get_analytics_clustering(self, n_clusters: int = 3) -> dict[str, Any]:
        return await self._request(
            "GET", "/analytics/clustering", params={"n_clusters": n_clusters}
        )

    async def get_analytics_correlations(self) -> dict[str, Any]:
        return await self._request("GET", "/analytics/correlations")

    async def get_analytics_predictions(self) -> dict[str, Any]:
        return await self._request("GET", "/analytics/predictions")

    # ============ Transport ============

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
        base_url: str | None = None,
    ) -> Any:
        """Issue one API request and decode the JSON body."""
        url = f"{base_url or self.base_url}{path}"
        client = await self._get_client()

        try:
            response = await client.request(method, url, params=params, json=json)
            response.raise_for_status()
            if not response.content:
                return {}
            return response.json()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            detail = _extract_detail(e.response)
            logger.warning(
                "Electoral API returned an error",
                method=method,
                path=path,
                status_code=status,
                detail=detail,
            )
            raise ElectoralApiError(
                f"API request failed: {status}",
                status_code=status,
                detail=detail,
            ) from e
        except httpx.TimeoutException as e:
            raise ElectoralApiError(f"API request timed out: {method} {path}") from e
        except httpx.HTTPError as e:
            raise ElectoralApiError(f"HTTP error: {e}") from e
        except ValueError as e:
            raise ElectoralApiError(f"Invalid JSON response from {path}") from e
        finally:
            if self._owns_client:
                await client.aclose()

    @staticmethod
    def _build_params(**kwargs: Any) -> dict[str, Any]:
        """Drop ``None`` values so they are not sent as query parameters."""
        return {key: value for key, value in kwargs.items() if value is not None}


def _extract_detail(response: httpx.Response) -> str | None:
    """``detail`` field of a FastAPI-style error body, if any."""
    try:
        body = response.json()
    except ValueError:
        return response.text or None
    if isinstance(body, dict):
        detail = body.get("detail")
        if detail is None:
            return None
        return detail if isinstance(detail, str) else str(detail)
    return None
