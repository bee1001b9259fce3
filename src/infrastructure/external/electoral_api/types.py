"""Request and response shapes of the electoral API.

Responses are returned to callers as decoded JSON; the ``TypedDict`` classes
below only document the keys the UI reads.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, TypedDict


@dataclass(frozen=True)
class TrainModelRequest:
    """Body of ``POST /train``."""

    model_type: str
    algorithm: str
    test_size: float | None = None
    random_state: int | None = None

    def to_payload(self) -> dict[str, Any]:
        return {k: v for k, v in asdict(self).items() if v is not None}


class VoteCheckResponse(TypedDict):
    has_voted: bool


class CandidateResult(TypedDict):
    candidate_id: int
    name: str
    party: str
    votes: int
    percentage: float


class ResultsResponse(TypedDict, total=False):
    results: list[CandidateResult]
    total_votes: int
    timestamp: str


class DataQualityReport(TypedDict, total=False):
    success: bool
    message: str
    total_records: int
    complete_records: int
    quality_score: float
    missing_data: int
    duplicates: int
    valid_emails: int


class TrainModelResponse(TypedDict, total=False):
    success: bool
    model_id: int
    session_id: int
    metrics: dict[str, Any]
    training_samples: int
    test_samples: int
    training_time: float
    error: str


class ModelDetails(TypedDict, total=False):
    id: int
    model_name: str
    model_type: str
    version: str
    algorithm: str
    hyperparameters: str
    feature_columns: list[str]
    target_column: str
    training_data_size: int
    is_active: bool
    created_at: str
    created_by: int | None


class ModelMetrics(TypedDict, total=False):
    id: int
    model_id: int
    training_session_id: int
    accuracy: float | None
    precision_score: float | None
    recall: float | None
    f1_score: float | None
    loss: float | None
    confusion_matrix: str | None
    feature_importance: str | None
    recorded_at: str


class TrainingHistoryPoint(TypedDict, total=False):
    id: int
    training_session_id: int
    epoch: int
    loss: float
    accuracy: float
    val_loss: float | None
    val_accuracy: float | None
    learning_rate: float | None
    recorded_at: str
