"""Electoral API client package."""

from src.domain.constants import AVAILABLE_ALGORITHMS, MODEL_TYPES

from .client import ElectoralApiClient, ElectoralApiError
from .types import (
    DataQualityReport,
    ModelDetails,
    ModelMetrics,
    ResultsResponse,
    TrainingHistoryPoint,
    TrainModelRequest,
    TrainModelResponse,
)


__all__ = [
    "AVAILABLE_ALGORITHMS",
    "DataQualityReport",
    "ElectoralApiClient",
    "ElectoralApiError",
    "MODEL_TYPES",
    "ModelDetails",
    "ModelMetrics",
    "ResultsResponse",
    "TrainModelRequest",
    "TrainModelResponse",
    "TrainingHistoryPoint",
]
