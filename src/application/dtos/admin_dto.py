"""DTOs for the administrator dashboard."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from src.domain.services.interfaces.admin_auth_service import AdminUser
from src.domain.services.model_report import ModelMetricsSummary


@dataclass(frozen=True)
class AnalyticsDashboardDto:
    """The six analytics payloads the dashboard renders together."""

    overview: dict[str, Any]
    demographic: dict[str, Any]
    geographic: dict[str, Any]
    temporal: dict[str, Any]
    clustering: dict[str, Any]
    predictions: dict[str, Any]


@dataclass
class RemediationOutputDto:
    """Result of a data-quality action followed by a reload.

    ``votes`` and ``report`` are the refreshed vote list and quality report.
    """

    message: str
    votes: list[dict[str, Any]] = field(default_factory=list)
    report: dict[str, Any] | None = None


@dataclass(frozen=True)
class TrainModelInputDto:
    model_type: str
    algorithm: str


@dataclass
class TrainModelOutputDto:
    """Outcome of a training request."""

    success: bool
    model_id: int | None = None
    metrics: ModelMetricsSummary | None = None
    history: list[dict[str, Any]] = field(default_factory=list)
    training_samples: int | None = None
    training_time: float | None = None
    error_message: str | None = None


@dataclass
class ModelDetailsOutputDto:
    """Metrics and training history of a saved model."""

    model_id: int
    metrics: ModelMetricsSummary | None = None
    history: list[dict[str, Any]] = field(default_factory=list)


@dataclass
class AdminLoginOutputDto:
    success: bool
    message: str
    user: AdminUser | None = None
