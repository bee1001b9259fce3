"""Training-set checks and metric shaping for the model training panel.

The electoral API trains and evaluates models; this module only decides
whether there is enough data to ask for training, and turns the metric rows
the API returns into something the panel can display.
"""

import json
import math

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from src.domain.constants import (
    DEFAULT_TEST_SIZE,
    SMALL_DATASET_TEST_SIZE,
    SMALL_DATASET_THRESHOLD,
)


def is_trainable_vote(vote: dict[str, Any]) -> bool:
    """A vote usable for training has a DNI, a candidate and a timestamp."""
    dni = vote.get("voter_dni")
    return (
        dni is not None
        and str(dni).strip() != ""
        and bool(vote.get("candidate_id"))
        and bool(vote.get("voted_at"))
    )


def count_trainable_votes(votes: Sequence[dict[str, Any]]) -> int:
    return sum(1 for v in votes if is_trainable_vote(v))


def choose_test_size(valid_votes: int) -> float:
    """Hold out less data when the training set is small."""
    if valid_votes < SMALL_DATASET_THRESHOLD:
        return SMALL_DATASET_TEST_SIZE
    return DEFAULT_TEST_SIZE


def parse_json_field(value: Any) -> Any:
    """Decode a JSON-encoded column, passing through already-decoded values.

    Returns ``None`` for empty values and for strings that are not valid
    JSON.
    """
    if not value:
        return None
    if isinstance(value, (dict, list)):
        return value
    if isinstance(value, str):
        try:
            return json.loads(value)
        except json.JSONDecodeError:
            return None
    return None


@dataclass(frozen=True)
class ModelMetricsSummary:
    """Metrics of one trained model, ready to display.

    Classification models fill accuracy/precision/recall/f1. Regression
    models only report ``loss`` (the MSE); ``rmse`` is derived from it.
    """

    accuracy: float | None = None
    precision: float | None = None
    recall: float | None = None
    f1_score: float | None = None
    loss: float | None = None
    mse: float | None = None
    rmse: float | None = None
    mae: float | None = None
    r2_score: float | None = None
    confusion_matrix: list[list[float]] | None = None
    feature_importance: dict[str, float] = field(default_factory=dict)

    @property
    def is_regression(self) -> bool:
        return self.accuracy is None and self.loss is not None

    def sorted_feature_importance(self) -> list[tuple[str, float]]:
        return sorted(
            self.feature_importance.items(), key=lambda item: item[1], reverse=True
        )


def _as_float(value: Any) -> float | None:
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def summarize_metrics(raw: dict[str, Any]) -> ModelMetricsSummary:
    """Build a summary from a ``/models/{id}/metrics`` row or a ``/train`` result.

    Accepts both ``precision`` and ``precision_score`` spellings. MAE and R²
    are shown only when the API reports them.
    """
    accuracy = _as_float(raw.get("accuracy"))
    loss = _as_float(raw.get("loss"))
    mse = _as_float(raw.get("mse"))
    rmse = _as_float(raw.get("rmse"))

    if accuracy is None and loss is not None:
        mse = loss if mse is None else mse
        rmse = math.sqrt(loss) if rmse is None and loss >= 0 else rmse

    confusion = parse_json_field(raw.get("confusion_matrix"))
    importance = parse_json_field(raw.get("feature_importance"))
    if not isinstance(importance, dict):
        importance = {}

    precision = raw.get("precision_score", raw.get("precision"))
    return ModelMetricsSummary(
        accuracy=accuracy,
        precision=_as_float(precision),
        recall=_as_float(raw.get("recall")),
        f1_score=_as_float(raw.get("f1_score")),
        loss=loss,
        mse=mse,
        rmse=rmse,
        mae=_as_float(raw.get("mae")),
        r2_score=_as_float(raw.get("r2_score")),
        confusion_matrix=confusion if isinstance(confusion, list) else None,
        feature_importance={
            str(k): float(v) for k, v in importance.items() if _as_float(v) is not None
        },
    )
