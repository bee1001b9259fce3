"""Tests for the model training helpers."""

import json
import math

import pytest

from src.domain.services.model_report import (
    choose_test_size,
    count_trainable_votes,
    is_trainable_vote,
    parse_json_field,
    summarize_metrics,
)


class TestTrainableVotes:
    def test_complete_vote_is_trainable(self) -> None:
        vote = {"voter_dni": "12345678", "candidate_id": 2, "voted_at": "2025-01-01"}

        assert is_trainable_vote(vote)

    @pytest.mark.parametrize(
        "override",
        [
            {"voter_dni": None},
            {"voter_dni": "  "},
            {"candidate_id": None},
            {"voted_at": ""},
        ],
    )
    def test_incomplete_vote_is_not_trainable(self, override: dict) -> None:
        vote = {"voter_dni": "12345678", "candidate_id": 2, "voted_at": "2025-01-01"}
        vote.update(override)

        assert not is_trainable_vote(vote)

    def test_count(self) -> None:
        votes = [
            {"voter_dni": "1", "candidate_id": 1, "voted_at": "x"},
            {"voter_dni": None, "candidate_id": 1, "voted_at": "x"},
            {"voter_dni": "2", "candidate_id": 3, "voted_at": "y"},
        ]

        assert count_trainable_votes(votes) == 2


@pytest.mark.parametrize(("valid", "expected"), [(10, 0.1), (19, 0.1), (20, 0.2), (500, 0.2)])
def test_choose_test_size(valid: int, expected: float) -> None:
    assert choose_test_size(valid) == expected


class TestParseJsonField:
    def test_json_string(self) -> None:
        assert parse_json_field('{"edad": 0.4}') == {"edad": 0.4}

    def test_already_decoded(self) -> None:
        assert parse_json_field([[1, 2], [3, 4]]) == [[1, 2], [3, 4]]

    @pytest.mark.parametrize("value", [None, "", "{not json", 42])
    def test_unusable_values(self, value: object) -> None:
        assert parse_json_field(value) is None


class TestSummarizeMetrics:
    def test_classification_metrics(self) -> None:
        raw = {
            "accuracy": 0.85,
            "precision_score": "0.8",
            "recall": 0.75,
            "f1_score": 0.77,
            "confusion_matrix": json.dumps([[5, 1], [2, 7]]),
            "feature_importance": json.dumps({"edad": 0.2, "genero": 0.5}),
        }

        summary = summarize_metrics(raw)

        assert not summary.is_regression
        assert summary.precision == 0.8
        assert summary.confusion_matrix == [[5, 1], [2, 7]]
        assert summary.sorted_feature_importance() == [("genero", 0.5), ("edad", 0.2)]

    def test_regression_derives_mse_and_rmse_from_loss(self) -> None:
        summary = summarize_metrics({"loss": 4.0})

        assert summary.is_regression
        assert summary.mse == 4.0
        assert math.isclose(summary.rmse or 0, 2.0)
        assert summary.mae is None

    def test_explicit_regression_values_win(self) -> None:
        summary = summarize_metrics({"loss": 4.0, "rmse": 1.5, "mae": 0.9, "r2_score": 0.3})

        assert summary.rmse == 1.5
        assert summary.mae == 0.9
        assert summary.r2_score == 0.3

    def test_malformed_json_fields_are_dropped(self) -> None:
        summary = summarize_metrics(
            {"accuracy": 0.5, "confusion_matrix": "[[1,", "feature_importance": "[]"}
        )

        assert summary.confusion_matrix is None
        assert summary.feature_importance == {}
