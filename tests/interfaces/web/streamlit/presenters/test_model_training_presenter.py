"""Tests for ModelTrainingPresenter."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from src.application.dtos.admin_dto import ModelDetailsOutputDto, TrainModelOutputDto
from src.domain.services.model_report import ModelMetricsSummary
from src.interfaces.web.streamlit.presenters.model_training_presenter import (
    ModelTrainingPresenter,
)


VOTES = [
    {"voter_dni": "12345678", "candidate_id": 1, "voted_at": "2025-11-15T10:00:00"},
    {"voter_dni": "", "candidate_id": 1, "voted_at": "2025-11-15T10:05:00"},
    {"voter_dni": "87654321", "candidate_id": None, "voted_at": "2025-11-15T10:10:00"},
]

MODELS = [
    {
        "id": 4,
        "model_name": "random_forest_v4",
        "algorithm": "random_forest",
        "training_data_size": 120,
        "version": 4,
        "is_active": True,
        "created_at": "2025-11-15T12:00:00",
    }
]

METRICS = ModelMetricsSummary(accuracy=0.82, precision=0.8, recall=0.79, f1_score=0.8)


@pytest.fixture
def session_state():
    state: dict = {}
    with patch("src.interfaces.web.streamlit.utils.session_manager.st") as mock_st:
        mock_st.session_state = state
        yield state


@pytest.fixture
def use_case() -> AsyncMock:
    use_case = AsyncMock()
    use_case.load_training_votes.return_value = VOTES
    use_case.list_models.return_value = MODELS
    return use_case


@pytest.fixture
def presenter(session_state, use_case) -> ModelTrainingPresenter:
    container = MagicMock()
    container.use_cases.manage_models_usecase.return_value = use_case
    return ModelTrainingPresenter(container=container)


class TestConfiguration:
    def test_defaults(self, presenter) -> None:
        assert presenter.get_model_type() == "classification"
        assert presenter.get_algorithm() == "random_forest"
        assert "logistic_regression" in presenter.algorithm_options()

    def test_switching_type_resets_algorithm(self, presenter) -> None:
        presenter.set_model_type("regression")

        assert presenter.get_algorithm() == "linear_regression"
        assert "lasso" in presenter.algorithm_options()

    def test_same_type_keeps_algorithm(self, presenter) -> None:
        presenter.set_algorithm("gradient_boosting")

        presenter.set_model_type("classification")

        assert presenter.get_algorithm() == "gradient_boosting"

    def test_invalid_choices_rejected(self, presenter) -> None:
        with pytest.raises(ValueError):
            presenter.set_model_type("clustering")
        with pytest.raises(ValueError):
            presenter.set_algorithm("lasso")

    def test_form_state_survives_rerun(self, session_state, use_case) -> None:
        container = MagicMock()
        container.use_cases.manage_models_usecase.return_value = use_case
        ModelTrainingPresenter(container=container).set_model_type("regression")

        assert ModelTrainingPresenter(container=container).get_model_type() == "regression"


class TestTrainingData:
    def test_load_training_votes(self, presenter) -> None:
        assert presenter.load_training_votes() == (True, "Datos limpios cargados para ML")
        assert presenter.valid_vote_count() == 1

    def test_load_failure(self, presenter, use_case) -> None:
        use_case.load_training_votes.side_effect = RuntimeError("timeout")

        success, _ = presenter.load_training_votes()

        assert not success
        assert presenter.get_training_votes() == []


class TestTraining:
    def test_successful_training_selects_model(self, presenter, use_case) -> None:
        use_case.train.return_value = TrainModelOutputDto(
            success=True,
            model_id=4,
            metrics=METRICS,
            history=[{"epoch": 1, "loss": 0.5, "accuracy": 0.7}],
            training_samples=120,
            training_time=1.234,
        )

        success, message = presenter.train()

        assert success
        assert message == "Modelo entrenado con 120 muestras (1.23s)"
        assert presenter.get_selected_model_id() == 4
        assert presenter.get_metrics() == METRICS
        assert presenter.get_models() == MODELS
        request = use_case.train.await_args.args[0]
        assert (request.model_type, request.algorithm) == ("classification", "random_forest")

    def test_insufficient_data(self, presenter, use_case) -> None:
        use_case.train.return_value = TrainModelOutputDto(
            success=False, error_message="Datos insuficientes: 1 votos válidos. Mínimo 10."
        )

        assert presenter.train() == (
            False,
            "Datos insuficientes: 1 votos válidos. Mínimo 10.",
        )
        assert presenter.get_selected_model_id() is None


class TestSavedModels:
    def test_select_model(self, presenter, use_case) -> None:
        use_case.load_model_details.return_value = ModelDetailsOutputDto(
            model_id=4,
            metrics=METRICS,
            history=[
                {"epoch": 2, "loss": 0.3, "accuracy": 0.8},
                {"epoch": 1, "loss": 0.5, "accuracy": 0.7},
            ],
        )

        assert presenter.select_model(4) == (True, None)

        df = presenter.history_dataframe()
        assert list(df.index) == [1, 2]
        assert list(df.columns) == ["loss", "accuracy"]

    def test_delete_selected_model_clears_selection(self, presenter, use_case) -> None:
        use_case.load_model_details.return_value = ModelDetailsOutputDto(model_id=4)
        use_case.delete_model.return_value = True
        presenter.select_model(4)

        assert presenter.delete_model(4) == (True, "Modelo eliminado")
        assert presenter.get_selected_model_id() is None

    def test_delete_failure(self, presenter, use_case) -> None:
        use_case.delete_model.return_value = False

        assert presenter.delete_model(4) == (False, "Error al eliminar")

    def test_models_dataframe(self, presenter) -> None:
        df = presenter.to_dataframe(MODELS)

        assert df.iloc[0]["Activo"] == "Sí"
        assert presenter.to_dataframe([]) is None

    def test_handle_action_requires_model_id(self, presenter) -> None:
        assert presenter.handle_action("delete") == (False, "ID de modelo no especificado")
