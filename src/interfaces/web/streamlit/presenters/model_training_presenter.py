"""Presenter for the model-training tab of the admin dashboard."""

from typing import Any

import pandas as pd

from src.application.dtos.admin_dto import TrainModelInputDto
from src.application.usecases.manage_models_usecase import ManageModelsUseCase
from src.domain.constants import AVAILABLE_ALGORITHMS, DEFAULT_ALGORITHMS, MODEL_TYPES
from src.domain.services.interfaces.electoral_gateway import ElectoralGatewayError
from src.domain.services.model_report import ModelMetricsSummary, count_trainable_votes
from src.infrastructure.di.container import Container
from src.interfaces.web.streamlit.presenters.base import BasePresenter
from src.interfaces.web.streamlit.utils.session_manager import SessionManager


class ModelTrainingPresenter(BasePresenter[list[dict[str, Any]]]):
    """Training configuration, training runs and the saved-model list."""

    def __init__(self, container: Container | None = None):
        super().__init__(container)
        self.use_case: ManageModelsUseCase = (
            self.container.use_cases.manage_models_usecase()
        )
        self.session = SessionManager(namespace="model_training")
        self.form_state = self.session.get_or_create(
            "form_state",
            {
                "model_type": "classification",
                "algorithm": DEFAULT_ALGORITHMS["classification"],
            },
        )

    # ---- configuration ----

    @staticmethod
    def model_type_options() -> dict[str, str]:
        return dict(MODEL_TYPES)

    def algorithm_options(self) -> dict[str, str]:
        return dict(AVAILABLE_ALGORITHMS[self.get_model_type()])

    def get_model_type(self) -> str:
        return self.form_state["model_type"]

    def get_algorithm(self) -> str:
        return self.form_state["algorithm"]

    def set_model_type(self, model_type: str) -> None:
        """Switch model type; the algorithm falls back to the type's default."""
        if model_type not in MODEL_TYPES:
            raise ValueError(f"Unknown model type: {model_type}")
        if model_type != self.form_state["model_type"]:
            self.form_state["model_type"] = model_type
            self.form_state["algorithm"] = DEFAULT_ALGORITHMS[model_type]
        self.session.set("form_state", self.form_state)

    def set_algorithm(self, algorithm: str) -> None:
        if algorithm not in AVAILABLE_ALGORITHMS[self.get_model_type()]:
            raise ValueError(f"Unknown algorithm: {algorithm}")
        self.form_state["algorithm"] = algorithm
        self.session.set("form_state", self.form_state)

    # ---- training data ----

    def load_training_votes(self) -> tuple[bool, str]:
        try:
            votes = self._run_async(self.use_case.load_training_votes())
        except Exception as e:
            self.logger.exception(f"Failed to load training data: {e}")
            return False, "Error cargando datos para entrenamiento"
        self.session.set("votes", votes)
        return True, "Datos limpios cargados para ML"

    def get_training_votes(self) -> list[dict[str, Any]]:
        return self.session.get("votes", [])

    def valid_vote_count(self) -> int:
        return count_trainable_votes(self.get_training_votes())

    # ---- training ----

    def train(self) -> tuple[bool, str]:
        request = TrainModelInputDto(
            model_type=self.get_model_type(),
            algorithm=self.get_algorithm(),
        )
        try:
            result = self._run_async(
                self.use_case.train(request, votes=self.get_training_votes())
            )
        except ElectoralGatewayError as e:
            self.logger.warning("Training request failed", status_code=e.status_code)
            return False, e.detail or "Error al entrenar modelo"
        except Exception as e:
            self.logger.exception(f"Failed to train model: {e}")
            return False, "Error al entrenar modelo"

        if not result.success:
            return False, result.error_message or "Error en entrenamiento"

        self.session.set("selected_model_id", result.model_id)
        self.session.set("metrics", result.metrics)
        self.session.set("history", result.history)
        self.load_data()

        training_time = f"{result.training_time:.2f}" if result.training_time else "?"
        return (
            True,
            f"Modelo entrenado con {result.training_samples} muestras "
            f"({training_time}s)",
        )

    # ---- saved models ----

    def load_data(self) -> list[dict[str, Any]]:
        """Reload the saved-model list."""
        try:
            models = self._run_async(self.use_case.list_models())
        except Exception as e:
            self.logger.exception(f"Failed to load models: {e}")
            models = self.get_models()
        self.session.set("models", models)
        return models

    def get_models(self) -> list[dict[str, Any]]:
        return self.session.get("models", [])

    def select_model(self, model_id: int) -> tuple[bool, str | None]:
        try:
            details = self._run_async(self.use_case.load_model_details(model_id))
        except Exception as e:
            self.logger.exception(f"Failed to load model {model_id}: {e}")
            return False, "Error al cargar detalles del modelo"

        self.session.set("selected_model_id", model_id)
        self.session.set("metrics", details.metrics)
        self.session.set("history", details.history)
        return True, None

    def delete_model(self, model_id: int) -> tuple[bool, str]:
        try:
            deleted = self._run_async(self.use_case.delete_model(model_id))
        except Exception as e:
            self.logger.exception(f"Failed to delete model {model_id}: {e}")
            return False, "Error al eliminar"
        if not deleted:
            return False, "Error al eliminar"

        if self.get_selected_model_id() == model_id:
            self.clear_selection()
        self.load_data()
        return True, "Modelo eliminado"

    def get_selected_model_id(self) -> int | None:
        return self.session.get("selected_model_id")

    def get_metrics(self) -> ModelMetricsSummary | None:
        return self.session.get("metrics")

    def get_history(self) -> list[dict[str, Any]]:
        return self.session.get("history", [])

    def clear_selection(self) -> None:
        self.session.delete("selected_model_id")
        self.session.delete("metrics")
        self.session.delete("history")

    def history_dataframe(self) -> pd.DataFrame | None:
        """Loss/accuracy per epoch, indexed by epoch."""
        history = self.get_history()
        if not history:
            return None
        df = pd.DataFrame(history)
        columns = [c for c in ("loss", "accuracy") if c in df.columns]
        if "epoch" not in df.columns or not columns:
            return None
        return df.sort_values("epoch").set_index("epoch")[columns]

    def to_dataframe(self, models: list[dict[str, Any]]) -> pd.DataFrame | None:
        if not models:
            return None
        return pd.DataFrame(
            [
                {
                    "ID": m.get("id"),
                    "Nombre": m.get("model_name"),
                    "Algoritmo": m.get("algorithm"),
                    "Muestras": m.get("training_data_size"),
                    "Versión": m.get("version"),
                    "Activo": "Sí" if m.get("is_active") else "No",
                    "Creado": m.get("created_at"),
                }
                for m in models
            ]
        )

    def handle_action(self, action: str, **kwargs: Any) -> Any:
        if action == "list":
            return self.load_data()
        elif action == "train":
            return self.train()
        elif action == "select":
            model_id = kwargs.get("model_id")
            if model_id is None:
                return False, "ID de modelo no especificado"
            return self.select_model(model_id)
        elif action == "delete":
            model_id = kwargs.get("model_id")
            if model_id is None:
                return False, "ID de modelo no especificado"
            return self.delete_model(model_id)
        else:
            raise ValueError(f"Unknown action: {action}")
