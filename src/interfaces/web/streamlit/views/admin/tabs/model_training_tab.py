"""Model training tab."""

import streamlit as st

from src.domain.services.model_report import ModelMetricsSummary
from src.interfaces.web.streamlit.components.charts import (
    make_confusion_matrix_figure,
    make_feature_importance_figure,
    make_training_history_figure,
)
from src.interfaces.web.streamlit.presenters.model_training_presenter import (
    ModelTrainingPresenter,
)


def render_model_training_tab(presenter: ModelTrainingPresenter) -> None:
    st.subheader("Entrenamiento de Modelos")
    st.caption("Entrene modelos de Machine Learning con los votos limpios")

    if not presenter.session.has("votes"):
        success, message = presenter.load_training_votes()
        if not success:
            st.error(message)
        presenter.load_data()

    render_training_form(presenter)
    st.divider()
    render_saved_models(presenter)

    metrics = presenter.get_metrics()
    if metrics is not None:
        st.divider()
        render_metrics(metrics)

    history = presenter.history_dataframe()
    if history is not None:
        st.plotly_chart(make_training_history_figure(history), use_container_width=True)


def render_training_form(presenter: ModelTrainingPresenter) -> None:
    valid_votes = presenter.valid_vote_count()
    st.metric("Votos válidos para entrenamiento", valid_votes)

    model_types = presenter.model_type_options()
    col1, col2 = st.columns(2)
    with col1:
        model_type = st.selectbox(
            "Tipo de Modelo",
            list(model_types),
            index=list(model_types).index(presenter.get_model_type()),
            format_func=model_types.get,
            key="training_model_type",
        )
        if model_type != presenter.get_model_type():
            presenter.set_model_type(model_type)

    algorithms = presenter.algorithm_options()
    with col2:
        algorithm = st.selectbox(
            "Algoritmo",
            list(algorithms),
            index=list(algorithms).index(presenter.get_algorithm()),
            format_func=algorithms.get,
            key=f"training_algorithm_{presenter.get_model_type()}",
        )
        if algorithm != presenter.get_algorithm():
            presenter.set_algorithm(algorithm)

    if st.button("▶ Iniciar Entrenamiento", type="primary", use_container_width=True):
        with st.spinner("Entrenando con Scikit-learn..."):
            success, message = presenter.train()
        if success:
            st.success(message)
        else:
            st.error(message)


def render_saved_models(presenter: ModelTrainingPresenter) -> None:
    models = presenter.get_models()
    header, reload_col = st.columns([4, 1])
    with header:
        st.markdown(f"#### Modelos Entrenados ({len(models)})")
    with reload_col:
        if st.button("🔄 Recargar", key="reload_models", use_container_width=True):
            models = presenter.load_data()

    if not models:
        st.info("Aún no hay modelos entrenados.")
        return

    with st.expander("Ver tabla de modelos"):
        st.dataframe(
            presenter.to_dataframe(models), hide_index=True, use_container_width=True
        )

    selected_id = presenter.get_selected_model_id()
    for model in models:
        model_id = model.get("id")
        with st.container(border=True):
            col1, col2, col3 = st.columns([5, 1, 1])
            with col1:
                active = " · :green[Activo]" if model.get("is_active") else ""
                marker = "▶ " if model_id == selected_id else ""
                st.markdown(f"{marker}**{model.get('model_name')}**{active}")
                st.caption(
                    f"{model.get('algorithm')} • {model.get('training_data_size')} "
                    f"muestras • v{model.get('version')} • {model.get('created_at')}"
                )
            with col2:
                if st.button("Ver", key=f"select_model_{model_id}"):
                    success, error = presenter.select_model(model_id)
                    if not success:
                        st.error(error)
            with col3:
                if st.button("🗑️", key=f"delete_model_{model_id}"):
                    show_delete_model_dialog(presenter, model_id)


@st.dialog("¿Eliminar este modelo?")
def show_delete_model_dialog(presenter: ModelTrainingPresenter, model_id: int) -> None:
    st.write(f"Se eliminará el modelo #{model_id}.")
    col1, col2 = st.columns(2)
    with col1:
        if st.button("Cancelar", use_container_width=True):
            st.rerun()
    with col2:
        if st.button("Eliminar", type="primary", use_container_width=True):
            success, message = presenter.delete_model(model_id)
            if success:
                st.toast(message, icon="🗑️")
                st.rerun()
            else:
                st.error(message)


def render_metrics(metrics: ModelMetricsSummary) -> None:
    st.markdown("#### ✅ Métricas del Modelo")

    if metrics.is_regression:
        values = [
            ("MSE", metrics.mse),
            ("RMSE", metrics.rmse),
            ("MAE", metrics.mae),
            ("R²", metrics.r2_score),
        ]
        cols = st.columns(len(values))
        for col, (label, value) in zip(cols, values):
            col.metric(label, f"{value:.4f}" if value is not None else "N/A")
    else:
        values = [
            ("Accuracy", metrics.accuracy),
            ("Precision", metrics.precision),
            ("Recall", metrics.recall),
            ("F1-Score", metrics.f1_score),
        ]
        cols = st.columns(len(values))
        for col, (label, value) in zip(cols, values):
            col.metric(label, f"{value * 100:.2f}%" if value is not None else "N/A")

    col1, col2 = st.columns(2)
    if metrics.confusion_matrix:
        with col1:
            st.plotly_chart(
                make_confusion_matrix_figure(metrics.confusion_matrix),
                use_container_width=True,
            )
    importance = metrics.sorted_feature_importance()
    if importance:
        with col2:
            st.plotly_chart(
                make_feature_importance_figure(importance), use_container_width=True
            )
