"""Analytics tab.

Nothing is drawn until all six analytics requests have succeeded.
"""

import streamlit as st

from src.application.dtos.admin_dto import AnalyticsDashboardDto
from src.interfaces.web.streamlit.components.charts import (
    make_cluster_sizes_figure,
    make_distribution_pie,
    make_votes_by_hour_figure,
)
from src.interfaces.web.streamlit.presenters.analytics_presenter import (
    AnalyticsPresenter,
)


def render_analytics_tab(presenter: AnalyticsPresenter) -> None:
    header, refresh_col = st.columns([4, 1])
    with header:
        st.subheader("Análisis Electoral Avanzado")
        st.caption("Insights generados con Machine Learning y Data Science")

    dashboard = presenter.load_data()
    with refresh_col:
        refresh = st.button("🔄 Actualizar", use_container_width=True)

    if refresh or dashboard is None:
        with st.spinner("Cargando análisis avanzado..."):
            success, message = presenter.refresh()
        if success:
            st.toast(message, icon="✅")
        else:
            st.error(message)
        dashboard = presenter.load_data()

    if dashboard is None:
        return

    render_kpis(presenter, dashboard)
    render_temporal(presenter, dashboard)
    render_demographics(presenter, dashboard)
    render_geographic(presenter, dashboard)
    render_clusters(presenter, dashboard)
    render_predictions(presenter, dashboard)


def render_kpis(presenter: AnalyticsPresenter, dashboard: AnalyticsDashboardDto) -> None:
    kpis = presenter.kpis(dashboard)
    if not kpis:
        return
    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Total Votantes", f"{kpis.get('total_voters', 0):,}")
    col2.metric("Votos Emitidos", f"{kpis.get('total_votes', 0):,}")
    col3.metric("Participación", f"{kpis.get('participation_rate', 0)}%")
    col4.metric("Edad Promedio", f"{float(kpis.get('avg_age') or 0):.1f}")


def render_temporal(presenter: AnalyticsPresenter, dashboard: AnalyticsDashboardDto) -> None:
    df = presenter.votes_by_hour(dashboard)
    if df is None:
        return
    st.plotly_chart(
        make_votes_by_hour_figure(df, presenter.peak_hour(dashboard)),
        use_container_width=True,
    )


def render_demographics(
    presenter: AnalyticsPresenter, dashboard: AnalyticsDashboardDto
) -> None:
    col1, col2 = st.columns(2)
    for col, key, title in (
        (col1, "gender", "Distribución por Género"),
        (col2, "education", "Nivel Educativo"),
    ):
        df = presenter.distribution(dashboard, key)
        if df is not None:
            with col:
                st.plotly_chart(make_distribution_pie(df, title), use_container_width=True)


def render_geographic(
    presenter: AnalyticsPresenter, dashboard: AnalyticsDashboardDto
) -> None:
    departments = presenter.top_departments(dashboard)
    if not departments:
        return
    st.markdown("#### 📍 Top Departamentos")
    max_votes = max(votes for _, votes in departments) or 1
    for position, (department, votes) in enumerate(departments, start=1):
        st.progress(votes / max_votes, text=f"{position}. {department}: {votes} votos")


def render_clusters(presenter: AnalyticsPresenter, dashboard: AnalyticsDashboardDto) -> None:
    clusters = presenter.clusters(dashboard)
    if not clusters:
        return
    silhouette = dashboard.clustering.get("silhouette_score")
    st.markdown("#### 🧠 Análisis de Clustering (K-Means)")
    st.caption(
        f"Segmentación de votantes en {dashboard.clustering.get('n_clusters')} grupos • "
        f"Silhouette Score: {f'{silhouette:.3f}' if silhouette is not None else 'N/A'}"
    )
    st.plotly_chart(make_cluster_sizes_figure(clusters), use_container_width=True)

    for col, cluster in zip(st.columns(len(clusters)), clusters):
        with col:
            with st.container(border=True):
                st.markdown(f"**Cluster {cluster['cluster_id']}**")
                st.markdown(
                    f"Tamaño: **{cluster['size']}** ({cluster['percentage']}%)  \n"
                    f"Edad Promedio: **{cluster['avg_age']} años**  \n"
                    f"Género Principal: **{cluster['main_gender'] or 'N/A'}**  \n"
                    f"Educación: **{cluster['main_education'] or 'N/A'}**  \n"
                    f"Candidato Top: **ID {cluster['top_candidate']}**"
                )
    st.info(
        "**Interpretación:** K-Means agrupa votantes con características similares. "
        "Silhouette Score indica la calidad de la separación "
        "(0.5-0.7 = buena, >0.7 = excelente)."
    )


def render_predictions(
    presenter: AnalyticsPresenter, dashboard: AnalyticsDashboardDto
) -> None:
    predictions = presenter.predictions(dashboard)
    if not predictions:
        return
    info = presenter.prediction_model_info(dashboard)
    accuracy = info.get("accuracy")
    st.markdown("#### 📈 Predicciones del Modelo ML")
    st.caption(
        f"Proyección basada en modelo: {info.get('algorithm', 'N/A')} • Accuracy: "
        f"{f'{accuracy * 100:.2f}' if accuracy else 'N/A'}%"
    )
    for position, prediction in enumerate(predictions, start=1):
        with st.container(border=True):
            st.markdown(
                f"**{position}. {prediction.get('name')}** · {prediction.get('party')}"
            )
            col1, col2, col3 = st.columns(3)
            col1.metric("Actual", f"{prediction.get('current_percentage')}%")
            col2.metric("Predicción", f"{prediction.get('predicted_percentage')}%")
            col3.metric("Margen", f"±{prediction.get('margin_of_error')}%")

    disclaimer = dashboard.predictions.get("disclaimer")
    if disclaimer:
        st.warning(f"⚠️ **Disclaimer:** {disclaimer}")
