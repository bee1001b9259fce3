"""Live results views.

Results are re-fetched every ``RESULTS_REFRESH_SECONDS`` inside a fragment;
Streamlit stops the timer when the page is no longer rendered.
"""

from datetime import datetime

import streamlit as st

from src.domain.entities.candidate import ElectionTier
from src.domain.services.results_tally import ResultRow
from src.infrastructure.config.settings import get_settings
from src.interfaces.web.streamlit.components.charts import (
    make_results_figure,
    make_results_pie,
)
from src.interfaces.web.streamlit.presenters.results_presenter import (
    ResultsPresenter,
)
from src.interfaces.web.streamlit.utils.error_handler import handle_ui_error


def render_results_page() -> None:
    """Public results page, one tab per race."""
    st.title("Resultados Electorales")
    st.caption("Resultados en tiempo real del proceso electoral")

    try:
        presenter = ResultsPresenter()
    except Exception as e:
        handle_ui_error(e, "la carga de resultados")
        return

    @st.fragment(run_every=get_settings().results_refresh_seconds)
    def _live_results() -> None:
        render_results_by_tier(presenter)

    _live_results()


def render_results_by_tier(presenter: ResultsPresenter) -> None:
    results = presenter.load_data()
    if results is None:
        st.error(presenter.last_error or "Error al cargar resultados")
        return

    st.caption(f"Actualizado: {datetime.now().strftime('%H:%M:%S')}")
    tiers = list(ElectionTier)
    for tab, tier in zip(st.tabs([t.label for t in tiers]), tiers):
        with tab:
            rows = presenter.rows_for_tier(results, tier)
            render_results_summary(presenter, rows, presenter.total_votes(rows), tier.value)


def render_admin_results_tab(presenter: ResultsPresenter) -> None:
    """All candidates as reported by the API, refreshed periodically."""

    @st.fragment(run_every=get_settings().results_refresh_seconds)
    def _live_results() -> None:
        results = presenter.load_data()
        if results is None:
            st.error(presenter.last_error or "Error al cargar resultados")
            return
        st.markdown(f"Total de votos: **{results.total_votes:,}**")
        render_results_summary(presenter, results.rows, results.total_votes, "admin")
        render_results_table(presenter, results.rows)

    _live_results()


def render_results_table(presenter: ResultsPresenter, rows: list[ResultRow]) -> None:
    df = presenter.to_dataframe(rows)
    if df is None:
        return
    with st.expander("Tabla de resultados"):
        st.dataframe(df, hide_index=True, use_container_width=True)


def render_results_summary(
    presenter: ResultsPresenter, rows: list[ResultRow], total_votes: int, key: str
) -> None:
    if not rows:
        st.info("Aún no hay votos registrados.")
        return

    leader = presenter.leader(rows)
    col1, col2, col3 = st.columns(3)
    col1.metric("Votos Totales", f"{total_votes:,}")
    col2.metric("Candidatos", len(rows))
    if leader is not None:
        col3.metric("Liderando", leader.name, f"{leader.percentage}%")

    for position, row in enumerate(rows, start=1):
        with st.container(border=True):
            c1, c2 = st.columns([4, 1])
            c1.markdown(f"**{position}. {row.name}** · {row.party}")
            c2.markdown(f"**{row.percentage}%**")
            st.progress(min(row.percentage / 100, 1.0), text=f"{row.votes:,} votos")

    chart_col, pie_col = st.columns([3, 2])
    with chart_col:
        st.plotly_chart(
            make_results_figure(rows, "Votos por candidato"),
            use_container_width=True,
            key=f"results_bar_{key}",
        )
    with pie_col:
        st.plotly_chart(
            make_results_pie(rows), use_container_width=True, key=f"results_pie_{key}"
        )
