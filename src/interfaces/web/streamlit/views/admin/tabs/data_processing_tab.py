"""Data processing tab: quality report, remediation and the vote table."""

from typing import Any

import streamlit as st

from src.interfaces.web.streamlit.presenters.data_processing_presenter import (
    DataProcessingPresenter,
)


def render_data_processing_tab(presenter: DataProcessingPresenter) -> None:
    st.subheader("Procesamiento de Datos")
    st.caption("Limpieza y validación de los votos registrados")

    if not presenter.session.has("votes"):
        presenter.load_data()

    report = presenter.get_report()
    col1, col2, col3, col4 = st.columns(4)
    actions = [
        (col1, "🔍 Analizar Calidad", presenter.analyze, False),
        (col2, "Reemplazar Null → N/A", presenter.clean_null_data, report is None),
        (col3, "Quitar Duplicados", presenter.remove_duplicates, report is None),
        (col4, "Normalizar", presenter.normalize_data, report is None),
    ]
    for col, label, action, disabled in actions:
        with col:
            if st.button(label, use_container_width=True, disabled=disabled):
                with st.spinner("Procesando..."):
                    success, message = action()
                if success:
                    st.toast(message, icon="✅")
                    st.rerun(scope="fragment")
                else:
                    st.error(message)

    if report:
        render_quality_report(presenter, report)

    st.divider()
    render_votes_table(presenter)


def render_quality_report(
    presenter: DataProcessingPresenter, report: dict[str, Any]
) -> None:
    st.markdown("#### Reporte de Calidad")
    score = report.get("quality_score", 0)
    col1, col2, col3 = st.columns(3)
    col1.metric("Total de Registros", report.get("total_records", 0))
    col2.metric(
        "Registros Completos", report.get("complete_records", 0), f"{score}%"
    )
    col3.metric("Datos Faltantes", report.get("missing_data", 0))

    col4, col5, col6 = st.columns(3)
    col4.metric("Reemplazados por N/A", presenter.marker_count())
    col5.metric("Emails Válidos", report.get("valid_emails", 0))
    col6.metric("Duplicados", report.get("duplicates", 0))

    st.progress(min(float(score) / 100, 1.0), text=f"Calidad: {presenter.quality_label()}")


def render_votes_table(presenter: DataProcessingPresenter) -> None:
    votes = presenter.get_votes()
    header, reload_col = st.columns([4, 1])
    with header:
        st.markdown(f"#### Votos Registrados ({len(votes)})")
    with reload_col:
        if st.button("🔄 Recargar", use_container_width=True):
            presenter.load_data()
            votes = presenter.get_votes()

    term = st.text_input(
        "Buscar",
        value=presenter.get_search_term(),
        placeholder="Buscar por nombre, email, DNI o ubicación...",
        key="data_processing_search_input",
    )
    presenter.set_search_term(term)

    filtered = presenter.filtered_votes()
    if not filtered:
        st.info("No hay votos que mostrar.")
        return

    page = presenter.current_page()
    df = presenter.to_dataframe(page.items)
    if df is not None:
        st.dataframe(df, use_container_width=True, hide_index=True)

    col1, col2, col3, col4 = st.columns([1, 2, 1, 2])
    with col1:
        if st.button("◀ Anterior", disabled=page.number <= 1):
            presenter.set_page_number(page.number - 1)
            st.rerun(scope="fragment")
    with col2:
        st.caption(
            f"Mostrando {page.first_index}-{page.last_index} de {page.total_items} "
            f"· Página {page.number} de {page.total_pages}"
        )
    with col3:
        if st.button("Siguiente ▶", disabled=page.number >= page.total_pages):
            presenter.set_page_number(page.number + 1)
            st.rerun(scope="fragment")
    with col4:
        st.download_button(
            "⬇️ Exportar CSV",
            data=presenter.to_csv(filtered),
            file_name=presenter.csv_filename(),
            mime="text/csv",
            use_container_width=True,
        )
