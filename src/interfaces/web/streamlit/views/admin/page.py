"""Admin dashboard page.

The dashboard renders only for a signed-in user holding the admin role;
everyone else gets the login form.
"""

import streamlit as st

from .login import render_admin_login
from .tabs import (
    render_analytics_tab,
    render_data_processing_tab,
    render_model_training_tab,
)

from src.interfaces.web.streamlit.presenters.admin_auth_presenter import (
    MSG_AUTH_DISABLED,
    AdminAuthPresenter,
)
from src.interfaces.web.streamlit.presenters.analytics_presenter import (
    AnalyticsPresenter,
)
from src.interfaces.web.streamlit.presenters.data_processing_presenter import (
    DataProcessingPresenter,
)
from src.interfaces.web.streamlit.presenters.model_training_presenter import (
    ModelTrainingPresenter,
)
from src.interfaces.web.streamlit.presenters.results_presenter import (
    ResultsPresenter,
)
from src.interfaces.web.streamlit.utils.error_handler import handle_ui_error
from src.interfaces.web.streamlit.views.results_view import render_admin_results_tab


def render_admin_page() -> None:
    try:
        presenter = AdminAuthPresenter()
    except Exception as e:
        handle_ui_error(e, "la carga del panel")
        return

    if not presenter.is_enabled:
        st.title("Panel de Administración")
        st.warning(MSG_AUTH_DISABLED)
        return

    user = presenter.load_data()
    if user is None:
        render_admin_login(presenter)
        return

    col1, col2, col3 = st.columns([4, 1, 1])
    with col1:
        st.title("Panel de Administración")
        st.caption(user.email or user.id)
    with col2:
        if presenter.check_api_health():
            st.success("API en línea")
        else:
            st.error("API sin conexión")
    with col3:
        if st.button("Cerrar Sesión", use_container_width=True):
            presenter.logout()
            st.rerun()

    results_tab, processing_tab, training_tab, analytics_tab = st.tabs(
        ["📊 Resultados", "🧹 Procesamiento", "🧠 Entrenamiento", "📈 Analytics"]
    )

    with results_tab:
        render_admin_results_tab(ResultsPresenter(presenter.container))

    @st.fragment
    def _processing_fragment() -> None:
        render_data_processing_tab(DataProcessingPresenter(presenter.container))

    @st.fragment
    def _training_fragment() -> None:
        render_model_training_tab(ModelTrainingPresenter(presenter.container))

    @st.fragment
    def _analytics_fragment() -> None:
        render_analytics_tab(AnalyticsPresenter(presenter.container))

    with processing_tab:
        _processing_fragment()

    with training_tab:
        _training_fragment()

    with analytics_tab:
        _analytics_fragment()
