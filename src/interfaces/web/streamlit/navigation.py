"""Page registry for ``st.navigation``."""

import streamlit as st

from streamlit.navigation.page import StreamlitPage

from src.interfaces.web.streamlit.views.about_view import render_about_page
from src.interfaces.web.streamlit.views.admin import render_admin_page
from src.interfaces.web.streamlit.views.candidates import render_candidates_page
from src.interfaces.web.streamlit.views.home_view import render_home_page
from src.interfaces.web.streamlit.views.results_view import render_results_page
from src.interfaces.web.streamlit.views.vote_form_view import render_vote_form_page


PAGE_SPECS: dict[str, tuple] = {
    "home": (render_home_page, "Inicio", "🏠", "home"),
    "vote": (render_candidates_page, "Votar", "🗳️", "votar"),
    "vote_form": (render_vote_form_page, "Emitir voto", "📝", "emitir-voto"),
    "results": (render_results_page, "Resultados", "📊", "resultados"),
    "about": (render_about_page, "Acerca de", "ℹ️", "acerca-de"),
    "admin": (render_admin_page, "Admin", "🔐", "admin"),
}


def get_page(name: str) -> StreamlitPage:
    """Build the ``st.Page`` registered under ``name``."""
    render, title, icon, url_path = PAGE_SPECS[name]
    return st.Page(
        render,
        title=title,
        icon=icon,
        url_path=url_path,
        default=name == "home",
    )


def get_pages() -> list[StreamlitPage]:
    return [get_page(name) for name in PAGE_SPECS]
