"""Streamlit entry point of the voting portal.

Run with ``streamlit run src/interfaces/web/streamlit/app.py``.
"""

import streamlit as st

from src.common.logging import is_configured, setup_logging
from src.infrastructure.config import get_settings, init_sentry
from src.interfaces.web.streamlit.navigation import get_pages


def configure_runtime() -> None:
    """Set up logging and Sentry once per process.

    Streamlit re-executes this script on every interaction, so the guard
    keeps the setup from running again.
    """
    if is_configured():
        return
    settings = get_settings()
    setup_logging(level=settings.log_level, json_format=settings.log_format == "json")
    init_sentry(settings)


def main() -> None:
    st.set_page_config(
        page_title="Elecciones Perú 2025",
        page_icon="🗳️",
        layout="wide",
    )
    configure_runtime()
    st.navigation(get_pages()).run()


if __name__ == "__main__":
    main()
