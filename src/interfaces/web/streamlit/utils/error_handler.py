"""UI error reporting for Streamlit views."""

import streamlit as st

from src.common.logging import get_logger


logger = get_logger(__name__)


def handle_ui_error(error: Exception, context: str) -> None:
    """Log ``error`` and show a short message instead of a traceback."""
    logger.exception("UI error", context=context, error=str(error))
    st.error(f"Error durante {context}. Intente nuevamente.")
