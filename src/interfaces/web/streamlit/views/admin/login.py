"""Admin login form."""

import streamlit as st

from src.interfaces.web.streamlit.presenters.admin_auth_presenter import (
    AdminAuthPresenter,
)


def render_admin_login(presenter: AdminAuthPresenter) -> None:
    _, center, _ = st.columns([1, 2, 1])
    with center:
        with st.container(border=True):
            st.title("🔐 Panel Administrativo")
            st.caption("Acceso exclusivo para administradores del sistema electoral")

            with st.form("admin_login_form"):
                email = st.text_input(
                    "Correo Electrónico", placeholder="admin@ejemplo.com"
                )
                password = st.text_input("Contraseña", type="password")
                submitted = st.form_submit_button(
                    "Acceder al Panel", type="primary", use_container_width=True
                )

            if submitted:
                with st.spinner("Verificando credenciales..."):
                    success, message = presenter.login(email, password)
                if success:
                    st.toast(message, icon="✅")
                    st.rerun()
                else:
                    st.error(message)
