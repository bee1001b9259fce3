"""Identity verification form shown before the candidate browser."""

from datetime import date

import streamlit as st

from src.domain.value_objects.voter_access import VoterAccessData
from src.interfaces.web.streamlit.presenters.voter_access_presenter import (
    VoterAccessPresenter,
)


def render_access_form(presenter: VoterAccessPresenter) -> None:
    st.title("Sistema Electoral Nacional")
    st.markdown("Plataforma segura y verificada para ejercer su derecho al voto")

    with st.container(border=True):
        st.subheader("🛡️ Verificación de Identidad")
        st.caption("Complete sus datos para acceder a la cédula de votación")

        dni = st.text_input(
            "DNI *", max_chars=8, placeholder="Ej: 12345678", key="access_dni"
        )
        col1, col2 = st.columns(2)
        with col1:
            first_names = st.text_input("Nombres *", key="access_nombres")
        with col2:
            last_names = st.text_input("Apellidos *", key="access_apellidos")

        today = date.today()
        birth_date = st.date_input(
            "Fecha de Nacimiento *",
            value=None,
            min_value=date(today.year - 120, 1, 1),
            max_value=today,
            format="DD/MM/YYYY",
            key="access_fecha_nacimiento",
        )
        if presenter.is_minor(birth_date, today):
            st.error("⚠️ Debe ser mayor de 18 años para votar")

        col3, col4 = st.columns(2)
        with col3:
            region = st.selectbox(
                "Región *",
                presenter.region_options(),
                index=None,
                placeholder="Seleccione su región",
                key="access_region",
            )
        with col4:
            districts = presenter.district_options(region)
            district = st.selectbox(
                "Distrito *",
                districts,
                index=None,
                placeholder=(
                    "Seleccione su distrito" if region else "Primero seleccione una región"
                ),
                disabled=not districts,
                key=f"access_distrito_{region}",
            )

        if st.button("Verificar Identidad", type="primary", use_container_width=True):
            data = VoterAccessData(
                dni=dni,
                first_names=first_names,
                last_names=last_names,
                birth_date=birth_date,
                region=region or "",
                district=district or "",
            )
            with st.spinner("Verificando identidad..."):
                result = presenter.verify(data)
            if result.verified:
                st.toast(result.message, icon="✅")
                st.rerun()
            else:
                st.error(result.message)
