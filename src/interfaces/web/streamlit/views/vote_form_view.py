"""Vote form page: personal data, location, candidate and submission."""

import streamlit as st

from src.application.dtos.vote_dto import CandidateOptionDto
from src.domain.constants import (
    EDUCATION_OPTIONS,
    GENDER_OPTIONS,
    MAX_VOTER_AGE,
    MIN_VOTER_AGE,
)
from src.domain.value_objects.vote_submission import VoteFormData
from src.interfaces.web.streamlit.components.location_selector import (
    render_location_selector,
)
from src.interfaces.web.streamlit.presenters.vote_presenter import VotePresenter
from src.interfaces.web.streamlit.utils.error_handler import handle_ui_error


def render_vote_form_page() -> None:
    """Render the vote form, or the confirmation once the vote is in."""
    try:
        presenter = VotePresenter()
    except Exception as e:
        handle_ui_error(e, "la carga del formulario")
        return

    voter_name = presenter.get_submitted_voter()
    if voter_name is not None:
        render_vote_success(presenter, voter_name)
        return

    st.title("Emitir Voto")
    st.markdown("Complete sus datos y seleccione a su candidato.")

    st.subheader("1. Datos Personales")
    form = render_personal_data_fields()

    st.markdown("**Ubicación**")
    render_location_selector(presenter)

    st.subheader("2. Seleccione su Candidato")
    candidates = presenter.load_data()
    error = presenter.get_candidates_error()
    if error:
        st.error(error)
    form.candidate_id = render_candidate_options(candidates)

    submitted = st.button(
        "✅ Confirmar y Enviar Voto",
        type="primary",
        use_container_width=True,
        disabled=not candidates,
    )
    st.caption(
        "Al confirmar, acepta que su voto será procesado de forma segura y anónima"
    )

    if submitted:
        with st.spinner("Procesando su voto..."):
            success, message = presenter.submit(form)
        if success:
            st.toast(message, icon="✅")
            st.rerun()
        else:
            st.error(message)


def render_personal_data_fields() -> VoteFormData:
    col1, col2 = st.columns(2)
    with col1:
        first_name = st.text_input("Nombre *", placeholder="Ej: Juan", key="vote_nombre")
        dni = st.text_input(
            "DNI *", placeholder="Ej: 12345678", max_chars=8, key="vote_dni"
        )
        age = st.number_input(
            "Edad *",
            min_value=0,
            max_value=150,
            value=None,
            step=1,
            placeholder="Ej: 28",
            key="vote_edad",
            help=f"Debe tener entre {MIN_VOTER_AGE} y {MAX_VOTER_AGE} años",
        )
        gender = st.selectbox(
            "Género *",
            GENDER_OPTIONS,
            index=None,
            placeholder="Seleccione su género",
            key="vote_genero",
        )
    with col2:
        last_name = st.text_input(
            "Apellido *", placeholder="Ej: Pérez", key="vote_apellido"
        )
        phone = st.text_input(
            "Número de Celular *",
            placeholder="Ej: 987654321",
            max_chars=9,
            key="vote_celular",
        )
        email = st.text_input(
            "Correo Electrónico *", placeholder="correo@ejemplo.com", key="vote_email"
        )
        education = st.selectbox(
            "Nivel Educativo *",
            EDUCATION_OPTIONS,
            index=None,
            placeholder="Seleccione su nivel educativo",
            key="vote_educacion",
        )

    return VoteFormData(
        first_name=first_name,
        last_name=last_name,
        dni=dni,
        email=email,
        phone=phone,
        age=int(age) if age is not None else None,
        gender=gender or "",
        education=education or "",
    )


def render_candidate_options(candidates: list[CandidateOptionDto]) -> int | None:
    """Radio list of candidates; returns the chosen candidate id."""
    if not candidates:
        st.info("No hay candidatos disponibles.")
        return None

    by_id = {c.id: c for c in candidates}
    selected = st.radio(
        "Candidato *",
        options=list(by_id),
        index=None,
        format_func=lambda cid: by_id[cid].label,
        captions=[c.proposals for c in candidates],
        key="vote_candidate",
    )
    return selected


def render_vote_success(presenter: VotePresenter, voter_name: str) -> None:
    with st.container(border=True):
        st.title("✅ ¡Voto Registrado!")
        st.markdown(
            f"Gracias **{voter_name}** por participar en el proceso electoral"
        )
        st.write(
            "Su voto ha sido registrado de forma segura y será contabilizado en "
            "los resultados finales."
        )
        st.success("🔒 Voto Encriptado y Seguro")
        if st.button("Volver al Inicio", type="primary", use_container_width=True):
            presenter.reset()
            _clear_form_widgets()
            st.rerun()


def _clear_form_widgets() -> None:
    for key in list(st.session_state.keys()):
        if str(key).startswith("vote_"):
            del st.session_state[key]
