"""Dialogs of the candidate browser."""

import streamlit as st

from src.domain.entities.candidate import Candidate
from src.interfaces.web.streamlit.components.candidate_card import (
    render_candidate_details,
    render_candidate_header,
)
from src.interfaces.web.streamlit.presenters.voter_access_presenter import (
    VoterAccessPresenter,
)


IRREVERSIBLE_WARNING = (
    "Una vez confirmado, su voto no podrá ser modificado. "
    "Esta acción es irreversible."
)


@st.dialog("Perfil del Candidato", width="large")
def show_candidate_details_dialog(candidate: Candidate) -> None:
    render_candidate_details(candidate)


@st.dialog("Confirmar Voto")
def show_confirm_vote_dialog(
    presenter: VoterAccessPresenter, candidate_id: int
) -> None:
    """Voter data, candidate summary and the irreversibility warning."""
    st.caption("Verifique su selección antes de confirmar")
    voter = presenter.load_data()
    candidate = presenter.get_candidate(candidate_id)

    if voter is not None:
        with st.container(border=True):
            st.markdown("**👤 Datos del Votante**")
            st.markdown(
                f"**DNI:** {voter.dni}  \n"
                f"**Nombre:** {voter.full_name}  \n"
                f"**Ubicación:** {voter.location_label}"
            )

    if candidate is None:
        st.error("No se pudo cargar la información del candidato seleccionado.")
    else:
        with st.container(border=True):
            render_candidate_header(candidate)
            st.caption(candidate.bio)
            if candidate.first_proposal:
                st.markdown(f"**Propuesta principal:** {candidate.first_proposal}")

    st.warning(f"**¡Atención!** {IRREVERSIBLE_WARNING}")

    col1, col2 = st.columns(2)
    with col1:
        if st.button("Cancelar", use_container_width=True):
            st.rerun()
    with col2:
        if st.button(
            "Confirmar Voto",
            type="primary",
            use_container_width=True,
            disabled=candidate is None,
        ):
            success, message = presenter.confirm_vote(candidate_id)
            if success:
                st.toast(message, icon="✅")
                st.rerun()
            else:
                st.error(message)
