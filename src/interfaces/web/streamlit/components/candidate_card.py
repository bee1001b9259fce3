"""Candidate card and candidate detail blocks."""

import streamlit as st

from src.domain.entities.candidate import Candidate


def _party_badge(candidate: Candidate) -> str:
    return (
        f"<span style='background-color:{candidate.color};color:white;"
        f"padding:2px 8px;border-radius:8px;font-size:0.8em'>{candidate.party}</span>"
    )


def render_candidate_header(candidate: Candidate) -> None:
    st.markdown(f"#### {candidate.initials} · {candidate.name}")
    st.markdown(_party_badge(candidate), unsafe_allow_html=True)


def render_candidate_card(candidate: Candidate, key_prefix: str) -> str | None:
    """Card with the first two proposals.

    Returns:
        ``"details"`` or ``"vote"`` when one of the buttons was pressed
    """
    with st.container(border=True):
        render_candidate_header(candidate)
        st.caption(candidate.bio)
        st.markdown("**Propuestas principales:**")
        for proposal in candidate.headline_proposals:
            st.markdown(f"- {proposal}")

        col1, col2 = st.columns(2)
        with col1:
            if st.button(
                "Ver más",
                key=f"{key_prefix}_details_{candidate.id}",
                use_container_width=True,
            ):
                return "details"
        with col2:
            if st.button(
                "Votar",
                key=f"{key_prefix}_vote_{candidate.id}",
                type="primary",
                use_container_width=True,
            ):
                return "vote"
    return None


def render_candidate_details(candidate: Candidate) -> None:
    """Full profile: biography, education, experience, proposals, contact."""
    render_candidate_header(candidate)
    st.write(candidate.bio)

    st.markdown("##### Formación Académica")
    st.write(candidate.education)

    st.markdown("##### Experiencia")
    st.write(candidate.experience)

    st.markdown("##### Propuestas")
    for i, proposal in enumerate(candidate.proposals, start=1):
        st.markdown(f"{i}. {proposal}")

    if candidate.has_contact:
        st.markdown("##### Contacto")
        if candidate.website:
            st.markdown(f"🌐 [{candidate.website}]({candidate.website})")
        if candidate.email:
            st.markdown(f"✉️ {candidate.email}")
