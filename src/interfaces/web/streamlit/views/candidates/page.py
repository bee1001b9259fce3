"""Candidate browser page (``Votar``).

Closed behind the identity form until the voter is verified; then shows the
candidates of each race in tabs.
"""

import streamlit as st

from .access_form import render_access_form
from .dialogs import show_candidate_details_dialog, show_confirm_vote_dialog

from src.domain.entities.candidate import ElectionTier
from src.interfaces.web.streamlit.components.candidate_card import (
    render_candidate_card,
)
from src.interfaces.web.streamlit.presenters.voter_access_presenter import (
    VoterAccessPresenter,
)
from src.interfaces.web.streamlit.utils.error_handler import handle_ui_error


CARDS_PER_ROW = 3


def render_candidates_page() -> None:
    try:
        presenter = VoterAccessPresenter()
    except Exception as e:
        handle_ui_error(e, "la carga de candidatos")
        return

    if not presenter.is_verified():
        render_access_form(presenter)
        return

    voter = presenter.load_data()
    assert voter is not None

    col1, col2 = st.columns([4, 1])
    with col1:
        st.title("Elecciones Generales 2025")
        st.caption(f"Votante verificado: {voter.full_name} · {voter.location_label}")
    with col2:
        if st.button("Salir", use_container_width=True):
            presenter.sign_out_voter()
            st.rerun()

    confirmed = presenter.get_confirmed_candidate()
    if confirmed is not None:
        st.success(f"Su voto por **{confirmed.name}** ({confirmed.party}) fue confirmado.")

    tiers = presenter.tiers()
    for tab, tier in zip(st.tabs([t.label for t in tiers]), tiers):
        with tab:
            render_tier_candidates(presenter, tier)


def render_tier_candidates(presenter: VoterAccessPresenter, tier: ElectionTier) -> None:
    candidates = presenter.candidates_for(tier)
    st.caption(f"{len(candidates)} candidatos")

    for row_start in range(0, len(candidates), CARDS_PER_ROW):
        row = candidates[row_start : row_start + CARDS_PER_ROW]
        for col, candidate in zip(st.columns(CARDS_PER_ROW), row):
            with col:
                clicked = render_candidate_card(candidate, key_prefix=tier.value)
                if clicked == "details":
                    show_candidate_details_dialog(candidate)
                elif clicked == "vote":
                    show_confirm_vote_dialog(presenter, candidate.id)
