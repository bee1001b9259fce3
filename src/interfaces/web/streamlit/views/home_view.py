"""Landing page: election overview and calls to action."""

import streamlit as st


FEATURES = [
    (
        "🛡️ Seguridad Militar",
        "Cifrado AES-256 y verificación blockchain para máxima seguridad",
    ),
    (
        "📊 Transparencia Total",
        "Auditoría en tiempo real y resultados verificables públicamente",
    ),
    (
        "👥 Acceso Universal",
        "Plataforma accesible para todos los ciudadanos habilitados",
    ),
]

ELECTIONS = [
    {
        "title": "Elección Presidencial 2025",
        "status": "active",
        "description": "Elección del Presidente de la República",
        "start": "15 Nov 2025 - 08:00",
        "end": "15 Nov 2025 - 20:00",
        "candidates": 4,
        "progress": 65,
    },
    {
        "title": "Elección Congresal",
        "status": "active",
        "description": "Elección de Representantes al Congreso",
        "start": "15 Nov 2025 - 08:00",
        "end": "15 Nov 2025 - 20:00",
        "candidates": 120,
        "progress": 42,
    },
    {
        "title": "Elección Regional",
        "status": "completed",
        "description": "Elección de Gobernadores Regionales",
        "start": "10 Oct 2025 - 08:00",
        "end": "10 Oct 2025 - 20:00",
        "candidates": 25,
        "progress": 100,
    },
]


def render_home_page() -> None:
    """Render the landing page."""
    from src.interfaces.web.streamlit.navigation import get_page

    st.caption("📅 Proceso Electoral 2025 - En Curso")
    st.title("Sistema Electoral Nacional")
    st.markdown(
        "Plataforma oficial de votación digital del Estado. "
        "**Seguro**, **Transparente**, **Verificable**."
    )

    col1, col2 = st.columns(2)
    with col1:
        if st.button("🗳️ Emitir Mi Voto", type="primary", use_container_width=True):
            st.switch_page(get_page("vote"))
    with col2:
        if st.button("📊 Ver Resultados en Tiempo Real", use_container_width=True):
            st.switch_page(get_page("results"))

    st.divider()
    for col, (title, description) in zip(st.columns(len(FEATURES)), FEATURES):
        with col:
            with st.container(border=True):
                st.markdown(f"### {title}")
                st.write(description)

    st.divider()
    st.header("Procesos Electorales")
    st.caption("Participa en las elecciones nacionales y regionales")
    for col, election in zip(st.columns(len(ELECTIONS)), ELECTIONS):
        with col:
            render_election_card(election)

    st.divider()
    st.subheader("¡Tu Voto Es Tu Voz!")
    st.write("Participa en la construcción democrática de nuestro país.")


def render_election_card(election: dict) -> None:
    active = election["status"] == "active"
    with st.container(border=True):
        st.markdown(f"**{election['title']}**")
        st.markdown(":green[En Curso]" if active else ":gray[Finalizado]")
        st.caption(election["description"])
        st.markdown(
            f"Inicio: **{election['start']}**  \n"
            f"Cierre: **{election['end']}**  \n"
            f"Candidatos: **{election['candidates']}**"
        )
        if active:
            st.progress(
                election["progress"] / 100,
                text=f"Progreso de Votación: {election['progress']}%",
            )
