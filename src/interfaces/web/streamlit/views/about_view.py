"""About page."""

import streamlit as st


PRINCIPLES = [
    (
        "🛡️ Seguridad Máxima",
        "Implementamos encriptación de extremo a extremo y múltiples capas de "
        "seguridad para proteger la integridad de cada voto.",
    ),
    (
        "🔒 Privacidad Garantizada",
        "Tu voto es completamente anónimo. Nadie puede rastrear ni identificar "
        "tu elección individual.",
    ),
    (
        "📊 Transparencia Total",
        "Resultados en tiempo real disponibles públicamente. Cada voto es "
        "verificable sin comprometer el anonimato.",
    ),
    (
        "✅ Fácil de Usar",
        "Interfaz intuitiva y accesible diseñada para que cualquier ciudadano "
        "pueda votar sin dificultad.",
    ),
]


def render_about_page() -> None:
    st.title("Acerca del Sistema")
    st.caption("Sistema Electoral Digital Transparente y Seguro")

    with st.container(border=True):
        st.subheader("🗳️ Nuestra Misión")
        st.write(
            "Facilitar el proceso electoral mediante una plataforma digital "
            "moderna, segura y accesible para todos los ciudadanos. Nuestro "
            "objetivo es garantizar la transparencia, integridad y "
            "confidencialidad de cada voto, fortaleciendo así la democracia y "
            "la participación ciudadana."
        )

    for row_start in range(0, len(PRINCIPLES), 2):
        for col, (title, text) in zip(
            st.columns(2), PRINCIPLES[row_start : row_start + 2]
        ):
            with col:
                with st.container(border=True):
                    st.markdown(f"#### {title}")
                    st.write(text)
