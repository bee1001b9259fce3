"""Script-level tests: presenter state must survive Streamlit reruns.

Each script is run by ``AppTest`` exactly like a page, so session writes
happen under a real script run context. The use cases are mocked inside
the scripts because ``AppTest`` executes the function source on its own.
"""

from streamlit.testing.v1 import AppTest


TIMEOUT = 10


def _voter_access_script():
    from datetime import date
    from unittest.mock import AsyncMock, MagicMock

    import streamlit as st

    from src.application.dtos.vote_dto import VerifyVoterAccessOutputDto
    from src.domain.value_objects.voter_access import VoterAccessData
    from src.interfaces.web.streamlit.presenters.voter_access_presenter import (
        VoterAccessPresenter,
    )

    use_case = AsyncMock()
    use_case.execute.return_value = VerifyVoterAccessOutputDto(
        verified=True, message="Identidad verificada exitosamente."
    )
    container = MagicMock()
    container.use_cases.verify_voter_access_usecase.return_value = use_case
    presenter = VoterAccessPresenter(container=container)

    if st.button("Verificar", key="verify"):
        presenter.verify(
            VoterAccessData(
                dni="12345678",
                first_names="Ana María",
                last_names="Quispe Huamán",
                birth_date=date(1990, 5, 17),
                region="Cusco",
                district="Wanchaq",
            )
        )
    st.text(f"is_verified={presenter.is_verified()}")


def _vote_form_script():
    from unittest.mock import AsyncMock, MagicMock, patch

    from src.application.dtos.vote_dto import CandidateOptionDto, CastVoteOutputDto
    from src.infrastructure.reference_data.ubigeo_loader import get_location_cascade
    from src.interfaces.web.streamlit.presenters.vote_presenter import VotePresenter
    from src.interfaces.web.streamlit.views.vote_form_view import (
        render_vote_form_page,
    )

    use_case = AsyncMock()
    use_case.load_candidates.return_value = [
        CandidateOptionDto(id=1, name="Ana Quispe", party="Partido A"),
    ]
    use_case.execute.return_value = CastVoteOutputDto(
        success=True, message="¡Voto registrado exitosamente!"
    )
    container = MagicMock()
    container.use_cases.cast_vote_usecase.return_value = use_case
    container.services.location_cascade.return_value = get_location_cascade()
    presenter = VotePresenter(container=container)

    with patch(
        "src.interfaces.web.streamlit.views.vote_form_view.VotePresenter",
        return_value=presenter,
    ):
        render_vote_form_page()


def _analytics_script():
    from unittest.mock import AsyncMock, MagicMock

    import streamlit as st

    from src.application.dtos.admin_dto import AnalyticsDashboardDto
    from src.interfaces.web.streamlit.presenters.analytics_presenter import (
        AnalyticsPresenter,
    )
    from src.interfaces.web.streamlit.views.admin.tabs.analytics_tab import (
        render_analytics_tab,
    )

    use_case = AsyncMock()
    if "analytics_dashboard" in st.session_state:
        use_case.execute.side_effect = RuntimeError("analytics offline")
    else:
        use_case.execute.return_value = AnalyticsDashboardDto(
            overview={
                "kpis": {
                    "total_voters": 120,
                    "total_votes": 80,
                    "participation_rate": 66.7,
                    "avg_age": 41.2,
                }
            },
            demographic={},
            geographic={},
            temporal={},
            clustering={},
            predictions={},
        )
    container = MagicMock()
    container.use_cases.load_analytics_dashboard_usecase.return_value = use_case
    render_analytics_tab(AnalyticsPresenter(container=container))


def _metric(at: AppTest, label: str) -> str:
    return next(m.value for m in at.metric if m.label == label)


class TestVoterAccessGate:
    def test_verified_voter_survives_rerun(self) -> None:
        at = AppTest.from_function(_voter_access_script, default_timeout=TIMEOUT)
        at.run()
        assert at.text[0].value == "is_verified=False"

        at.button(key="verify").click().run()
        assert not at.exception
        assert at.text[0].value == "is_verified=True"

        at.run()
        assert at.text[0].value == "is_verified=True"


class TestVoteFormSubmission:
    def test_success_screen_after_submit_and_rerun(self) -> None:
        at = AppTest.from_function(_vote_form_script, default_timeout=TIMEOUT)
        at.run()
        assert not at.exception
        assert at.title[0].value == "Emitir Voto"

        at.text_input(key="vote_nombre").input("Rosa")
        at.text_input(key="vote_apellido").input("Mamani")
        submit = next(b for b in at.button if b.label.startswith("✅ Confirmar"))
        submit.click().run()

        assert not at.exception
        assert at.title[0].value == "✅ ¡Voto Registrado!"
        assert any("Rosa Mamani" in m.value for m in at.markdown)

        at.run()
        assert at.title[0].value == "✅ ¡Voto Registrado!"


class TestAnalyticsRefresh:
    def test_dashboard_kept_across_reruns(self) -> None:
        at = AppTest.from_function(_analytics_script, default_timeout=TIMEOUT)
        at.run()
        assert not at.exception
        assert _metric(at, "Votos Emitidos") == "80"

        # A second load would fail, so the metrics must come from the session.
        at.run()
        assert not at.error
        assert _metric(at, "Votos Emitidos") == "80"

    def test_failed_refresh_keeps_last_dashboard(self) -> None:
        at = AppTest.from_function(_analytics_script, default_timeout=TIMEOUT)
        at.run()

        refresh = next(b for b in at.button if b.label == "🔄 Actualizar")
        refresh.click().run()

        assert [e.value for e in at.error] == ["Error al cargar analytics"]
        assert _metric(at, "Total Votantes") == "120"
