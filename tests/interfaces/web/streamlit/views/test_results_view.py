"""Tests for the results views."""

from unittest.mock import MagicMock, patch

from src.domain.services.results_tally import ResultRow
from src.interfaces.web.streamlit.presenters.results_presenter import ResultsPresenter
from src.interfaces.web.streamlit.views.results_view import (
    render_results_by_tier,
    render_results_summary,
    render_results_table,
)


ROWS = [
    ResultRow(candidate_id=2, name="Keiko Fujimori", party="Fuerza Popular", votes=40, percentage=57.1),
    ResultRow(candidate_id=1, name="Rafael López Aliaga", party="Renovación Popular", votes=30, percentage=42.9),
]


def _columns(spec):
    count = spec if isinstance(spec, int) else len(spec)
    return [MagicMock() for _ in range(count)]


@patch("src.interfaces.web.streamlit.views.results_view.st")
def test_summary_without_votes(mock_st) -> None:
    render_results_summary(MagicMock(), [], 0, "presidential")

    mock_st.info.assert_called_once_with("Aún no hay votos registrados.")
    mock_st.plotly_chart.assert_not_called()


@patch("src.interfaces.web.streamlit.views.results_view.st")
def test_summary_shows_leader_and_charts(mock_st) -> None:
    leader_col = MagicMock()
    mock_st.columns.side_effect = [
        [MagicMock(), MagicMock(), leader_col],
        *[_columns([4, 1]) for _ in ROWS],
        _columns([3, 2]),
    ]

    render_results_summary(ResultsPresenter.__new__(ResultsPresenter), ROWS, 70, "x")

    leader_col.metric.assert_called_once_with("Liderando", "Keiko Fujimori", "57.1%")
    assert mock_st.progress.call_count == 2
    assert mock_st.plotly_chart.call_count == 2
    keys = [call.kwargs["key"] for call in mock_st.plotly_chart.call_args_list]
    assert keys == ["results_bar_x", "results_pie_x"]


@patch("src.interfaces.web.streamlit.views.results_view.st")
def test_results_error_is_shown(mock_st) -> None:
    presenter = MagicMock()
    presenter.load_data.return_value = None
    presenter.last_error = "Servicio no disponible"

    render_results_by_tier(presenter)

    mock_st.error.assert_called_once_with("Servicio no disponible")
    mock_st.tabs.assert_not_called()


@patch("src.interfaces.web.streamlit.views.results_view.st")
def test_results_table_renders_presenter_dataframe(mock_st) -> None:
    render_results_table(ResultsPresenter.__new__(ResultsPresenter), ROWS)

    mock_st.expander.assert_called_once_with("Tabla de resultados")
    df = mock_st.dataframe.call_args.args[0]
    assert list(df["Candidato"]) == ["Keiko Fujimori", "Rafael López Aliaga"]
    assert list(df["Votos"]) == [40, 30]


@patch("src.interfaces.web.streamlit.views.results_view.st")
def test_results_table_skipped_without_rows(mock_st) -> None:
    render_results_table(ResultsPresenter.__new__(ResultsPresenter), [])

    mock_st.dataframe.assert_not_called()
