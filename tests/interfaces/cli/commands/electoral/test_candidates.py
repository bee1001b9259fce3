"""Tests for the ``electoral candidates`` command."""

from unittest.mock import AsyncMock, MagicMock, patch

from click.testing import CliRunner

from src.application.dtos.vote_dto import CandidateOptionDto
from src.interfaces.cli.commands.electoral.candidates import candidates


_DI_PATH = "src.infrastructure.di.container"


class TestCandidatesCommand:
    @patch(f"{_DI_PATH}.get_container")
    def test_lists_api_candidates(self, mock_get_container):
        mock_container = MagicMock()
        mock_get_container.return_value = mock_container
        mock_usecase = AsyncMock()
        mock_usecase.load_candidates.return_value = [
            CandidateOptionDto(id=1, name="Rafael López Aliaga", party="Renovación Popular"),
            CandidateOptionDto(id=12, name="Keiko Fujimori", party="Fuerza Popular"),
        ]
        mock_container.use_cases.cast_vote_usecase.return_value = mock_usecase

        result = CliRunner().invoke(candidates, [])

        assert result.exit_code == 0
        assert "=== Candidatos (2) ===" in result.output
        assert "   12. Keiko Fujimori - Fuerza Popular" in result.output

    @patch(f"{_DI_PATH}.get_container")
    def test_empty_list(self, mock_get_container):
        mock_container = MagicMock()
        mock_get_container.return_value = mock_container
        mock_usecase = AsyncMock()
        mock_usecase.load_candidates.return_value = []
        mock_container.use_cases.cast_vote_usecase.return_value = mock_usecase

        result = CliRunner().invoke(candidates, [])

        assert result.exit_code == 0
        assert "No hay candidatos registrados." in result.output

    @patch(f"{_DI_PATH}.get_container")
    def test_catalog_needs_no_api(self, mock_get_container):
        result = CliRunner().invoke(candidates, ["--catalog"])

        assert result.exit_code == 0
        assert "=== Presidencial (7) ===" in result.output
        assert "=== Regional (8) ===" in result.output
        assert "=== Distrital (5) ===" in result.output
        mock_get_container.assert_not_called()

    @patch(f"{_DI_PATH}.get_container")
    def test_unexpected_error_exits_with_1(self, mock_get_container):
        mock_container = MagicMock()
        mock_get_container.return_value = mock_container
        mock_usecase = AsyncMock()
        mock_usecase.load_candidates.side_effect = RuntimeError("connection refused")
        mock_container.use_cases.cast_vote_usecase.return_value = mock_usecase

        result = CliRunner().invoke(candidates, [])

        assert result.exit_code == 1
        assert "Error: connection refused" in result.output
