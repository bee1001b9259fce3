"""Tests for the dependency injection container."""

from unittest.mock import patch

import pytest

from src.application.usecases.admin_login_usecase import AdminLoginUseCase
from src.application.usecases.cast_vote_usecase import CastVoteUseCase
from src.application.usecases.manage_models_usecase import ManageModelsUseCase
from src.application.usecases.verify_voter_access_usecase import (
    VerifyVoterAccessUseCase,
)
from src.domain.services.location_cascade import LocationCascade
from src.infrastructure.config.settings import Settings
from src.infrastructure.di import container as container_module
from src.infrastructure.di.container import (
    Container,
    get_container,
    init_container,
    reset_container,
)
from src.infrastructure.external.electoral_api.client import ElectoralApiClient


def _settings(**overrides: object) -> Settings:
    values = {
        "electoral_api_url": "https://votos.example.pe/api",
        "electoral_api_timeout_seconds": 5.0,
        "supabase_url": None,
        "supabase_anon_key": None,
        "min_training_votes": 25,
        "vote_verification_delay_seconds": 0.0,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)  # type: ignore[arg-type]


@pytest.fixture
def container() -> Container:
    container = Container()
    container.settings.override(_settings())
    yield container
    container.settings.reset_override()


class TestServices:
    def test_api_client_uses_settings(self, container: Container) -> None:
        client = container.services.electoral_api_client()

        assert isinstance(client, ElectoralApiClient)
        assert client.base_url == "https://votos.example.pe/api"
        assert client.timeout == 5.0

    def test_admin_auth_disabled_without_supabase(self, container: Container) -> None:
        assert container.services.admin_auth_service() is None

    def test_admin_auth_service_built_per_call(self, container: Container) -> None:
        container.settings.override(
            _settings(supabase_url="https://x.supabase.co", supabase_anon_key="anon")
        )
        with patch.object(container_module, "build_supabase_client") as mock_build:
            first = container.services.admin_auth_service()
            second = container.services.admin_auth_service()

        assert first is not None and second is not None
        assert first is not second
        assert mock_build.call_count == 2

    def test_location_cascade(self, container: Container) -> None:
        assert isinstance(container.services.location_cascade(), LocationCascade)


class TestUseCases:
    def test_cast_vote_usecase(self, container: Container) -> None:
        assert isinstance(container.use_cases.cast_vote_usecase(), CastVoteUseCase)

    def test_models_usecase_gets_min_training_votes(self, container: Container) -> None:
        use_case = container.use_cases.manage_models_usecase()

        assert isinstance(use_case, ManageModelsUseCase)
        assert use_case._min_training_votes == 25

    def test_verify_usecase_gets_delay(self, container: Container) -> None:
        use_case = container.use_cases.verify_voter_access_usecase()

        assert isinstance(use_case, VerifyVoterAccessUseCase)
        assert use_case._delay_seconds == 0.0

    def test_admin_login_takes_caller_service(self, container: Container) -> None:
        service = object()

        use_case = container.use_cases.admin_login_usecase(auth_service=service)

        assert isinstance(use_case, AdminLoginUseCase)
        assert use_case._auth is service


class TestGlobalContainer:
    def test_get_before_init_raises(self) -> None:
        reset_container()

        with pytest.raises(RuntimeError, match="Container not initialized"):
            get_container()

    def test_init_then_get(self) -> None:
        reset_container()
        try:
            created = init_container()
            assert get_container() is created
        finally:
            reset_container()
