"""Dependency injection container.

``Container`` wires settings, external services and use cases. The web app
builds one per presenter through ``Container.create_for_environment()``; the
CLI uses the process-wide instance from ``init_container()``.
"""

from __future__ import annotations

from dependency_injector import containers, providers

from src.application.usecases.admin_login_usecase import AdminLoginUseCase
from src.application.usecases.cast_vote_usecase import CastVoteUseCase
from src.application.usecases.load_analytics_dashboard_usecase import (
    LoadAnalyticsDashboardUseCase,
)
from src.application.usecases.load_results_usecase import LoadResultsUseCase
from src.application.usecases.manage_data_quality_usecase import (
    ManageDataQualityUseCase,
)
from src.application.usecases.manage_models_usecase import ManageModelsUseCase
from src.application.usecases.verify_voter_access_usecase import (
    VerifyVoterAccessUseCase,
)
from src.common.logging import get_logger
from src.domain.constants import DEFAULT_CLUSTER_COUNT
from src.infrastructure.config.settings import Settings, get_settings
from src.infrastructure.external.electoral_api.client import ElectoralApiClient
from src.infrastructure.external.supabase_auth.service import (
    SupabaseAdminAuthService,
    build_supabase_client,
)
from src.infrastructure.reference_data.ubigeo_loader import get_location_cascade


logger = get_logger(__name__)


def _build_admin_auth_service(settings: Settings) -> SupabaseAdminAuthService | None:
    """Auth service for one browser session, or None when Supabase is unset."""
    if not settings.supabase_enabled:
        logger.warning("Supabase is not configured; admin login is disabled")
        return None
    assert settings.supabase_url is not None
    assert settings.supabase_anon_key is not None
    client = build_supabase_client(settings.supabase_url, settings.supabase_anon_key)
    return SupabaseAdminAuthService(client)


class ServicesContainer(containers.DeclarativeContainer):
    """External services and reference data."""

    settings = providers.Dependency(instance_of=Settings)

    electoral_api_client = providers.Factory(
        ElectoralApiClient,
        base_url=settings.provided.electoral_api_url,
        timeout=settings.provided.electoral_api_timeout_seconds,
    )

    admin_auth_service = providers.Factory(_build_admin_auth_service, settings)

    location_cascade = providers.Callable(get_location_cascade)


class UseCasesContainer(containers.DeclarativeContainer):
    """Application use cases."""

    settings = providers.Dependency(instance_of=Settings)
    services = providers.DependenciesContainer()

    cast_vote_usecase = providers.Factory(
        CastVoteUseCase,
        gateway=services.electoral_api_client,
    )

    verify_voter_access_usecase = providers.Factory(
        VerifyVoterAccessUseCase,
        delay_seconds=settings.provided.vote_verification_delay_seconds,
    )

    load_results_usecase = providers.Factory(
        LoadResultsUseCase,
        gateway=services.electoral_api_client,
    )

    manage_data_quality_usecase = providers.Factory(
        ManageDataQualityUseCase,
        gateway=services.electoral_api_client,
    )

    manage_models_usecase = providers.Factory(
        ManageModelsUseCase,
        gateway=services.electoral_api_client,
        min_training_votes=settings.provided.min_training_votes,
    )

    load_analytics_dashboard_usecase = providers.Factory(
        LoadAnalyticsDashboardUseCase,
        gateway=services.electoral_api_client,
        n_clusters=DEFAULT_CLUSTER_COUNT,
    )

    # auth_service is supplied per browser session by the caller
    admin_login_usecase = providers.Factory(AdminLoginUseCase)


class Container(containers.DeclarativeContainer):
    """Root container."""

    settings = providers.Singleton(get_settings)

    services = providers.Container(ServicesContainer, settings=settings)

    use_cases = providers.Container(
        UseCasesContainer,
        settings=settings,
        services=services,
    )

    @classmethod
    def create_for_environment(cls) -> Container:
        """Container configured from the current environment."""
        return cls()


_container: Container | None = None


def init_container() -> Container:
    """Create the process-wide container."""
    global _container
    _container = Container.create_for_environment()
    return _container


def get_container() -> Container:
    """Return the process-wide container.

    Raises:
        RuntimeError: If ``init_container`` has not been called
    """
    if _container is None:
        raise RuntimeError("Container not initialized. Call init_container() first.")
    return _container


def reset_container() -> None:
    global _container
    _container = None
