"""Tests for SupabaseAdminAuthService."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from supabase import AuthApiError

from src.domain.services.interfaces.admin_auth_service import AdminAuthError, AdminUser
from src.infrastructure.external.supabase_auth.service import (
    EVENT_SIGNED_IN,
    EVENT_SIGNED_OUT,
    SupabaseAdminAuthService,
)


def _supabase_user(id: str = "u-1", email: str = "admin@example.com") -> SimpleNamespace:
    return SimpleNamespace(id=id, email=email)


@pytest.fixture
def client() -> MagicMock:
    return MagicMock()


@pytest.fixture
def service(client: MagicMock) -> SupabaseAdminAuthService:
    return SupabaseAdminAuthService(client)


class TestSignIn:
    def test_sign_in_returns_user_and_notifies(
        self, service: SupabaseAdminAuthService, client: MagicMock
    ) -> None:
        client.auth.sign_in_with_password.return_value = SimpleNamespace(
            user=_supabase_user()
        )
        events: list[tuple[str, AdminUser | None]] = []
        service.subscribe(lambda event, user: events.append((event, user)))

        user = service.sign_in("admin@example.com", "secret")

        assert user == AdminUser(id="u-1", email="admin@example.com")
        assert events == [(EVENT_SIGNED_IN, user)]
        client.auth.sign_in_with_password.assert_called_once_with(
            {"email": "admin@example.com", "password": "secret"}
        )

    def test_rejected_credentials_raise(
        self, service: SupabaseAdminAuthService, client: MagicMock
    ) -> None:
        client.auth.sign_in_with_password.side_effect = AuthApiError(
            "Invalid login credentials", 400, "invalid_credentials"
        )

        with pytest.raises(AdminAuthError):
            service.sign_in("admin@example.com", "wrong")

    def test_missing_user_raises(
        self, service: SupabaseAdminAuthService, client: MagicMock
    ) -> None:
        client.auth.sign_in_with_password.return_value = SimpleNamespace(user=None)

        with pytest.raises(AdminAuthError):
            service.sign_in("admin@example.com", "secret")


class TestSession:
    def test_sign_out_notifies_even_on_failure(
        self, service: SupabaseAdminAuthService, client: MagicMock
    ) -> None:
        client.auth.sign_out.side_effect = RuntimeError("network")
        events: list[str] = []
        service.subscribe(lambda event, user: events.append(event))

        with pytest.raises(RuntimeError):
            service.sign_out()

        assert events == [EVENT_SIGNED_OUT]

    def test_current_user(self, service: SupabaseAdminAuthService, client: MagicMock) -> None:
        client.auth.get_session.return_value = SimpleNamespace(user=_supabase_user("u-2"))

        assert service.current_user() == AdminUser(id="u-2", email="admin@example.com")

    def test_current_user_without_session(
        self, service: SupabaseAdminAuthService, client: MagicMock
    ) -> None:
        client.auth.get_session.return_value = None

        assert service.current_user() is None

    def test_unsubscribe_stops_notifications(
        self, service: SupabaseAdminAuthService
    ) -> None:
        events: list[str] = []
        unsubscribe = service.subscribe(lambda event, user: events.append(event))

        unsubscribe()
        unsubscribe()
        service.sign_out()

        assert events == []
        assert service.listener_count == 0


class TestAdminRole:
    def _query(self, client: MagicMock) -> MagicMock:
        return client.table.return_value.select.return_value.eq.return_value.eq.return_value.maybe_single.return_value

    def test_user_with_role(self, service: SupabaseAdminAuthService, client: MagicMock) -> None:
        self._query(client).execute.return_value = SimpleNamespace(data={"role": "admin"})

        assert service.has_admin_role("u-1") is True
        client.table.assert_called_once_with("user_roles")

    def test_user_without_role(
        self, service: SupabaseAdminAuthService, client: MagicMock
    ) -> None:
        self._query(client).execute.return_value = None

        assert service.has_admin_role("u-1") is False
