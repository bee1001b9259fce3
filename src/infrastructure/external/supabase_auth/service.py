"""Supabase implementation of the admin authentication service.

One instance holds one user's auth session, so the web app keeps an
instance per browser session rather than a process-wide singleton.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from supabase import AuthError, Client, create_client
from supabase.lib.client_options import SyncClientOptions

from src.common.logging import get_logger
from src.domain.services.interfaces.admin_auth_service import (
    AdminAuthError,
    AdminUser,
    AuthStateListener,
)


logger = get_logger(__name__)

ADMIN_ROLE = "admin"
USER_ROLES_TABLE = "user_roles"

EVENT_SIGNED_IN = "SIGNED_IN"
EVENT_SIGNED_OUT = "SIGNED_OUT"


def build_supabase_client(url: str, anon_key: str) -> Client:
    """Create an anon-key client that keeps its session in memory only."""
    return create_client(
        url,
        anon_key,
        options=SyncClientOptions(
            auto_refresh_token=False,
            persist_session=False,
        ),
    )


class SupabaseAdminAuthService:
    """Email/password sign-in against Supabase plus the ``user_roles`` check.

    Listeners registered with :meth:`subscribe` are notified after every
    sign-in and sign-out performed through this instance.
    """

    def __init__(self, client: Client) -> None:
        self._client = client
        self._listeners: list[AuthStateListener] = []

    def sign_in(self, email: str, password: str) -> AdminUser:
        try:
            response = self._client.auth.sign_in_with_password(
                {"email": email, "password": password}
            )
        except AuthError as e:
            logger.warning("Admin sign-in rejected", reason=str(e))
            raise AdminAuthError(str(e)) from e

        if response.user is None:
            raise AdminAuthError("No user returned by the auth provider")

        user = _to_admin_user(response.user)
        logger.info("Admin signed in", user_id=user.id)
        self._notify(EVENT_SIGNED_IN, user)
        return user

    def sign_out(self) -> None:
        try:
            self._client.auth.sign_out()
        finally:
            self._notify(EVENT_SIGNED_OUT, None)

    def current_user(self) -> AdminUser | None:
        """User of the active session, or None when signed out."""
        session = self._client.auth.get_session()
        if session is None or session.user is None:
            return None
        return _to_admin_user(session.user)

    def has_admin_role(self, user_id: str) -> bool:
        response = (
            self._client.table(USER_ROLES_TABLE)
            .select("role")
            .eq("user_id", user_id)
            .eq("role", ADMIN_ROLE)
            .maybe_single()
            .execute()
        )
        return bool(response is not None and response.data)

    def subscribe(self, listener: AuthStateListener) -> Callable[[], None]:
        """Register ``listener``; the returned callable removes it again."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def _notify(self, event: str, user: AdminUser | None) -> None:
        for listener in list(self._listeners):
            listener(event, user)


def _to_admin_user(user: Any) -> AdminUser:
    return AdminUser(id=str(user.id), email=getattr(user, "email", None))
