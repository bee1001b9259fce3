"""Interface of the administrator authentication provider."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol


class AdminAuthError(Exception):
    """Sign-in was rejected by the auth provider."""


@dataclass(frozen=True)
class AdminUser:
    """Signed-in user as reported by the auth provider."""

    id: str
    email: str | None = None


AuthStateListener = Callable[[str, "AdminUser | None"], None]
"""Called with the event name (``SIGNED_IN`` / ``SIGNED_OUT``) and the user."""


class IAdminAuthService(Protocol):
    """Email/password sign-in plus the ``admin`` role lookup."""

    def sign_in(self, email: str, password: str) -> AdminUser: ...

    def sign_out(self) -> None: ...

    def current_user(self) -> AdminUser | None: ...

    def has_admin_role(self, user_id: str) -> bool: ...

    def subscribe(self, listener: AuthStateListener) -> Callable[[], None]: ...
