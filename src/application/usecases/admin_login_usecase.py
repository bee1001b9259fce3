"""Administrator login use case."""

from __future__ import annotations

from src.application.dtos.admin_dto import AdminLoginOutputDto
from src.common.logging import get_logger
from src.domain.services.interfaces.admin_auth_service import (
    AdminAuthError,
    AdminUser,
    IAdminAuthService,
)


logger = get_logger(__name__)

MSG_LOGIN_FAILED = "Credenciales incorrectas o usuario no autorizado"
MSG_LOGIN_SUCCESS = "Sesión iniciada correctamente"
MSG_EMPTY_CREDENTIALS = "Ingresa tu correo y contraseña"


class AdminLoginUseCase:
    """Sign in and require the ``admin`` role.

    A user who authenticates but lacks the role is signed out again so that
    no non-admin session stays open in the browser.
    """

    def __init__(self, auth_service: IAdminAuthService) -> None:
        self._auth = auth_service

    def login(self, email: str, password: str) -> AdminLoginOutputDto:
        email = email.strip()
        if not email or not password:
            return AdminLoginOutputDto(success=False, message=MSG_EMPTY_CREDENTIALS)

        try:
            user = self._auth.sign_in(email, password)
        except AdminAuthError:
            return AdminLoginOutputDto(success=False, message=MSG_LOGIN_FAILED)

        if not self._is_admin(user.id):
            logger.warning("Signed-in user lacks admin role", user_id=user.id)
            self._auth.sign_out()
            return AdminLoginOutputDto(success=False, message=MSG_LOGIN_FAILED)

        logger.info("Admin signed in", user_id=user.id)
        return AdminLoginOutputDto(success=True, message=MSG_LOGIN_SUCCESS, user=user)

    def current_admin(self) -> AdminUser | None:
        """The signed-in user when they hold the admin role."""
        user = self._auth.current_user()
        if user is None:
            return None
        return user if self._is_admin(user.id) else None

    def logout(self) -> None:
        self._auth.sign_out()
        logger.info("Admin signed out")

    def _is_admin(self, user_id: str) -> bool:
        try:
            return self._auth.has_admin_role(user_id)
        except Exception:
            logger.exception("Admin role lookup failed", user_id=user_id)
            return False
