"""Presenter for the admin page: login, session and API health."""

from typing import Any

from src.application.dtos.admin_dto import AdminLoginOutputDto
from src.application.usecases.admin_login_usecase import AdminLoginUseCase
from src.domain.services.interfaces.admin_auth_service import (
    AdminUser,
    IAdminAuthService,
)
from src.infrastructure.di.container import Container
from src.interfaces.web.streamlit.presenters.base import BasePresenter
from src.interfaces.web.streamlit.utils.session_manager import SessionManager


MSG_AUTH_DISABLED = "El acceso administrativo no está configurado"


class AdminAuthPresenter(BasePresenter[AdminUser | None]):
    """Owns the per-browser auth service and mirrors its state into session.

    The presenter subscribes to the auth service the first time the page
    renders; sign-in and sign-out events update the ``user`` session key.
    The subscription is dropped on logout.
    """

    def __init__(self, container: Container | None = None):
        super().__init__(container)
        self.session = SessionManager(namespace="admin")
        self.auth_service: IAdminAuthService | None = self._get_or_create_service()
        self.use_case: AdminLoginUseCase | None = None
        if self.auth_service is not None:
            self.use_case = self.container.use_cases.admin_login_usecase(
                auth_service=self.auth_service
            )
            self._ensure_subscribed()

    def _get_or_create_service(self) -> IAdminAuthService | None:
        if self.session.has("auth_service"):
            return self.session.get("auth_service")
        service = self.container.services.admin_auth_service()
        self.session.set("auth_service", service)
        return service

    def _ensure_subscribed(self) -> None:
        if self.session.get("unsubscribe") is not None:
            return
        assert self.auth_service is not None
        self.session.set("unsubscribe", self.auth_service.subscribe(self._on_auth_event))

    def _on_auth_event(self, event: str, user: AdminUser | None) -> None:
        self.logger.info("Auth state changed", auth_event=event)
        self.session.set("user", user)

    @property
    def is_enabled(self) -> bool:
        return self.use_case is not None

    def load_data(self) -> AdminUser | None:
        """The admin user of this browser session, if the role check passes."""
        if self.use_case is None:
            return None
        if not self.session.has("is_admin"):
            admin = self.use_case.current_admin()
            self.session.set("user", admin)
            self.session.set("is_admin", admin is not None)
        return self.session.get("user") if self.session.get("is_admin") else None

    def login(self, email: str, password: str) -> tuple[bool, str]:
        if self.use_case is None:
            return False, MSG_AUTH_DISABLED
        try:
            result: AdminLoginOutputDto = self.use_case.login(email, password)
        except Exception as e:
            self.logger.exception(f"Admin login failed: {e}")
            return False, "Error al iniciar sesión"
        self.session.set("is_admin", result.success)
        return result.success, result.message

    def logout(self) -> None:
        if self.use_case is not None:
            try:
                self.use_case.logout()
            except Exception as e:
                self.logger.exception(f"Admin logout failed: {e}")
        unsubscribe = self.session.get("unsubscribe")
        if unsubscribe is not None:
            unsubscribe()
        self.session.delete("unsubscribe")
        self.session.delete("user")
        self.session.delete("is_admin")

    def check_api_health(self) -> bool:
        return self._run_async(self._check_api_health_async())

    async def _check_api_health_async(self) -> bool:
        client = self.container.services.electoral_api_client()
        try:
            await client.health_check()
        except Exception as e:
            self.logger.warning("Electoral API health check failed", error=str(e))
            return False
        return True

    def handle_action(self, action: str, **kwargs: Any) -> Any:
        if action == "login":
            return self.login(kwargs.get("email", ""), kwargs.get("password", ""))
        elif action == "logout":
            return self.logout()
        elif action == "health":
            return self.check_api_health()
        else:
            raise ValueError(f"Unknown action: {action}")
