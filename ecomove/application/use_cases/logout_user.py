import logging

from ecomove.application.error_mapping import LOGOUT_ERRORS, LOGOUT_FALLBACK, translate
from ecomove.application.interfaces.auth_repo import AuthRepository
from ecomove.application.session import SessionContext
from ecomove.domain.errors import RepositoryError


class LogoutUserUseCase:
    """Invalida el refresh token en el servidor y limpia la sesión local, aunque la llamada falle."""

    def __init__(self, auth_repo: AuthRepository, session: SessionContext) -> None:
        self._auth_repo = auth_repo
        self._session = session
        self._logger = logging.getLogger(__name__)

    async def execute(self) -> None:
        tokens = self._session.tokens
        user_id = self._session.user.id if self._session.user else None
        try:
            if tokens is not None:
                await self._auth_repo.logout(tokens.refresh_token)
        except RepositoryError as exc:
            raise translate(exc, LOGOUT_ERRORS, LOGOUT_FALLBACK) from exc
        finally:
            self._session.clear()
            self._logger.info("Session cleared", extra={"user_id": user_id})
