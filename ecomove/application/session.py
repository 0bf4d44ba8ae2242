"""Contexto de sesión inyectado en los casos de uso de autenticación."""

from ecomove.application.interfaces.auth_repo import AuthResult, AuthTokens
from ecomove.domain.entities.user import User


class SessionContext:
    """
    Usuario autenticado y sus tokens para una sesión.

    Se crea por cliente y se pasa explícitamente a quien lo necesite; no hay
    estado global compartido.
    """

    def __init__(self) -> None:
        self._user: User | None = None
        self._tokens: AuthTokens | None = None

    @property
    def user(self) -> User | None:
        return self._user

    @property
    def tokens(self) -> AuthTokens | None:
        return self._tokens

    @property
    def is_authenticated(self) -> bool:
        return self._user is not None and self._tokens is not None

    def start(self, result: AuthResult) -> None:
        self._user = result.user
        self._tokens = result.tokens

    def update_user(self, user: User) -> None:
        self._user = user

    def clear(self) -> None:
        self._user = None
        self._tokens = None
