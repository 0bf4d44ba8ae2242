"""Implementación in-memory del repositorio de autenticación."""

import hashlib
import secrets

from ecomove.application.interfaces.auth_repo import AuthRepository, AuthResult, AuthTokens
from ecomove.application.interfaces.clock import Clock, SystemClock
from ecomove.domain.entities.user import CreateUserData, User
from ecomove.domain.errors import RepositoryError
from ecomove.infrastructure.in_memory.store import InMemoryStore
from ecomove.infrastructure.in_memory.user_repo import InMemoryUserRepository

ACCESS_TOKEN_TTL_SECONDS = 3600


def hash_password(password: str, salt: str) -> str:
    return hashlib.sha256(f"{salt}:{password}".encode()).hexdigest()


class InMemoryAuthRepository(AuthRepository):
    """Emite tokens opacos aleatorios; no hay expiración real."""

    def __init__(self, store: InMemoryStore, clock: Clock | None = None) -> None:
        self._store = store
        self._clock = clock or SystemClock()
        self._users = InMemoryUserRepository(store, self._clock)

    async def login(self, email: str, password: str) -> AuthResult:
        user = await self._users.find_by_email(email)
        if user is None:
            raise RepositoryError("USER_NOT_FOUND", status_code=404)
        if self._store.password_hashes.get(user.id) != hash_password(password, str(user.id)):
            raise RepositoryError("INVALID_CREDENTIALS", status_code=401)
        return AuthResult(user=user, tokens=self._issue_tokens(user))

    async def register(self, user_data: CreateUserData) -> AuthResult:
        user = self._users.register(user_data, self._clock.now())
        self.set_password(user, user_data.password)
        return AuthResult(user=user, tokens=self._issue_tokens(user))

    async def refresh_token(self, refresh_token: str) -> AuthTokens:
        user_id = self._store.refresh_tokens.pop(refresh_token, None)
        if user_id is None or user_id not in self._store.users:
            raise RepositoryError("INVALID_TOKEN", status_code=401)
        return self._issue_tokens(self._store.users[user_id])

    async def logout(self, refresh_token: str) -> None:
        user_id = self._store.refresh_tokens.pop(refresh_token, None)
        if user_id is not None:
            for token in [t for t, owner in self._store.access_tokens.items() if owner == user_id]:
                del self._store.access_tokens[token]

    async def verify_token(self, token: str) -> User:
        user_id = self._store.access_tokens.get(token)
        if user_id is None or user_id not in self._store.users:
            raise RepositoryError("INVALID_TOKEN", status_code=401)
        return self._store.users[user_id]

    def set_password(self, user: User, password: str) -> None:
        self._store.password_hashes[user.id] = hash_password(password, str(user.id))

    def _issue_tokens(self, user: User) -> AuthTokens:
        tokens = AuthTokens(
            access_token=secrets.token_urlsafe(32),
            refresh_token=secrets.token_urlsafe(32),
            expires_in=ACCESS_TOKEN_TTL_SECONDS,
        )
        self._store.access_tokens[tokens.access_token] = user.id
        self._store.refresh_tokens[tokens.refresh_token] = user.id
        return tokens
