from typing import Any

from ecomove.application.interfaces.auth_repo import AuthRepository, AuthResult, AuthTokens
from ecomove.domain.entities.user import CreateUserData, User
from ecomove.infrastructure.http import endpoints
from ecomove.infrastructure.http.api_client import ApiClient
from ecomove.infrastructure.repositories.payload import parse_entity


def _parse_auth_result(data: dict[str, Any]) -> AuthResult:
    return AuthResult(user=User.from_api(data["user"]), tokens=AuthTokens.from_api(data["tokens"]))


class HttpAuthRepository(AuthRepository):
    """Autenticación contra el backend; guarda los tokens emitidos en el ApiClient."""

    def __init__(self, api_client: ApiClient) -> None:
        self._api = api_client

    async def login(self, email: str, password: str) -> AuthResult:
        body = await self._api.post(endpoints.AUTH_LOGIN, {"email": email, "password": password})
        return self._start_session(parse_entity(body, _parse_auth_result))

    async def register(self, user_data: CreateUserData) -> AuthResult:
        body = await self._api.post(endpoints.AUTH_REGISTER, user_data.to_json())
        return self._start_session(parse_entity(body, _parse_auth_result))

    async def refresh_token(self, refresh_token: str) -> AuthTokens:
        body = await self._api.post(endpoints.AUTH_REFRESH, {"refreshToken": refresh_token})
        tokens = parse_entity(body, AuthTokens.from_api)
        self._api.set_auth_tokens(tokens.access_token, tokens.refresh_token)
        return tokens

    async def logout(self, refresh_token: str) -> None:
        try:
            await self._api.post(endpoints.AUTH_LOGOUT, {"refreshToken": refresh_token})
        finally:
            self._api.clear_auth_tokens()

    async def verify_token(self, token: str) -> User:
        body = await self._api.get(endpoints.AUTH_VERIFY_TOKEN, {"token": token})
        return parse_entity(body, User.from_api)

    def _start_session(self, result: AuthResult) -> AuthResult:
        self._api.set_auth_tokens(result.tokens.access_token, result.tokens.refresh_token)
        return result
