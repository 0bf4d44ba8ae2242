from dataclasses import dataclass, field
from typing import Any, Literal

from ecomove.domain.entities.user import CreateUserData, User


@dataclass(frozen=True)
class AuthTokens:
    access_token: str = field(repr=False)
    refresh_token: str = field(repr=False)
    expires_in: int
    token_type: Literal["Bearer"] = "Bearer"

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "AuthTokens":
        return cls(
            access_token=data["accessToken"],
            refresh_token=data["refreshToken"],
            expires_in=data["expiresIn"],
        )

    def to_json(self) -> dict[str, Any]:
        return {
            "accessToken": self.access_token,
            "refreshToken": self.refresh_token,
            "expiresIn": self.expires_in,
            "tokenType": self.token_type,
        }


@dataclass(frozen=True)
class AuthResult:
    user: User
    tokens: AuthTokens


class AuthRepository:
    """Emisión y verificación de tokens; un servicio externo opaco."""

    async def login(self, email: str, password: str) -> AuthResult:
        raise NotImplementedError

    async def register(self, user_data: CreateUserData) -> AuthResult:
        raise NotImplementedError

    async def refresh_token(self, refresh_token: str) -> AuthTokens:
        raise NotImplementedError

    async def logout(self, refresh_token: str) -> None:
        raise NotImplementedError

    async def verify_token(self, token: str) -> User:
        raise NotImplementedError
