from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ecomove.application.interfaces.auth_repo import AuthResult


class LoginBody(BaseModel):
    model_config = ConfigDict(extra="forbid")

    email: str
    password: str = Field(repr=False)
    remember_me: bool = False


class RegisterBody(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str
    email: str
    document_number: str
    phone: str
    password: str = Field(repr=False)


class LogoutBody(BaseModel):
    model_config = ConfigDict(extra="forbid")

    refresh_token: str = Field(min_length=1, repr=False)


class AuthResponse(BaseModel):
    user: dict[str, Any]
    tokens: dict[str, Any]

    @classmethod
    def from_result(cls, result: AuthResult) -> "AuthResponse":
        return cls(user=result.user.to_json(), tokens=result.tokens.to_json())
