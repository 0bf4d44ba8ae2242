from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from ecomove.api.dependencies import get_repositories, get_session_context, get_use_cases
from ecomove.api.schemas.auth import AuthResponse, LoginBody, LogoutBody, RegisterBody
from ecomove.api.security import require_bearer_token
from ecomove.application.dtos.auth_dto import LoginCredentials, RegisterData
from ecomove.application.interfaces.auth_repo import AuthResult, AuthTokens
from ecomove.application.session import SessionContext

router = APIRouter()


@router.post("/auth/login", response_model=AuthResponse)
async def login(
    body: LoginBody,
    use_cases: Annotated[dict, Depends(get_use_cases)],
) -> AuthResponse:
    result = await use_cases["login"].execute(
        LoginCredentials(email=body.email, password=body.password, remember_me=body.remember_me)
    )
    return AuthResponse.from_result(result)


@router.post("/auth/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(
    body: RegisterBody,
    use_cases: Annotated[dict, Depends(get_use_cases)],
) -> AuthResponse:
    result = await use_cases["register"].execute(
        RegisterData(
            name=body.name,
            email=body.email,
            document_number=body.document_number,
            phone=body.phone,
            password=body.password,
        )
    )
    return AuthResponse.from_result(result)


@router.post("/auth/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(
    body: LogoutBody,
    access_token: Annotated[str, Depends(require_bearer_token)],
    repos: Annotated[dict, Depends(get_repositories)],
    session: Annotated[SessionContext, Depends(get_session_context)],
    use_cases: Annotated[dict, Depends(get_use_cases)],
) -> Response:
    """Cierra la sesión del token enviado; un token inválido responde 401."""
    user = await repos["auth_repo"].verify_token(access_token)
    session.start(
        AuthResult(
            user=user,
            tokens=AuthTokens(access_token=access_token, refresh_token=body.refresh_token, expires_in=0),
        )
    )
    await use_cases["logout"].execute()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
