from fastapi import Header, HTTPException, status


def bearer_token(authorization: str | None = Header(default=None)) -> str | None:
    """Token del header `Authorization: Bearer <token>`, si viene."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Formato de Authorization inválido",
        )
    return token.strip()


def require_bearer_token(authorization: str | None = Header(default=None)) -> str:
    token = bearer_token(authorization)
    if token is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token de acceso requerido",
        )
    return token
