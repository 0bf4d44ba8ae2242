"""Traducción de errores de dominio a respuestas HTTP."""

import logging
import uuid

from fastapi import Request, status
from fastapi.responses import JSONResponse

from ecomove.domain.errors import (
    BusinessRuleViolation,
    ConflictError,
    DomainError,
    NotFoundError,
    RepositoryError,
    TransientError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# El orden importa: la primera clase que coincide gana.
STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (ValidationError, status.HTTP_422_UNPROCESSABLE_ENTITY),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (BusinessRuleViolation, status.HTTP_409_CONFLICT),
    (TransientError, status.HTTP_503_SERVICE_UNAVAILABLE),
]


def status_for(exc: DomainError) -> int:
    if isinstance(exc, RepositoryError):
        return exc.status_code or status.HTTP_502_BAD_GATEWAY
    for error_type, status_code in STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_400_BAD_REQUEST


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    status_code = status_for(exc)
    logger.info(
        "Domain error",
        extra={
            "path": request.url.path,
            "method": request.method,
            "error_code": exc.code,
            "status_code": status_code,
        },
    )
    content = {"detail": exc.message, "code": exc.code}
    if isinstance(exc, ValidationError):
        content["field"] = exc.field
    return JSONResponse(status_code=status_code, content=content)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Último recurso: registra el error con un error_id y responde 500 sin
    exponer el stack trace al cliente.
    """
    error_id = str(uuid.uuid4())
    logger.error(
        "Unhandled exception occurred",
        exc_info=exc,
        extra={
            "error_id": error_id,
            "path": request.url.path,
            "method": request.method,
            "client_host": request.client.host if request.client else None,
        },
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "detail": "Error interno del servidor",
            "error_id": error_id,
            "code": "INTERNAL_ERROR",
        },
    )
