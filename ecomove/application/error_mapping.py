"""
Traducción de códigos de error de repositorio a errores de usuario.

Cada caso de uso tiene una tabla cerrada `código -> (tipo, mensaje)`. Un código
desconocido produce el mensaje genérico del caso de uso; el código crudo nunca
se expone.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Mapping

from ecomove.domain.errors import (
    BusinessRuleViolation,
    ConflictError,
    DomainError,
    NotFoundError,
    RepositoryError,
    TransientError,
    ValidationError,
)


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    BUSINESS_RULE = "business_rule"
    CONFLICT = "conflict"
    TRANSIENT = "transient"


@dataclass(frozen=True)
class Translation:
    kind: ErrorKind
    message: str
    entity: str = "resource"


ErrorTable = Mapping[str, Translation]

NETWORK_MESSAGE = "Error de conexión. Verifica tu conexión a internet e intenta nuevamente."
UNMAPPED_CODE = "OPERATION_FAILED"


CREATE_LOAN_ERRORS: ErrorTable = {
    "USER_HAS_ACTIVE_LOAN": Translation(
        ErrorKind.CONFLICT,
        "Ya tienes un préstamo activo. Finalízalo antes de iniciar uno nuevo.",
    ),
    "TRANSPORT_NOT_AVAILABLE": Translation(
        ErrorKind.BUSINESS_RULE, "Este vehículo ya no está disponible"
    ),
    "STATION_NOT_ACTIVE": Translation(
        ErrorKind.BUSINESS_RULE, "La estación seleccionada no está activa en este momento"
    ),
    "INSUFFICIENT_BATTERY": Translation(
        ErrorKind.BUSINESS_RULE, "La batería del vehículo es demasiado baja"
    ),
    "PAYMENT_METHOD_INVALID": Translation(ErrorKind.VALIDATION, "Método de pago inválido"),
    "USER_NOT_ELIGIBLE": Translation(
        ErrorKind.BUSINESS_RULE, "Tu cuenta no está habilitada para préstamos"
    ),
    "NETWORK_ERROR": Translation(ErrorKind.TRANSIENT, NETWORK_MESSAGE),
}
CREATE_LOAN_FALLBACK = "No fue posible crear el préstamo. Intenta nuevamente."


COMPLETE_LOAN_ERRORS: ErrorTable = {
    "LOAN_NOT_FOUND": Translation(ErrorKind.NOT_FOUND, "El préstamo no existe", entity="loan"),
    "LOAN_NOT_ACTIVE": Translation(ErrorKind.BUSINESS_RULE, "El préstamo ya no está activo"),
    "STATION_NOT_ACTIVE": Translation(
        ErrorKind.BUSINESS_RULE, "La estación de destino no está activa en este momento"
    ),
    "STATION_FULL": Translation(
        ErrorKind.BUSINESS_RULE, "La estación de destino no tiene espacios disponibles"
    ),
    "NETWORK_ERROR": Translation(ErrorKind.TRANSIENT, NETWORK_MESSAGE),
}
COMPLETE_LOAN_FALLBACK = "No fue posible finalizar el préstamo. Intenta nuevamente."


CANCEL_LOAN_ERRORS: ErrorTable = {
    "LOAN_NOT_FOUND": Translation(ErrorKind.NOT_FOUND, "El préstamo no existe", entity="loan"),
    "LOAN_NOT_ACTIVE": Translation(ErrorKind.BUSINESS_RULE, "El préstamo ya no está activo"),
    "NETWORK_ERROR": Translation(ErrorKind.TRANSIENT, NETWORK_MESSAGE),
}
CANCEL_LOAN_FALLBACK = "No fue posible cancelar el préstamo. Intenta nuevamente."


FIND_TRANSPORTS_ERRORS: ErrorTable = {
    "STATION_NOT_FOUND": Translation(
        ErrorKind.NOT_FOUND, "La estación especificada no existe", entity="station"
    ),
    "NO_TRANSPORTS_FOUND": Translation(
        ErrorKind.NOT_FOUND,
        "No hay vehículos disponibles en el área especificada",
        entity="transport",
    ),
    "LOCATION_SERVICE_ERROR": Translation(
        ErrorKind.TRANSIENT,
        "No fue posible determinar tu ubicación. Revisa la configuración del GPS.",
    ),
    "NETWORK_ERROR": Translation(ErrorKind.TRANSIENT, NETWORK_MESSAGE),
}
FIND_TRANSPORTS_FALLBACK = "No fue posible buscar vehículos disponibles. Intenta nuevamente."


LOGIN_ERRORS: ErrorTable = {
    "INVALID_CREDENTIALS": Translation(ErrorKind.VALIDATION, "Email o contraseña incorrectos"),
    "USER_NOT_FOUND": Translation(
        ErrorKind.NOT_FOUND, "No existe una cuenta con este email", entity="user"
    ),
    "USER_INACTIVE": Translation(ErrorKind.BUSINESS_RULE, "La cuenta no está activa"),
    "USER_SUSPENDED": Translation(ErrorKind.BUSINESS_RULE, "La cuenta ha sido suspendida"),
    "TOO_MANY_ATTEMPTS": Translation(
        ErrorKind.BUSINESS_RULE, "Demasiados intentos de inicio de sesión. Intenta más tarde."
    ),
    "NETWORK_ERROR": Translation(ErrorKind.TRANSIENT, NETWORK_MESSAGE),
}
LOGIN_FALLBACK = "No fue posible iniciar sesión. Intenta nuevamente."


REGISTER_ERRORS: ErrorTable = {
    "EMAIL_ALREADY_EXISTS": Translation(
        ErrorKind.CONFLICT, "Ya existe una cuenta con este email"
    ),
    "DOCUMENT_ALREADY_EXISTS": Translation(
        ErrorKind.CONFLICT, "Ya existe una cuenta con este número de documento"
    ),
    "PHONE_ALREADY_EXISTS": Translation(
        ErrorKind.CONFLICT, "Ya existe una cuenta con este número de celular"
    ),
    "INVALID_EMAIL": Translation(ErrorKind.VALIDATION, "Formato de email inválido"),
    "INVALID_DOCUMENT": Translation(ErrorKind.VALIDATION, "Número de documento inválido"),
    "INVALID_PHONE": Translation(ErrorKind.VALIDATION, "Número de celular inválido"),
    "WEAK_PASSWORD": Translation(
        ErrorKind.VALIDATION, "La contraseña no cumple los requisitos de seguridad"
    ),
    "NETWORK_ERROR": Translation(ErrorKind.TRANSIENT, NETWORK_MESSAGE),
}
REGISTER_FALLBACK = "No fue posible completar el registro. Intenta nuevamente."


LOGOUT_ERRORS: ErrorTable = {
    "NETWORK_ERROR": Translation(ErrorKind.TRANSIENT, NETWORK_MESSAGE),
}
LOGOUT_FALLBACK = "No fue posible cerrar la sesión en el servidor."


def translate(error: RepositoryError, table: ErrorTable, fallback: str) -> DomainError:
    """Convierte un RepositoryError en el error de usuario que indica la tabla."""
    translation = table.get(error.code)
    if translation is None:
        return DomainError(fallback, code=UNMAPPED_CODE)

    message = translation.message
    if translation.kind == ErrorKind.VALIDATION:
        return ValidationError("request", message, code=error.code)
    if translation.kind == ErrorKind.NOT_FOUND:
        return NotFoundError(translation.entity, message=message)
    if translation.kind == ErrorKind.BUSINESS_RULE:
        return BusinessRuleViolation(message, code=error.code)
    if translation.kind == ErrorKind.CONFLICT:
        return ConflictError(message, code=error.code)
    return TransientError(message, code=error.code)
