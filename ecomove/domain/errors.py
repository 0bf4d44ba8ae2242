"""Excepciones de dominio para el sistema de préstamos."""


class DomainError(Exception):
    """Clase base para todos los errores de dominio."""

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


# === Errores de Validación ===


class ValidationError(DomainError, ValueError):
    """
    Entrada mal formada o value object inválido.

    Siempre recuperable por quien llama: corregir la entrada y reintentar.
    """

    def __init__(self, field: str, message: str, code: str = "VALIDATION_ERROR"):
        super().__init__(message=message, code=code)
        self.field = field


# === Errores de Existencia ===


class NotFoundError(DomainError):
    """La entidad referenciada no existe."""

    def __init__(self, entity: str, entity_id: object = None, message: str | None = None):
        super().__init__(
            message=message or f"{entity} no encontrado: {entity_id}",
            code=f"{entity.upper()}_NOT_FOUND",
        )
        self.entity = entity
        self.entity_id = entity_id


# === Reglas de Negocio ===


class BusinessRuleViolation(DomainError):
    """La solicitud es válida pero el estado actual de las entidades la impide."""

    def __init__(self, message: str, code: str = "BUSINESS_RULE_VIOLATION"):
        super().__init__(message=message, code=code)


class InvalidTransitionError(BusinessRuleViolation):
    """Transición de estado no permitida por la máquina de estados."""

    def __init__(self, entity: str, current_status: str, new_status: str, message: str | None = None):
        super().__init__(
            message=message
            or f"Transición inválida de {entity}: '{current_status}' -> '{new_status}'",
            code="INVALID_TRANSITION",
        )
        self.entity = entity
        self.current_status = current_status
        self.new_status = new_status


# === Conflictos ===


class ConflictError(DomainError):
    """Unicidad o carrera detectada por el repositorio (ej: préstamo activo duplicado)."""

    def __init__(self, message: str, code: str = "CONFLICT"):
        super().__init__(message=message, code=code)


# === Errores Transitorios ===


class TransientError(DomainError):
    """Fallo de red o conectividad. Única clase segura para reintentar."""

    def __init__(self, message: str, code: str = "NETWORK_ERROR"):
        super().__init__(message=message, code=code)


# === Errores de Repositorio ===


class RepositoryError(DomainError):
    """
    Fallo reportado por un repositorio con un código propio del backend.

    Los casos de uso traducen estos códigos a mensajes de usuario; el código
    crudo nunca llega a quien invoca el caso de uso.
    """

    def __init__(self, code: str, message: str | None = None, status_code: int | None = None):
        super().__init__(message=message or code, code=code)
        self.status_code = status_code
