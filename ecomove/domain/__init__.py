"""
Capa de Dominio - Préstamos de micromovilidad.

Lógica de negocio pura, sin dependencias de frameworks.

Estructura:
- entities/: User, Station, Transport (bicicleta / scooter), Loan
- value_objects/: Money, Duration, Coordinate, BatteryLevel, Email, Phone, DocumentNumber
- errors.py: Taxonomía de errores del dominio
- constants.py: Reglas y límites del dominio
- pricing.py: Regla de cobro por hora iniciada
"""

from ecomove.domain.entities import (
    Loan,
    LoanStatus,
    PaymentMethod,
    StateTransition,
    Station,
    StationStatus,
    Transport,
    TransportStatus,
    TransportType,
    User,
    UserRole,
    UserStatus,
)
from ecomove.domain.errors import (
    BusinessRuleViolation,
    ConflictError,
    DomainError,
    InvalidTransitionError,
    NotFoundError,
    RepositoryError,
    TransientError,
    ValidationError,
)
from ecomove.domain.value_objects import (
    BatteryLevel,
    BatteryStatus,
    Coordinate,
    DocumentNumber,
    Duration,
    Email,
    Money,
    Phone,
)

__all__ = [
    # Entities
    "User",
    "UserRole",
    "UserStatus",
    "Station",
    "StationStatus",
    "Transport",
    "TransportType",
    "TransportStatus",
    "Loan",
    "LoanStatus",
    "PaymentMethod",
    "StateTransition",
    # Value Objects
    "Money",
    "Duration",
    "Coordinate",
    "BatteryLevel",
    "BatteryStatus",
    "Email",
    "Phone",
    "DocumentNumber",
    # Errors
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "BusinessRuleViolation",
    "InvalidTransitionError",
    "ConflictError",
    "TransientError",
    "RepositoryError",
]
