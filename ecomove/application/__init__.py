"""
Capa de Aplicación - Préstamos de micromovilidad.

Orquesta entidades y repositorios para aplicar las reglas que cruzan varias
entidades, y traduce los fallos de infraestructura a errores de usuario.

Estructura:
- use_cases/: Casos de uso del sistema
- dtos/: Solicitudes y respuestas de los casos de uso
- interfaces/: Puertos (contratos de repositorios, reloj)
- error_mapping.py: Tablas de traducción de códigos de error
- session.py: Contexto de sesión inyectable
"""

from ecomove.application.dtos import (
    CompleteLoanRequest,
    CreateLoanRequest,
    FindAvailableTransportsRequest,
    FindAvailableTransportsResponse,
    LoginCredentials,
    RegisterData,
    TransportWithDistance,
)
from ecomove.application.interfaces import (
    AuthRepository,
    AuthResult,
    AuthTokens,
    Clock,
    FakeClock,
    FindNearbyOptions,
    LoanRepository,
    PaginatedResponse,
    QueryOptions,
    StationRepository,
    SystemClock,
    TransportRepository,
    UserRepository,
)
from ecomove.application.session import SessionContext

__all__ = [
    # DTOs
    "CreateLoanRequest",
    "CompleteLoanRequest",
    "FindAvailableTransportsRequest",
    "FindAvailableTransportsResponse",
    "TransportWithDistance",
    "LoginCredentials",
    "RegisterData",
    # Interfaces - Repositories
    "UserRepository",
    "TransportRepository",
    "StationRepository",
    "LoanRepository",
    "AuthRepository",
    "AuthResult",
    "AuthTokens",
    "QueryOptions",
    "FindNearbyOptions",
    "PaginatedResponse",
    # Interfaces - Utilities
    "Clock",
    "SystemClock",
    "FakeClock",
    # Session
    "SessionContext",
]
