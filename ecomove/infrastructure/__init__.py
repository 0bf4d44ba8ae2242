"""
Capa de Infraestructura - Préstamos de micromovilidad.

Implementaciones concretas de los puertos (repositorios).

Estructura:
- http/: Cliente JSON del backend REST, rutas y reintentos
- repositories/: Repositorios que hablan con el backend vía ApiClient
- in_memory/: Implementaciones en memoria (demo y testing)
"""

# HTTP
from ecomove.infrastructure.http.api_client import ApiClient

# In-Memory
from ecomove.infrastructure.in_memory import (
    InMemoryAuthRepository,
    InMemoryLoanRepository,
    InMemoryStationRepository,
    InMemoryStore,
    InMemoryTransportRepository,
    InMemoryUserRepository,
    seed_demo_data,
)

# Backend repositories
from ecomove.infrastructure.repositories.http_auth_repo import HttpAuthRepository
from ecomove.infrastructure.repositories.http_loan_repo import HttpLoanRepository
from ecomove.infrastructure.repositories.http_station_repo import HttpStationRepository
from ecomove.infrastructure.repositories.http_transport_repo import HttpTransportRepository
from ecomove.infrastructure.repositories.http_user_repo import HttpUserRepository

__all__ = [
    # HTTP
    "ApiClient",
    # Backend repositories
    "HttpUserRepository",
    "HttpStationRepository",
    "HttpTransportRepository",
    "HttpLoanRepository",
    "HttpAuthRepository",
    # In-Memory Implementations
    "InMemoryStore",
    "InMemoryUserRepository",
    "InMemoryStationRepository",
    "InMemoryTransportRepository",
    "InMemoryLoanRepository",
    "InMemoryAuthRepository",
    "seed_demo_data",
]
