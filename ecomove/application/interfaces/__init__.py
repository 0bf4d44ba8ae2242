"""Interfaces (Puertos) de la capa de aplicación."""

from ecomove.application.interfaces.auth_repo import AuthRepository, AuthResult, AuthTokens
from ecomove.application.interfaces.clock import Clock, FakeClock, SystemClock
from ecomove.application.interfaces.loan_repo import LoanRepository
from ecomove.application.interfaces.pagination import (
    FindNearbyOptions,
    PaginatedResponse,
    QueryOptions,
    SortOrder,
)
from ecomove.application.interfaces.station_repo import StationRepository
from ecomove.application.interfaces.transport_repo import TransportRepository
from ecomove.application.interfaces.user_repo import UpdateUserData, UserRepository

__all__ = [
    # Repositories
    "UserRepository",
    "UpdateUserData",
    "TransportRepository",
    "StationRepository",
    "LoanRepository",
    "AuthRepository",
    "AuthResult",
    "AuthTokens",
    # Queries
    "QueryOptions",
    "FindNearbyOptions",
    "PaginatedResponse",
    "SortOrder",
    # Utilities
    "Clock",
    "SystemClock",
    "FakeClock",
]
