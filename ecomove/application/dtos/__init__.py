"""DTOs (Data Transfer Objects) de la capa de aplicación."""

from ecomove.application.dtos.auth_dto import LoginCredentials, RegisterData
from ecomove.application.dtos.loan_dto import CompleteLoanRequest, CreateLoanRequest
from ecomove.application.dtos.transport_dto import (
    FindAvailableTransportsRequest,
    FindAvailableTransportsResponse,
    TransportWithDistance,
)

__all__ = [
    # Loans
    "CreateLoanRequest",
    "CompleteLoanRequest",
    # Transports
    "FindAvailableTransportsRequest",
    "FindAvailableTransportsResponse",
    "TransportWithDistance",
    # Auth
    "LoginCredentials",
    "RegisterData",
]
