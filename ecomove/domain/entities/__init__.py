"""Entidades del dominio de préstamos."""

from ecomove.domain.entities.loan import CompleteLoanData, CreateLoanData, Loan, LoanStatus, PaymentMethod
from ecomove.domain.entities.state_transition import StateTransition
from ecomove.domain.entities.station import CreateStationData, Station, StationStatus
from ecomove.domain.entities.transport import (
    STATUS_TRANSITIONS,
    BicycleSpec,
    ElectricScooterSpec,
    Transport,
    TransportStatus,
    TransportType,
)
from ecomove.domain.entities.user import CreateUserData, User, UserRole, UserStatus

__all__ = [
    # User
    "User",
    "UserRole",
    "UserStatus",
    "CreateUserData",
    # Station
    "Station",
    "StationStatus",
    "CreateStationData",
    # Transport
    "Transport",
    "TransportType",
    "TransportStatus",
    "BicycleSpec",
    "ElectricScooterSpec",
    "STATUS_TRANSITIONS",
    # Loan
    "Loan",
    "LoanStatus",
    "PaymentMethod",
    "CreateLoanData",
    "CompleteLoanData",
    # Transiciones
    "StateTransition",
]
