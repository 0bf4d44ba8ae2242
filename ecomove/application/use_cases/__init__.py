"""Casos de uso del sistema de préstamos."""

from ecomove.application.use_cases.cancel_loan import CancelLoanUseCase
from ecomove.application.use_cases.complete_loan import CompleteLoanUseCase
from ecomove.application.use_cases.create_loan import CreateLoanUseCase
from ecomove.application.use_cases.find_available_transports import (
    FindAvailableTransportsUseCase,
    MissingDistancePolicy,
)
from ecomove.application.use_cases.login_user import LoginUserUseCase
from ecomove.application.use_cases.logout_user import LogoutUserUseCase
from ecomove.application.use_cases.register_user import RegisterUserUseCase, is_password_strong

__all__ = [
    "CreateLoanUseCase",
    "CompleteLoanUseCase",
    "CancelLoanUseCase",
    "FindAvailableTransportsUseCase",
    "MissingDistancePolicy",
    "LoginUserUseCase",
    "LogoutUserUseCase",
    "RegisterUserUseCase",
    "is_password_strong",
]
