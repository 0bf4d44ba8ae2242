from typing import Any

from ecomove.application.interfaces.pagination import PaginatedResponse, QueryOptions
from ecomove.domain.entities.loan import CompleteLoanData, CreateLoanData, Loan


class LoanRepository:
    """
    Contrato de persistencia de préstamos.

    El backend es la autoridad sobre "un préstamo activo por usuario" y sobre la
    capacidad de las estaciones: `create` y `complete` fallan con RepositoryError
    (USER_HAS_ACTIVE_LOAN, TRANSPORT_NOT_AVAILABLE, ...) cuando esas reglas no se cumplen.
    """

    async def create(self, loan_data: CreateLoanData) -> Loan:
        raise NotImplementedError

    async def find_by_id(self, loan_id: int) -> Loan | None:
        raise NotImplementedError

    async def find_by_user(self, user_id: int, options: QueryOptions | None = None) -> PaginatedResponse[Loan]:
        raise NotImplementedError

    async def find_active_by_user(self, user_id: int) -> Loan | None:
        raise NotImplementedError

    async def find_all(self, options: QueryOptions | None = None) -> PaginatedResponse[Loan]:
        raise NotImplementedError

    async def complete(self, loan_id: int, data: CompleteLoanData) -> Loan:
        raise NotImplementedError

    async def cancel(self, loan_id: int) -> Loan:
        raise NotImplementedError

    async def update(self, loan_id: int, updates: dict[str, Any]) -> Loan:
        raise NotImplementedError

    async def find_overdue(self) -> list[Loan]:
        raise NotImplementedError
