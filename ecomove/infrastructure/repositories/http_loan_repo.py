from typing import Any

from ecomove.application.interfaces.loan_repo import LoanRepository
from ecomove.application.interfaces.pagination import PaginatedResponse, QueryOptions
from ecomove.domain.entities.loan import CompleteLoanData, CreateLoanData, Loan
from ecomove.domain.errors import RepositoryError
from ecomove.infrastructure.http import endpoints
from ecomove.infrastructure.http.api_client import ApiClient
from ecomove.infrastructure.repositories.payload import (
    is_not_found,
    parse_data,
    parse_entity,
    parse_list,
    parse_page,
    unwrap,
)


class HttpLoanRepository(LoanRepository):
    def __init__(self, api_client: ApiClient) -> None:
        self._api = api_client

    async def create(self, loan_data: CreateLoanData) -> Loan:
        body = await self._api.post(endpoints.LOANS, loan_data.to_json())
        return parse_entity(body, Loan.from_api)

    async def find_by_id(self, loan_id: int) -> Loan | None:
        try:
            body = await self._api.get(endpoints.loan_by_id(loan_id))
        except RepositoryError as exc:
            if is_not_found(exc):
                return None
            raise
        return parse_entity(body, Loan.from_api)

    async def find_by_user(self, user_id: int, options: QueryOptions | None = None) -> PaginatedResponse[Loan]:
        params = {"userId": str(user_id), **(options or QueryOptions()).to_params()}
        body = await self._api.get(endpoints.LOANS, params)
        return parse_page(body, Loan.from_api)

    async def find_active_by_user(self, user_id: int) -> Loan | None:
        try:
            body = await self._api.get(endpoints.LOANS_ACTIVE, {"userId": str(user_id)})
        except RepositoryError as exc:
            if is_not_found(exc):
                return None
            raise
        data = unwrap(body)
        return parse_data(data, Loan.from_api) if data else None

    async def find_all(self, options: QueryOptions | None = None) -> PaginatedResponse[Loan]:
        body = await self._api.get(endpoints.LOANS, (options or QueryOptions()).to_params())
        return parse_page(body, Loan.from_api)

    async def complete(self, loan_id: int, data: CompleteLoanData) -> Loan:
        body = await self._api.put(endpoints.loan_complete(loan_id), data.to_json())
        return parse_entity(body, Loan.from_api)

    async def cancel(self, loan_id: int) -> Loan:
        body = await self._api.put(endpoints.loan_cancel(loan_id), {})
        return parse_entity(body, Loan.from_api)

    async def update(self, loan_id: int, updates: dict[str, Any]) -> Loan:
        body = await self._api.patch(endpoints.loan_by_id(loan_id), updates)
        return parse_entity(body, Loan.from_api)

    async def find_overdue(self) -> list[Loan]:
        body = await self._api.get(endpoints.LOANS_OVERDUE)
        return parse_list(body, Loan.from_api)
