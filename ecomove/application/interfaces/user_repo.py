from dataclasses import dataclass

from ecomove.application.interfaces.pagination import PaginatedResponse, QueryOptions
from ecomove.domain.entities.user import CreateUserData, User


@dataclass(frozen=True)
class UpdateUserData:
    name: str | None = None
    phone: str | None = None

    def to_json(self) -> dict[str, str]:
        payload: dict[str, str] = {}
        if self.name is not None:
            payload["name"] = self.name
        if self.phone is not None:
            payload["phone"] = self.phone
        return payload


class UserRepository:
    async def create(self, user_data: CreateUserData) -> User:
        raise NotImplementedError

    async def find_by_id(self, user_id: int) -> User | None:
        raise NotImplementedError

    async def find_by_email(self, email: str) -> User | None:
        raise NotImplementedError

    async def find_by_document(self, document_number: str) -> User | None:
        raise NotImplementedError

    async def update(self, user_id: int, updates: UpdateUserData) -> User:
        raise NotImplementedError

    async def delete(self, user_id: int) -> None:
        raise NotImplementedError

    async def find_all(self, options: QueryOptions | None = None) -> PaginatedResponse[User]:
        raise NotImplementedError
