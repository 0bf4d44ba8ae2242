from ecomove.application.interfaces.pagination import PaginatedResponse, QueryOptions
from ecomove.application.interfaces.user_repo import UpdateUserData, UserRepository
from ecomove.domain.entities.user import CreateUserData, User
from ecomove.domain.errors import RepositoryError
from ecomove.infrastructure.http import endpoints
from ecomove.infrastructure.http.api_client import ApiClient
from ecomove.infrastructure.repositories.payload import is_not_found, parse_data, parse_entity, parse_page, unwrap


class HttpUserRepository(UserRepository):
    def __init__(self, api_client: ApiClient) -> None:
        self._api = api_client

    async def create(self, user_data: CreateUserData) -> User:
        body = await self._api.post(endpoints.USERS, user_data.to_json())
        return parse_entity(body, User.from_api)

    async def find_by_id(self, user_id: int) -> User | None:
        return await self._find_one(endpoints.user_by_id(user_id))

    async def find_by_email(self, email: str) -> User | None:
        return await self._find_one(endpoints.USERS, {"email": email})

    async def find_by_document(self, document_number: str) -> User | None:
        return await self._find_one(endpoints.USERS, {"documentNumber": document_number})

    async def update(self, user_id: int, updates: UpdateUserData) -> User:
        body = await self._api.patch(endpoints.user_by_id(user_id), updates.to_json())
        return parse_entity(body, User.from_api)

    async def delete(self, user_id: int) -> None:
        await self._api.delete(endpoints.user_by_id(user_id))

    async def find_all(self, options: QueryOptions | None = None) -> PaginatedResponse[User]:
        body = await self._api.get(endpoints.USERS, (options or QueryOptions()).to_params())
        return parse_page(body, User.from_api)

    async def _find_one(self, path: str, params: dict[str, str] | None = None) -> User | None:
        try:
            body = await self._api.get(path, params)
        except RepositoryError as exc:
            if is_not_found(exc):
                return None
            raise
        data = unwrap(body)
        if isinstance(data, list):
            data = data[0] if data else None
        return parse_data(data, User.from_api) if data else None
