"""Implementación in-memory del repositorio de usuarios."""

from datetime import datetime

from ecomove.application.interfaces.clock import Clock, SystemClock
from ecomove.application.interfaces.pagination import PaginatedResponse, QueryOptions
from ecomove.application.interfaces.user_repo import UpdateUserData, UserRepository
from ecomove.domain.entities.user import CreateUserData, User
from ecomove.domain.errors import RepositoryError
from ecomove.domain.value_objects.document_number import DocumentNumber
from ecomove.domain.value_objects.email import Email
from ecomove.domain.value_objects.phone import Phone
from ecomove.infrastructure.in_memory.store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    """Aplica la unicidad de email, documento y celular como el backend."""

    def __init__(self, store: InMemoryStore, clock: Clock | None = None) -> None:
        self._store = store
        self._clock = clock or SystemClock()

    async def create(self, user_data: CreateUserData) -> User:
        return self.register(user_data, self._clock.now())

    def register(self, user_data: CreateUserData, now: datetime) -> User:
        """Alta síncrona compartida con el repositorio de autenticación."""
        self.ensure_unique(user_data)
        user = User.register(self._store.next_id("users"), user_data, now=now)
        return self._store.add_user(user)

    def ensure_unique(self, user_data: CreateUserData) -> None:
        email = Email.create(user_data.email)
        document = DocumentNumber.create(user_data.document_number)
        phone = Phone.create(user_data.phone)
        for user in self._store.users.values():
            if user.email == email:
                raise RepositoryError("EMAIL_ALREADY_EXISTS", status_code=409)
            if user.document_number == document:
                raise RepositoryError("DOCUMENT_ALREADY_EXISTS", status_code=409)
            if user.phone == phone:
                raise RepositoryError("PHONE_ALREADY_EXISTS", status_code=409)

    async def find_by_id(self, user_id: int) -> User | None:
        return self._store.users.get(user_id)

    async def find_by_email(self, email: str) -> User | None:
        normalized = email.strip().lower()
        return next((u for u in self._store.users.values() if u.email.value == normalized), None)

    async def find_by_document(self, document_number: str) -> User | None:
        digits = "".join(ch for ch in document_number if ch.isdigit())
        return next(
            (u for u in self._store.users.values() if u.document_number.value == digits), None
        )

    async def update(self, user_id: int, updates: UpdateUserData) -> User:
        user = self._store.users.get(user_id)
        if user is None:
            raise RepositoryError("USER_NOT_FOUND", status_code=404)
        transition = user.update_profile(name=updates.name, phone=updates.phone, now=self._clock.now())
        return self._store.add_user(user.apply(transition))

    async def delete(self, user_id: int) -> None:
        if self._store.users.pop(user_id, None) is None:
            raise RepositoryError("USER_NOT_FOUND", status_code=404)

    async def find_all(self, options: QueryOptions | None = None) -> PaginatedResponse[User]:
        users = sorted(self._store.users.values(), key=lambda u: u.id)
        return PaginatedResponse.paginate(users, options)
