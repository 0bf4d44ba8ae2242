from functools import lru_cache
from typing import AsyncIterator

from fastapi import Depends

from ecomove.api.security import bearer_token
from ecomove.application.interfaces.clock import SystemClock
from ecomove.application.session import SessionContext
from ecomove.application.use_cases.cancel_loan import CancelLoanUseCase
from ecomove.application.use_cases.complete_loan import CompleteLoanUseCase
from ecomove.application.use_cases.create_loan import CreateLoanUseCase
from ecomove.application.use_cases.find_available_transports import FindAvailableTransportsUseCase
from ecomove.application.use_cases.login_user import LoginUserUseCase
from ecomove.application.use_cases.logout_user import LogoutUserUseCase
from ecomove.application.use_cases.register_user import RegisterUserUseCase
from ecomove.config import Settings, get_settings
from ecomove.infrastructure.http.api_client import ApiClient
from ecomove.infrastructure.in_memory.auth_repo import InMemoryAuthRepository
from ecomove.infrastructure.in_memory.loan_repo import InMemoryLoanRepository
from ecomove.infrastructure.in_memory.seed import seed_demo_data
from ecomove.infrastructure.in_memory.station_repo import InMemoryStationRepository
from ecomove.infrastructure.in_memory.store import InMemoryStore
from ecomove.infrastructure.in_memory.transport_repo import InMemoryTransportRepository
from ecomove.infrastructure.in_memory.user_repo import InMemoryUserRepository
from ecomove.infrastructure.repositories.http_auth_repo import HttpAuthRepository
from ecomove.infrastructure.repositories.http_loan_repo import HttpLoanRepository
from ecomove.infrastructure.repositories.http_station_repo import HttpStationRepository
from ecomove.infrastructure.repositories.http_transport_repo import HttpTransportRepository
from ecomove.infrastructure.repositories.http_user_repo import HttpUserRepository


@lru_cache(maxsize=1)
def _in_memory_bundle(currency: str) -> dict:
    clock = SystemClock()
    store = InMemoryStore()
    seed_demo_data(store, clock.now(), currency)
    return {
        "store": store,
        "clock": clock,
        "user_repo": InMemoryUserRepository(store, clock),
        "station_repo": InMemoryStationRepository(store),
        "transport_repo": InMemoryTransportRepository(store, clock),
        "loan_repo": InMemoryLoanRepository(store, clock),
        "auth_repo": InMemoryAuthRepository(store, clock),
    }


def _http_bundle(api_client: ApiClient) -> dict:
    return {
        "api_client": api_client,
        "clock": SystemClock(),
        "user_repo": HttpUserRepository(api_client),
        "station_repo": HttpStationRepository(api_client),
        "transport_repo": HttpTransportRepository(api_client),
        "loan_repo": HttpLoanRepository(api_client),
        "auth_repo": HttpAuthRepository(api_client),
    }


async def get_repositories(
    settings: Settings = Depends(get_settings),
    access_token: str | None = Depends(bearer_token),
) -> AsyncIterator[dict]:
    if settings.use_in_memory:
        yield _in_memory_bundle(settings.default_currency)
        return

    # Un cliente por request: los tokens de un usuario no deben filtrarse a otro.
    api_client = ApiClient(
        base_url=settings.api_base_url,
        timeout_seconds=settings.api_timeout_seconds,
        retry_times=settings.api_retry_times,
        retry_base_delay=settings.api_retry_base_delay,
    )
    if access_token:
        api_client.set_auth_tokens(access_token)
    try:
        yield _http_bundle(api_client)
    finally:
        await api_client.aclose()


def get_session_context() -> SessionContext:
    return SessionContext()


def get_use_cases(
    settings: Settings = Depends(get_settings),
    repos: dict = Depends(get_repositories),
    session: SessionContext = Depends(get_session_context),
) -> dict:
    return {
        "create_loan": CreateLoanUseCase(
            loan_repo=repos["loan_repo"],
            transport_repo=repos["transport_repo"],
            station_repo=repos["station_repo"],
            user_repo=repos["user_repo"],
        ),
        "complete_loan": CompleteLoanUseCase(
            loan_repo=repos["loan_repo"],
            transport_repo=repos["transport_repo"],
            station_repo=repos["station_repo"],
            clock=repos["clock"],
        ),
        "cancel_loan": CancelLoanUseCase(loan_repo=repos["loan_repo"]),
        "find_available_transports": FindAvailableTransportsUseCase(
            transport_repo=repos["transport_repo"],
            station_repo=repos["station_repo"],
            default_radius_km=settings.default_search_radius_km,
            missing_distance_policy=settings.missing_distance_policy,
        ),
        "login": LoginUserUseCase(auth_repo=repos["auth_repo"], session=session),
        "register": RegisterUserUseCase(
            auth_repo=repos["auth_repo"],
            password_min_length=settings.password_min_length,
            session=session,
        ),
        "logout": LogoutUserUseCase(auth_repo=repos["auth_repo"], session=session),
    }
