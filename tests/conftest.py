"""
Pytest configuration and shared fixtures.

Este módulo provee fixtures reutilizables para:
- Reloj determinista (FakeClock)
- Store en memoria con estaciones, vehículos y usuarios de prueba
- Repositorios en memoria sobre ese store
- Cliente HTTP de prueba (FastAPI TestClient) con override de repositorios
"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from ecomove.api.dependencies import get_repositories
from ecomove.application.interfaces.clock import FakeClock
from ecomove.domain.entities.station import Station, StationStatus
from ecomove.domain.entities.transport import Transport, TransportStatus
from ecomove.domain.entities.user import User, UserRole, UserStatus
from ecomove.domain.value_objects.battery_level import BatteryLevel
from ecomove.domain.value_objects.coordinate import Coordinate
from ecomove.domain.value_objects.document_number import DocumentNumber
from ecomove.domain.value_objects.email import Email
from ecomove.domain.value_objects.money import Money
from ecomove.domain.value_objects.phone import Phone
from ecomove.infrastructure.in_memory.auth_repo import InMemoryAuthRepository
from ecomove.infrastructure.in_memory.loan_repo import InMemoryLoanRepository
from ecomove.infrastructure.in_memory.station_repo import InMemoryStationRepository
from ecomove.infrastructure.in_memory.store import InMemoryStore
from ecomove.infrastructure.in_memory.transport_repo import InMemoryTransportRepository
from ecomove.infrastructure.in_memory.user_repo import InMemoryUserRepository
from ecomove.main import app

FIXED_NOW = datetime(2025, 3, 10, 8, 0, tzinfo=timezone.utc)

PARQUE_93 = Coordinate(4.6766, -74.0483)
USAQUEN = Coordinate(4.6952, -74.0307)
CHAPINERO = Coordinate(4.6452, -74.0639)

DEMO_PASSWORD = "Segura123"


# ============================================================================
# CONSTRUCTORES DE ENTIDADES
# ============================================================================

def make_user(
    user_id: int = 1,
    email: str = "ana@ecomove.co",
    document_number: str = "1020304050",
    phone: str = "3001234567",
    status: UserStatus = UserStatus.ACTIVE,
    role: UserRole = UserRole.USER,
) -> User:
    return User(
        id=user_id,
        name="Ana Gómez",
        email=Email(email),
        document_number=DocumentNumber(document_number),
        phone=Phone(phone),
        role=role,
        status=status,
        registration_date=FIXED_NOW,
        created_at=FIXED_NOW,
        updated_at=FIXED_NOW,
    )


def make_station(
    station_id: int = 1,
    coordinate: Coordinate = PARQUE_93,
    max_capacity: int = 10,
    current_transports: int = 0,
    status: StationStatus = StationStatus.ACTIVE,
) -> Station:
    return Station(
        id=station_id,
        name=f"Estación {station_id}",
        address=f"Calle {station_id} # 10-20",
        coordinate=coordinate,
        max_capacity=max_capacity,
        status=status,
        current_transports=current_transports,
        created_at=FIXED_NOW,
        updated_at=FIXED_NOW,
    )


def make_bicycle(
    transport_id: int = 1,
    station_id: int | None = 1,
    status: TransportStatus = TransportStatus.AVAILABLE,
    hourly_rate: int = 2000,
) -> Transport:
    return Transport.bicycle(
        transport_id,
        "Trek FX 2",
        Money(Decimal(hourly_rate), "COP"),
        station_id,
        gear_count=21,
        brake_type="disc",
        status=status,
    )


def make_scooter(
    transport_id: int = 2,
    station_id: int | None = 1,
    battery: int = 80,
    status: TransportStatus = TransportStatus.AVAILABLE,
    hourly_rate: int = 5000,
) -> Transport:
    return Transport.electric_scooter(
        transport_id,
        "Xiaomi Pro 2",
        Money(Decimal(hourly_rate), "COP"),
        station_id,
        BatteryLevel(battery),
        status=status,
    )


# ============================================================================
# FIXTURES DE DOMINIO
# ============================================================================

@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(FIXED_NOW)


@pytest.fixture
def store() -> InMemoryStore:
    """
    Red de prueba:
    - Estación 1 (Parque 93): activa, capacidad 10, bicicleta 1 y scooter 2.
    - Estación 2 (Usaquén): activa y llena, scooter 3 con batería crítica.
    - Estación 3 (Chapinero): inactiva y vacía.
    - Usuario 1 activo, usuario 2 suspendido.
    """
    store = InMemoryStore()
    store.add_user(make_user(1))
    store.add_user(
        make_user(
            2,
            email="luis@ecomove.co",
            document_number="79555111",
            phone="3109876543",
            status=UserStatus.SUSPENDED,
        )
    )
    store.add_station(make_station(1, PARQUE_93, max_capacity=10, current_transports=2))
    store.add_station(make_station(2, USAQUEN, max_capacity=1, current_transports=1))
    store.add_station(make_station(3, CHAPINERO, max_capacity=5, status=StationStatus.INACTIVE))
    store.add_transport(make_bicycle(1, station_id=1))
    store.add_transport(make_scooter(2, station_id=1, battery=80))
    store.add_transport(make_scooter(3, station_id=2, battery=8))
    return store


@pytest.fixture
def user_repo(store, clock) -> InMemoryUserRepository:
    return InMemoryUserRepository(store, clock)


@pytest.fixture
def station_repo(store) -> InMemoryStationRepository:
    return InMemoryStationRepository(store)


@pytest.fixture
def transport_repo(store, clock) -> InMemoryTransportRepository:
    return InMemoryTransportRepository(store, clock)


@pytest.fixture
def loan_repo(store, clock) -> InMemoryLoanRepository:
    return InMemoryLoanRepository(store, clock)


@pytest.fixture
def auth_repo(store, clock) -> InMemoryAuthRepository:
    repo = InMemoryAuthRepository(store, clock)
    repo.set_password(store.users[1], DEMO_PASSWORD)
    repo.set_password(store.users[2], DEMO_PASSWORD)
    return repo


# ============================================================================
# FIXTURES DE CLIENTE HTTP
# ============================================================================

@pytest.fixture
def client(store, clock, user_repo, station_repo, transport_repo, loan_repo, auth_repo) -> Generator[TestClient, None, None]:
    """
    FastAPI TestClient con override de repositorios.
    Usa el store de prueba en lugar del bundle de demostración.
    """
    async def override_get_repositories():
        yield {
            "store": store,
            "clock": clock,
            "user_repo": user_repo,
            "station_repo": station_repo,
            "transport_repo": transport_repo,
            "loan_repo": loan_repo,
            "auth_repo": auth_repo,
        }

    app.dependency_overrides[get_repositories] = override_get_repositories

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
