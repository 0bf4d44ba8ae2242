"""Datos de demostración para el modo en memoria (Bogotá)."""

from datetime import datetime

from ecomove.domain.entities.station import CreateStationData, Station
from ecomove.domain.entities.transport import Transport
from ecomove.domain.entities.user import CreateUserData
from ecomove.domain.value_objects.battery_level import BatteryLevel
from ecomove.domain.value_objects.money import Money
from ecomove.infrastructure.in_memory.auth_repo import InMemoryAuthRepository
from ecomove.infrastructure.in_memory.store import InMemoryStore
from ecomove.infrastructure.in_memory.user_repo import InMemoryUserRepository

DEMO_USER = CreateUserData(
    name="Usuario Demo",
    email="demo@ecomove.co",
    document_number="1020304050",
    phone="3001234567",
    password="Ecomove2024",
)

STATIONS = [
    CreateStationData("Parque de la 93", "Calle 93A # 11A-28", 4.6766, -74.0483, 20),
    CreateStationData("Usaquén", "Carrera 6A # 119B-52", 4.6952, -74.0307, 15),
    CreateStationData("Chapinero", "Calle 60 # 9-83", 4.6452, -74.0639, 10),
]


def demo_fleet(currency: str) -> list[Transport]:
    bike_rate = Money.create(2000, currency)
    scooter_rate = Money.create(5000, currency)
    return [
        Transport.bicycle(1, "Trek FX 2", bike_rate, 1, gear_count=21, brake_type="disc"),
        Transport.bicycle(2, "GW Lynx", bike_rate, 1),
        Transport.electric_scooter(3, "Xiaomi Pro 2", scooter_rate, 1, BatteryLevel.create(85)),
        Transport.electric_scooter(4, "Segway Ninebot", scooter_rate, 2, BatteryLevel.create(8)),
        Transport.electric_scooter(5, "Xiaomi Essential", scooter_rate, 3, BatteryLevel.create(60)),
    ]


def seed_demo_data(store: InMemoryStore, now: datetime, currency: str = "COP") -> None:
    """Carga estaciones, flota y un usuario demo si el store está vacío."""
    if store.stations:
        return

    for data in STATIONS:
        store.add_station(Station.open(store.next_id("stations"), data, now=now))

    fleet = demo_fleet(currency)
    for transport in fleet:
        store.add_transport(transport)
    for station in list(store.stations.values()):
        docked = sum(1 for t in fleet if t.current_station_id == station.id)
        store.add_station(station.with_transport_count(docked))

    user = InMemoryUserRepository(store).register(DEMO_USER, now)
    InMemoryAuthRepository(store).set_password(user, DEMO_USER.password)
