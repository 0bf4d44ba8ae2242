"""Estado compartido por los repositorios en memoria."""

from dataclasses import dataclass, field

from ecomove.domain.entities.loan import Loan
from ecomove.domain.entities.station import Station
from ecomove.domain.entities.transport import Transport
from ecomove.domain.entities.user import User


@dataclass
class InMemoryStore:
    """
    Tablas en memoria.

    Los repositorios comparten una misma instancia para que un préstamo pueda
    mover vehículos entre estaciones como lo haría el backend.
    """

    users: dict[int, User] = field(default_factory=dict)
    stations: dict[int, Station] = field(default_factory=dict)
    transports: dict[int, Transport] = field(default_factory=dict)
    loans: dict[int, Loan] = field(default_factory=dict)
    password_hashes: dict[int, str] = field(default_factory=dict)
    access_tokens: dict[str, int] = field(default_factory=dict)
    refresh_tokens: dict[str, int] = field(default_factory=dict)
    _sequences: dict[str, int] = field(default_factory=dict)

    def next_id(self, table: str) -> int:
        current = self._sequences.get(table, 0)
        existing = getattr(self, table, {})
        value = max([current, *existing.keys()]) + 1
        self._sequences[table] = value
        return value

    def add_user(self, user: User) -> User:
        self.users[user.id] = user
        return user

    def add_station(self, station: Station) -> Station:
        self.stations[station.id] = station
        return station

    def add_transport(self, transport: Transport) -> Transport:
        self.transports[transport.id] = transport
        return transport

    def add_loan(self, loan: Loan) -> Loan:
        self.loans[loan.id] = loan
        return loan
