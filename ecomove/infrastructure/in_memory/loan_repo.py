"""Implementación in-memory del repositorio de préstamos."""

from dataclasses import replace
from typing import Any

from ecomove.application.interfaces.clock import Clock, SystemClock
from ecomove.application.interfaces.loan_repo import LoanRepository
from ecomove.application.interfaces.pagination import PaginatedResponse, QueryOptions
from ecomove.domain.constants import MIN_RENTABLE_BATTERY
from ecomove.domain.entities.loan import CompleteLoanData, CreateLoanData, Loan, LoanStatus
from ecomove.domain.entities.transport import TransportStatus
from ecomove.domain.errors import DomainError, RepositoryError
from ecomove.infrastructure.in_memory.store import InMemoryStore


class InMemoryLoanRepository(LoanRepository):
    """
    Préstamos en memoria con las reglas que aplica el backend.

    - Un único préstamo activo por usuario.
    - Al crear, el vehículo pasa a IN_USE y sale de su estación.
    - Al finalizar, el vehículo queda AVAILABLE en la estación de destino,
      que debe tener espacio.
    """

    def __init__(self, store: InMemoryStore, clock: Clock | None = None) -> None:
        self._store = store
        self._clock = clock or SystemClock()

    async def create(self, loan_data: CreateLoanData) -> Loan:
        store = self._store
        user = store.users.get(loan_data.user_id)
        if user is None:
            raise RepositoryError("USER_NOT_FOUND", status_code=404)
        if not user.can_rent_transport():
            raise RepositoryError("USER_NOT_ELIGIBLE", status_code=403)
        if self._active_for(loan_data.user_id) is not None:
            raise RepositoryError("USER_HAS_ACTIVE_LOAN", status_code=409)

        transport = store.transports.get(loan_data.transport_id)
        if transport is None:
            raise RepositoryError("TRANSPORT_NOT_FOUND", status_code=404)
        if transport.battery_percentage <= MIN_RENTABLE_BATTERY:
            raise RepositoryError("INSUFFICIENT_BATTERY", status_code=422)
        if not transport.is_available() or transport.current_station_id != loan_data.origin_station_id:
            raise RepositoryError("TRANSPORT_NOT_AVAILABLE", status_code=409)

        station = store.stations.get(loan_data.origin_station_id)
        if station is None:
            raise RepositoryError("STATION_NOT_FOUND", status_code=404)
        if not station.is_active():
            raise RepositoryError("STATION_NOT_ACTIVE", status_code=409)

        now = self._clock.now()
        loan = Loan.open(store.next_id("loans"), loan_data, now=now, currency=transport.hourly_rate.currency)

        in_use = transport.update_status(TransportStatus.IN_USE, now=now)
        store.add_transport(replace(in_use, current_station_id=None))
        store.add_station(station.with_transport_count(max(0, station.current_transports - 1)))
        return store.add_loan(loan)

    async def find_by_id(self, loan_id: int) -> Loan | None:
        return self._store.loans.get(loan_id)

    async def find_by_user(self, user_id: int, options: QueryOptions | None = None) -> PaginatedResponse[Loan]:
        loans = [loan for loan in self._sorted() if loan.user_id == user_id]
        return PaginatedResponse.paginate(loans, options)

    async def find_active_by_user(self, user_id: int) -> Loan | None:
        return self._active_for(user_id)

    async def find_all(self, options: QueryOptions | None = None) -> PaginatedResponse[Loan]:
        return PaginatedResponse.paginate(self._sorted(), options)

    async def complete(self, loan_id: int, data: CompleteLoanData) -> Loan:
        store = self._store
        loan = self._get_active(loan_id)

        station = store.stations.get(data.destination_station_id)
        if station is None:
            raise RepositoryError("STATION_NOT_FOUND", status_code=404)
        if not station.is_active():
            raise RepositoryError("STATION_NOT_ACTIVE", status_code=409)
        if not station.can_accept_transport():
            raise RepositoryError("STATION_FULL", status_code=409)

        transport = store.transports.get(loan.transport_id)
        if transport is None:
            raise RepositoryError("TRANSPORT_NOT_FOUND", status_code=404)

        now = self._clock.now()
        try:
            transition = loan.complete(station.id, data.end_date, transport.hourly_rate, now=now)
        except DomainError as exc:
            raise RepositoryError("INVALID_END_DATE", exc.message, status_code=422) from exc
        completed = store.add_loan(loan.apply(transition))

        returned = transport.update_status(TransportStatus.AVAILABLE, now=now)
        store.add_transport(replace(returned, current_station_id=station.id))
        store.add_station(station.with_transport_count(station.current_transports + 1))
        return completed

    async def cancel(self, loan_id: int) -> Loan:
        store = self._store
        loan = self._get_active(loan_id)
        now = self._clock.now()
        cancelled = store.add_loan(loan.apply(loan.cancel(now=now)))

        # El vehículo vuelve a su estación de origen.
        transport = store.transports.get(loan.transport_id)
        origin = store.stations.get(loan.origin_station_id)
        if transport is not None and transport.status == TransportStatus.IN_USE:
            returned = transport.update_status(TransportStatus.AVAILABLE, now=now)
            store.add_transport(replace(returned, current_station_id=loan.origin_station_id))
            if origin is not None and origin.has_available_space():
                store.add_station(origin.with_transport_count(origin.current_transports + 1))
        return cancelled

    async def update(self, loan_id: int, updates: dict[str, Any]) -> Loan:
        loan = self._store.loans.get(loan_id)
        if loan is None:
            raise RepositoryError("LOAN_NOT_FOUND", status_code=404)
        return self._store.add_loan(replace(loan, **updates, updated_at=self._clock.now()))

    async def find_overdue(self) -> list[Loan]:
        now = self._clock.now()
        return [
            loan
            for loan in self._sorted()
            if loan.is_overdue() or (loan.is_active() and loan.end_date is not None and loan.end_date < now)
        ]

    def _active_for(self, user_id: int) -> Loan | None:
        return next(
            (loan for loan in self._sorted() if loan.user_id == user_id and loan.status == LoanStatus.ACTIVE),
            None,
        )

    def _get_active(self, loan_id: int) -> Loan:
        loan = self._store.loans.get(loan_id)
        if loan is None:
            raise RepositoryError("LOAN_NOT_FOUND", status_code=404)
        if not loan.is_active():
            raise RepositoryError("LOAN_NOT_ACTIVE", status_code=409)
        return loan

    def _sorted(self) -> list[Loan]:
        return sorted(self._store.loans.values(), key=lambda loan: loan.id)
