"""
Tests de los repositorios en memoria.

Reproducen las reglas del backend (unicidad, capacidad de estaciones,
préstamo activo único) con los mismos códigos de error.
"""

from datetime import timedelta
from decimal import Decimal

import pytest

from conftest import FIXED_NOW, PARQUE_93, USAQUEN
from ecomove.application.interfaces.pagination import FindNearbyOptions, QueryOptions
from ecomove.domain.entities.loan import CompleteLoanData, CreateLoanData, LoanStatus, PaymentMethod
from ecomove.domain.entities.transport import TransportStatus
from ecomove.domain.entities.user import CreateUserData
from ecomove.domain.errors import RepositoryError
from ecomove.infrastructure.in_memory.auth_repo import InMemoryAuthRepository
from ecomove.infrastructure.in_memory.seed import DEMO_USER, seed_demo_data
from ecomove.infrastructure.in_memory.store import InMemoryStore


def loan_request(user_id=1, transport_id=1, origin_station_id=1) -> CreateLoanData:
    return CreateLoanData(user_id, transport_id, origin_station_id, PaymentMethod.CREDIT_CARD)


class TestInMemoryUserRepository:
    @pytest.mark.parametrize(
        "email, document, phone, code",
        [
            ("ANA@ecomove.co", "11111111", "3200000000", "EMAIL_ALREADY_EXISTS"),
            ("otra@ecomove.co", "1.020.304.050", "3200000000", "DOCUMENT_ALREADY_EXISTS"),
            ("otra@ecomove.co", "11111111", "+57 300 123 4567", "PHONE_ALREADY_EXISTS"),
        ],
    )
    async def test_uniqueness_is_checked_on_normalized_values(self, user_repo, email, document, phone, code):
        with pytest.raises(RepositoryError) as exc_info:
            await user_repo.create(CreateUserData("Otra Persona", email, document, phone, "Segura123"))

        assert exc_info.value.code == code
        assert exc_info.value.status_code == 409

    async def test_create_assigns_next_id(self, user_repo):
        user = await user_repo.create(
            CreateUserData("Otra Persona", "otra@ecomove.co", "11111111", "3200000000", "Segura123")
        )

        assert user.id == 3
        assert await user_repo.find_by_document("11.111.111") == user

    async def test_find_all_paginates(self, user_repo):
        page = await user_repo.find_all(QueryOptions(page=2, limit=1))

        assert [u.id for u in page.data] == [2]
        assert page.total == 2
        assert page.total_pages == 2


class TestInMemoryStationRepository:
    async def test_nearby_sorted_by_distance(self, station_repo):
        stations = await station_repo.find_nearby(FindNearbyOptions(PARQUE_93, radius_km=5))

        assert [s.id for s in stations] == [1, 2, 3]

    async def test_nearby_respects_radius(self, station_repo):
        stations = await station_repo.find_nearby(FindNearbyOptions(PARQUE_93, radius_km=0.5))

        assert [s.id for s in stations] == [1]

    async def test_with_transports_and_with_space(self, station_repo):
        assert [s.id for s in await station_repo.find_with_available_transports()] == [1, 2]
        assert [s.id for s in await station_repo.find_with_available_space()] == [1]

    async def test_transport_count_cannot_exceed_capacity(self, station_repo):
        with pytest.raises(RepositoryError) as exc_info:
            await station_repo.update_transport_count(2, 2)

        assert exc_info.value.code == "STATION_CAPACITY_EXCEEDED"

    async def test_unknown_station(self, station_repo):
        with pytest.raises(RepositoryError) as exc_info:
            await station_repo.update_transport_count(99, 0)

        assert exc_info.value.code == "STATION_NOT_FOUND"


class TestInMemoryTransportRepository:
    async def test_available_excludes_critical_battery(self, transport_repo):
        assert [t.id for t in await transport_repo.find_available()] == [1, 2]
        assert await transport_repo.find_available(station_id=2) == []

    async def test_invalid_status_transition(self, transport_repo):
        await transport_repo.update_status(1, TransportStatus.MAINTENANCE)

        with pytest.raises(RepositoryError) as exc_info:
            await transport_repo.update_status(1, TransportStatus.IN_USE)

        assert exc_info.value.code == "INVALID_STATUS_TRANSITION"

    async def test_nearby_orders_by_station_distance(self, transport_repo):
        transports = await transport_repo.find_nearby(FindNearbyOptions(USAQUEN, radius_km=5))

        assert [t.id for t in transports] == [3, 1, 2]

    async def test_nearby_limit(self, transport_repo):
        transports = await transport_repo.find_nearby(FindNearbyOptions(PARQUE_93, radius_km=5, limit=2))

        assert [t.id for t in transports] == [1, 2]


class TestInMemoryLoanRepository:
    @pytest.mark.parametrize(
        "request_, code",
        [
            (loan_request(user_id=99), "USER_NOT_FOUND"),
            (loan_request(user_id=2), "USER_NOT_ELIGIBLE"),
            (loan_request(transport_id=99), "TRANSPORT_NOT_FOUND"),
            (loan_request(transport_id=3, origin_station_id=2), "INSUFFICIENT_BATTERY"),
            (loan_request(transport_id=1, origin_station_id=2), "TRANSPORT_NOT_AVAILABLE"),
        ],
    )
    async def test_create_rejections(self, loan_repo, store, request_, code):
        with pytest.raises(RepositoryError) as exc_info:
            await loan_repo.create(request_)

        assert exc_info.value.code == code
        assert store.loans == {}

    async def test_create_takes_transport_out_of_station(self, loan_repo, store):
        loan = await loan_repo.create(loan_request())

        assert loan.status == LoanStatus.ACTIVE
        assert loan.start_date == FIXED_NOW
        assert store.transports[1].status == TransportStatus.IN_USE
        assert store.transports[1].current_station_id is None
        assert store.stations[1].current_transports == 1

    async def test_one_active_loan_per_user(self, loan_repo):
        await loan_repo.create(loan_request())

        with pytest.raises(RepositoryError) as exc_info:
            await loan_repo.create(loan_request(transport_id=2))

        assert exc_info.value.code == "USER_HAS_ACTIVE_LOAN"

    async def test_complete_returns_transport_to_destination(self, loan_repo, store, clock):
        loan = await loan_repo.create(loan_request())
        clock.advance(minutes=65)

        completed = await loan_repo.complete(loan.id, CompleteLoanData(1, clock.now()))

        assert completed.status == LoanStatus.COMPLETED
        assert completed.total_cost.amount == Decimal("4000")
        assert store.transports[1].status == TransportStatus.AVAILABLE
        assert store.transports[1].current_station_id == 1
        assert store.stations[1].current_transports == 2

    @pytest.mark.parametrize("destination, code", [(2, "STATION_FULL"), (3, "STATION_NOT_ACTIVE"), (9, "STATION_NOT_FOUND")])
    async def test_complete_rejects_unusable_destination(self, loan_repo, clock, destination, code):
        loan = await loan_repo.create(loan_request())
        clock.advance(minutes=10)

        with pytest.raises(RepositoryError) as exc_info:
            await loan_repo.complete(loan.id, CompleteLoanData(destination, clock.now()))

        assert exc_info.value.code == code

    async def test_complete_rejects_end_before_start(self, loan_repo):
        loan = await loan_repo.create(loan_request())

        with pytest.raises(RepositoryError) as exc_info:
            await loan_repo.complete(loan.id, CompleteLoanData(1, FIXED_NOW - timedelta(minutes=5)))

        assert exc_info.value.code == "INVALID_END_DATE"

    async def test_finished_loans_cannot_be_completed_or_cancelled(self, loan_repo, clock):
        loan = await loan_repo.create(loan_request())
        await loan_repo.cancel(loan.id)

        with pytest.raises(RepositoryError) as exc_info:
            await loan_repo.complete(loan.id, CompleteLoanData(1, clock.now()))
        assert exc_info.value.code == "LOAN_NOT_ACTIVE"

        with pytest.raises(RepositoryError) as exc_info:
            await loan_repo.cancel(loan.id)
        assert exc_info.value.code == "LOAN_NOT_ACTIVE"

    async def test_cancel_returns_transport_to_origin(self, loan_repo, store):
        loan = await loan_repo.create(loan_request(transport_id=2))

        cancelled = await loan_repo.cancel(loan.id)

        assert cancelled.status == LoanStatus.CANCELLED
        assert store.transports[2].current_station_id == 1
        assert store.transports[2].status == TransportStatus.AVAILABLE
        assert store.stations[1].current_transports == 2
        assert await loan_repo.find_active_by_user(1) is None


class TestInMemoryAuthRepository:
    async def test_tokens_map_to_user_until_logout(self, auth_repo):
        result = await auth_repo.login("ana@ecomove.co", "Segura123")

        assert (await auth_repo.verify_token(result.tokens.access_token)).id == 1

        await auth_repo.logout(result.tokens.refresh_token)

        with pytest.raises(RepositoryError) as exc_info:
            await auth_repo.verify_token(result.tokens.access_token)
        assert exc_info.value.code == "INVALID_TOKEN"

    async def test_refresh_rotates_refresh_token(self, auth_repo):
        result = await auth_repo.login("ana@ecomove.co", "Segura123")

        tokens = await auth_repo.refresh_token(result.tokens.refresh_token)

        assert tokens.refresh_token != result.tokens.refresh_token
        with pytest.raises(RepositoryError):
            await auth_repo.refresh_token(result.tokens.refresh_token)

    async def test_wrong_password(self, auth_repo):
        with pytest.raises(RepositoryError) as exc_info:
            await auth_repo.login("ana@ecomove.co", "Incorrecta1")

        assert exc_info.value.code == "INVALID_CREDENTIALS"
        assert exc_info.value.status_code == 401


class TestSeedDemoData:
    async def test_seeded_network_is_usable(self, clock):
        store = InMemoryStore()
        seed_demo_data(store, FIXED_NOW)

        assert len(store.stations) == 3
        assert len(store.transports) == 5
        for station in store.stations.values():
            located = [t for t in store.transports.values() if t.current_station_id == station.id]
            assert station.current_transports == len(located)

        result = await InMemoryAuthRepository(store, clock).login(DEMO_USER.email, DEMO_USER.password)
        assert result.user.name == DEMO_USER.name

    def test_seeding_twice_is_a_noop(self):
        store = InMemoryStore()
        seed_demo_data(store, FIXED_NOW)
        seed_demo_data(store, FIXED_NOW)

        assert len(store.stations) == 3
        assert len(store.users) == 1
