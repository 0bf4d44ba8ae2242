from datetime import timedelta

import pytest
import pytest_asyncio

from conftest import FIXED_NOW
from ecomove.application.dtos.loan_dto import CompleteLoanRequest
from ecomove.application.use_cases.cancel_loan import CancelLoanUseCase
from ecomove.application.use_cases.complete_loan import CompleteLoanUseCase
from ecomove.domain.entities.loan import CreateLoanData, LoanStatus, PaymentMethod
from ecomove.domain.entities.transport import TransportStatus
from ecomove.domain.errors import BusinessRuleViolation, InvalidTransitionError, NotFoundError
from ecomove.domain.value_objects.money import Money


@pytest_asyncio.fixture
async def open_loan(loan_repo):
    return await loan_repo.create(
        CreateLoanData(user_id=1, transport_id=1, origin_station_id=1, payment_method=PaymentMethod.CASH)
    )


@pytest.fixture
def complete_loan(loan_repo, transport_repo, station_repo, clock) -> CompleteLoanUseCase:
    return CompleteLoanUseCase(loan_repo, transport_repo, station_repo, clock)


@pytest.fixture
def cancel_loan(loan_repo) -> CancelLoanUseCase:
    return CancelLoanUseCase(loan_repo)


class TestCompleteLoan:
    async def test_completes_and_bills_started_hours(self, complete_loan, open_loan, store, clock):
        clock.advance(minutes=65)

        loan = await complete_loan.execute(CompleteLoanRequest(open_loan.id, destination_station_id=1))

        assert loan.status == LoanStatus.COMPLETED
        assert loan.total_cost == Money.create(4000)
        assert loan.end_date == FIXED_NOW + timedelta(minutes=65)
        assert loan.duration_minutes() == 65
        assert store.transports[1].status == TransportStatus.AVAILABLE
        assert store.transports[1].current_station_id == 1
        assert store.stations[1].current_transports == 2

    async def test_explicit_end_date(self, complete_loan, open_loan, clock):
        clock.advance(hours=5)

        loan = await complete_loan.execute(
            CompleteLoanRequest(open_loan.id, 1, end_date=FIXED_NOW + timedelta(minutes=30))
        )

        assert loan.total_cost == Money.create(2000)

    async def test_end_date_must_follow_start(self, complete_loan, open_loan, store):
        with pytest.raises(BusinessRuleViolation) as exc_info:
            await complete_loan.execute(CompleteLoanRequest(open_loan.id, 1))

        assert exc_info.value.code == "INVALID_END_DATE"
        assert store.loans[open_loan.id].is_active()

    async def test_destination_must_have_space(self, complete_loan, open_loan, clock):
        clock.advance(minutes=10)

        with pytest.raises(BusinessRuleViolation) as exc_info:
            await complete_loan.execute(CompleteLoanRequest(open_loan.id, destination_station_id=2))

        assert exc_info.value.code == "STATION_FULL"

    async def test_destination_must_be_active(self, complete_loan, open_loan, clock):
        clock.advance(minutes=10)

        with pytest.raises(BusinessRuleViolation) as exc_info:
            await complete_loan.execute(CompleteLoanRequest(open_loan.id, destination_station_id=3))

        assert exc_info.value.code == "STATION_NOT_ACTIVE"

    async def test_unknown_loan(self, complete_loan):
        with pytest.raises(NotFoundError) as exc_info:
            await complete_loan.execute(CompleteLoanRequest(99, 1))

        assert exc_info.value.code == "LOAN_NOT_FOUND"

    async def test_completed_loan_cannot_complete_again(self, complete_loan, open_loan, clock):
        clock.advance(minutes=10)
        await complete_loan.execute(CompleteLoanRequest(open_loan.id, 1))

        with pytest.raises(BusinessRuleViolation) as exc_info:
            await complete_loan.execute(CompleteLoanRequest(open_loan.id, 1))

        assert exc_info.value.code == "LOAN_NOT_ACTIVE"


class TestCancelLoan:
    async def test_cancel_returns_vehicle_to_origin(self, cancel_loan, open_loan, store):
        loan = await cancel_loan.execute(open_loan.id)

        assert loan.status == LoanStatus.CANCELLED
        assert loan.total_cost.is_zero()
        assert store.transports[1].status == TransportStatus.AVAILABLE
        assert store.transports[1].current_station_id == 1
        assert store.stations[1].current_transports == 2

    async def test_cancel_twice_is_invalid(self, cancel_loan, open_loan):
        await cancel_loan.execute(open_loan.id)

        with pytest.raises(InvalidTransitionError):
            await cancel_loan.execute(open_loan.id)

    async def test_unknown_loan(self, cancel_loan):
        with pytest.raises(NotFoundError):
            await cancel_loan.execute(42)
