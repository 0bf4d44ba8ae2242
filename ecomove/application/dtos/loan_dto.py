"""DTOs para préstamos."""

from dataclasses import dataclass
from datetime import datetime

from ecomove.domain.entities.loan import PaymentMethod


@dataclass
class CreateLoanRequest:
    """Solicitud de préstamo; payment_method puede llegar como texto sin validar."""

    user_id: int | None
    transport_id: int | None
    origin_station_id: int | None
    payment_method: PaymentMethod | str | None


@dataclass
class CompleteLoanRequest:
    loan_id: int
    destination_station_id: int
    end_date: datetime | None = None
