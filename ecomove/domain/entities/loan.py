"""Entidad Loan - préstamo de un vehículo entre dos estaciones."""

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from ecomove.domain.constants import DEFAULT_CURRENCY
from ecomove.domain.entities.serialization import ensure_utc, format_datetime, parse_datetime
from ecomove.domain.entities.state_transition import StateTransition
from ecomove.domain.errors import BusinessRuleViolation, InvalidTransitionError
from ecomove.domain.pricing import rental_cost
from ecomove.domain.value_objects.duration import Duration
from ecomove.domain.value_objects.money import Money


class LoanStatus(str, Enum):
    """
    Estados de un préstamo.

    OVERDUE lo reporta un proceso externo; ninguna transición de la
    entidad lleva a él.
    """

    ACTIVE = "active"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    OVERDUE = "overdue"


class PaymentMethod(str, Enum):
    """Medios de pago aceptados."""

    CREDIT_CARD = "credit_card"
    CASH = "cash"
    DIGITAL_WALLET = "digital_wallet"


@dataclass(frozen=True)
class CreateLoanData:
    user_id: int
    transport_id: int
    origin_station_id: int
    payment_method: PaymentMethod

    def to_json(self) -> dict[str, Any]:
        return {
            "userId": self.user_id,
            "transportId": self.transport_id,
            "originStationId": self.origin_station_id,
            "paymentMethod": self.payment_method.value,
        }


@dataclass(frozen=True)
class CompleteLoanData:
    destination_station_id: int
    end_date: datetime

    def to_json(self) -> dict[str, Any]:
        return {
            "destinationStationId": self.destination_station_id,
            "endDate": format_datetime(self.end_date),
        }


@dataclass(frozen=True)
class Loan:
    """
    Sesión de préstamo.

    Referencia usuario, vehículo y estaciones solo por ID. Las operaciones de
    ciclo de vida (complete/cancel/extend) no mutan la instancia: devuelven un
    StateTransition con los campos que cambian.
    """

    id: int
    user_id: int
    transport_id: int
    origin_station_id: int
    start_date: datetime
    payment_method: PaymentMethod
    total_cost: Money = Money.zero()
    status: LoanStatus = LoanStatus.ACTIVE
    destination_station_id: int | None = None
    end_date: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    # === Predicados ===

    def is_active(self) -> bool:
        return self.status == LoanStatus.ACTIVE

    def is_completed(self) -> bool:
        return self.status == LoanStatus.COMPLETED

    def is_cancelled(self) -> bool:
        return self.status == LoanStatus.CANCELLED

    def is_overdue(self) -> bool:
        return self.status == LoanStatus.OVERDUE

    # === Duración y costo ===

    def duration(self, end: datetime | None = None, now: datetime | None = None) -> Duration:
        """
        Duración del préstamo en minutos completos.

        Usa `end`, si no la fecha de fin registrada, si no el momento actual.
        """
        end = ensure_utc(end or self.end_date or now or datetime.now(timezone.utc))
        return Duration.between(self.start_date, end)

    def duration_minutes(self, end: datetime | None = None, now: datetime | None = None) -> int:
        return int(self.duration(end, now).minutes)

    def estimated_cost(self, duration_minutes: int | float, hourly_rate: Money) -> Money:
        return rental_cost(duration_minutes, hourly_rate)

    def get_current_cost(self, hourly_rate: Money, now: datetime | None = None) -> Money:
        """Costo en vivo si está activo; costo congelado si ya terminó."""
        if not self.is_active():
            return self.total_cost
        return rental_cost(self.duration_minutes(now=now), hourly_rate)

    # === Transiciones ===

    def _ensure_active(self, target: LoanStatus | None, action: str) -> None:
        if self.is_active():
            return
        if target is None:
            raise BusinessRuleViolation(
                f"Solo se pueden {action} préstamos activos", code="LOAN_NOT_ACTIVE"
            )
        raise InvalidTransitionError(
            "loan",
            self.status.value,
            target.value,
            f"Solo se pueden {action} préstamos activos",
        )

    def complete(
        self,
        destination_station_id: int,
        end_date: datetime,
        hourly_rate: Money,
        now: datetime | None = None,
    ) -> StateTransition[LoanStatus]:
        """
        Finaliza el préstamo y calcula su costo por horas iniciadas.

        Raises:
            InvalidTransitionError: Si el préstamo no está activo.
            BusinessRuleViolation: Si end_date no es posterior a start_date.
        """
        self._ensure_active(LoanStatus.COMPLETED, "finalizar")
        end_date = ensure_utc(end_date)
        if end_date <= self.start_date:
            raise BusinessRuleViolation(
                "La fecha de fin debe ser posterior a la fecha de inicio", code="INVALID_END_DATE"
            )

        cost = rental_cost(self.duration_minutes(end_date), hourly_rate)
        return StateTransition(
            changes={
                "destination_station_id": destination_station_id,
                "end_date": end_date,
                "total_cost": cost,
                "updated_at": now or datetime.now(timezone.utc),
            },
            status=LoanStatus.COMPLETED,
        )

    def cancel(self, now: datetime | None = None) -> StateTransition[LoanStatus]:
        self._ensure_active(LoanStatus.CANCELLED, "cancelar")
        return StateTransition(
            changes={"updated_at": now or datetime.now(timezone.utc)},
            status=LoanStatus.CANCELLED,
        )

    def extend(self, new_end_date: datetime, now: datetime | None = None) -> StateTransition[LoanStatus]:
        """Extiende la fecha de fin; requiere una fecha de fin previa anterior a la nueva."""
        self._ensure_active(None, "extender")
        new_end_date = ensure_utc(new_end_date)
        if self.end_date is None or new_end_date <= self.end_date:
            raise BusinessRuleViolation(
                "La nueva fecha de fin debe ser posterior a la actual", code="INVALID_EXTENSION"
            )
        return StateTransition(
            changes={"end_date": new_end_date, "updated_at": now or datetime.now(timezone.utc)}
        )

    def apply(self, transition: StateTransition[LoanStatus]) -> "Loan":
        return transition.apply_to(self)

    # === Factories ===

    @classmethod
    def open(
        cls,
        loan_id: int,
        data: CreateLoanData,
        now: datetime | None = None,
        currency: str = DEFAULT_CURRENCY,
    ) -> "Loan":
        """Nuevo préstamo: ACTIVE, costo cero, sin destino ni fecha de fin."""
        now = now or datetime.now(timezone.utc)
        return cls(
            id=loan_id,
            user_id=data.user_id,
            transport_id=data.transport_id,
            origin_station_id=data.origin_station_id,
            start_date=now,
            payment_method=data.payment_method,
            total_cost=Money.zero(currency),
            status=LoanStatus.ACTIVE,
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Loan":
        return cls(
            id=data["id"],
            user_id=data["userId"],
            transport_id=data["transportId"],
            origin_station_id=data["originStationId"],
            destination_station_id=data.get("destinationStationId"),
            start_date=parse_datetime(data["startDate"]),
            end_date=parse_datetime(data.get("endDate")),
            total_cost=Money.create(data.get("totalCost") or 0, data.get("currency", DEFAULT_CURRENCY)),
            status=LoanStatus(data["status"]),
            payment_method=PaymentMethod(data["paymentMethod"]),
            created_at=parse_datetime(data.get("createdAt")),
            updated_at=parse_datetime(data.get("updatedAt")),
        )

    def to_json(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "userId": self.user_id,
            "transportId": self.transport_id,
            "originStationId": self.origin_station_id,
            "destinationStationId": self.destination_station_id,
            "startDate": format_datetime(self.start_date),
            "endDate": format_datetime(self.end_date),
            "totalCost": float(self.total_cost.amount),
            "currency": self.total_cost.currency,
            "status": self.status.value,
            "paymentMethod": self.payment_method.value,
            "durationMinutes": self.duration_minutes() if self.end_date else None,
            "createdAt": format_datetime(self.created_at),
            "updatedAt": format_datetime(self.updated_at),
        }
