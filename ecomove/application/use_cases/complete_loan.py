import logging

from ecomove.application.dtos.loan_dto import CompleteLoanRequest
from ecomove.application.error_mapping import COMPLETE_LOAN_ERRORS, COMPLETE_LOAN_FALLBACK, translate
from ecomove.application.interfaces.clock import Clock
from ecomove.application.interfaces.loan_repo import LoanRepository
from ecomove.application.interfaces.station_repo import StationRepository
from ecomove.application.interfaces.transport_repo import TransportRepository
from ecomove.domain.entities.loan import CompleteLoanData, Loan
from ecomove.domain.entities.serialization import ensure_utc
from ecomove.domain.errors import BusinessRuleViolation, NotFoundError, RepositoryError


class CompleteLoanUseCase:
    """Devuelve el vehículo en una estación de destino y cierra el préstamo con su costo."""

    def __init__(
        self,
        loan_repo: LoanRepository,
        transport_repo: TransportRepository,
        station_repo: StationRepository,
        clock: Clock,
    ) -> None:
        self._loan_repo = loan_repo
        self._transport_repo = transport_repo
        self._station_repo = station_repo
        self._clock = clock
        self._logger = logging.getLogger(__name__)

    async def execute(self, request: CompleteLoanRequest) -> Loan:
        now = self._clock.now()
        end_date = ensure_utc(request.end_date) if request.end_date else now

        try:
            loan = await self._loan_repo.find_by_id(request.loan_id)
            if loan is None:
                raise NotFoundError("loan", request.loan_id, "El préstamo no existe")
            if not loan.is_active():
                raise BusinessRuleViolation("El préstamo ya no está activo", code="LOAN_NOT_ACTIVE")

            destination = await self._station_repo.find_by_id(request.destination_station_id)
            if destination is None:
                raise NotFoundError(
                    "station", request.destination_station_id, "Estación de destino no encontrada"
                )
            if not destination.is_active():
                raise BusinessRuleViolation(
                    "La estación de destino no está activa en este momento", code="STATION_NOT_ACTIVE"
                )
            if not destination.can_accept_transport():
                raise BusinessRuleViolation(
                    "La estación de destino no tiene espacios disponibles", code="STATION_FULL"
                )

            transport = await self._transport_repo.find_by_id(loan.transport_id)
            if transport is None:
                raise NotFoundError("transport", loan.transport_id, "Vehículo no encontrado")

            # Valida fechas y calcula el costo antes de tocar el repositorio.
            transition = loan.complete(destination.id, end_date, transport.hourly_rate, now=now)

            completed = await self._loan_repo.complete(
                loan.id,
                CompleteLoanData(destination_station_id=destination.id, end_date=end_date),
            )
        except RepositoryError as exc:
            self._logger.warning(
                "Loan completion rejected by repository",
                extra={"loan_id": request.loan_id, "error_code": exc.code},
            )
            raise translate(exc, COMPLETE_LOAN_ERRORS, COMPLETE_LOAN_FALLBACK) from exc

        self._logger.info(
            "Loan completed",
            extra={
                "loan_id": completed.id,
                "destination_station_id": destination.id,
                "duration_minutes": completed.duration_minutes(end_date),
                "total_cost": str(transition.changes["total_cost"]),
            },
        )
        return completed
