import logging

from ecomove.application.dtos.loan_dto import CreateLoanRequest
from ecomove.application.error_mapping import CREATE_LOAN_ERRORS, CREATE_LOAN_FALLBACK, translate
from ecomove.application.interfaces.loan_repo import LoanRepository
from ecomove.application.interfaces.station_repo import StationRepository
from ecomove.application.interfaces.transport_repo import TransportRepository
from ecomove.application.interfaces.user_repo import UserRepository
from ecomove.domain.constants import MIN_RENTABLE_BATTERY
from ecomove.domain.entities.loan import CreateLoanData, Loan, PaymentMethod
from ecomove.domain.entities.station import Station
from ecomove.domain.entities.transport import Transport
from ecomove.domain.entities.user import User
from ecomove.domain.errors import (
    BusinessRuleViolation,
    ConflictError,
    NotFoundError,
    RepositoryError,
    ValidationError,
)


class CreateLoanUseCase:
    """
    Crea un préstamo después de validar usuario, vehículo y estación de origen.

    Todas las reglas se evalúan antes de llamar a `LoanRepository.create`; la
    primera que falla se reporta y no hay efectos secundarios.
    """

    def __init__(
        self,
        loan_repo: LoanRepository,
        transport_repo: TransportRepository,
        station_repo: StationRepository,
        user_repo: UserRepository,
    ) -> None:
        self._loan_repo = loan_repo
        self._transport_repo = transport_repo
        self._station_repo = station_repo
        self._user_repo = user_repo
        self._logger = logging.getLogger(__name__)

    async def execute(self, request: CreateLoanRequest) -> Loan:
        payment_method = self.validate_request(request)

        try:
            user, transport, origin_station = await self._load_context(request)
            self.validate_business_rules(user, transport, origin_station)

            active_loan = await self._loan_repo.find_active_by_user(user.id)
            if active_loan is not None:
                raise ConflictError(
                    "Ya tienes un préstamo activo. Finalízalo antes de iniciar uno nuevo.",
                    code="USER_HAS_ACTIVE_LOAN",
                )

            loan = await self._loan_repo.create(
                CreateLoanData(
                    user_id=user.id,
                    transport_id=transport.id,
                    origin_station_id=origin_station.id,
                    payment_method=payment_method,
                )
            )
        except RepositoryError as exc:
            self._logger.warning(
                "Loan creation rejected by repository",
                extra={"user_id": request.user_id, "transport_id": request.transport_id, "error_code": exc.code},
            )
            raise translate(exc, CREATE_LOAN_ERRORS, CREATE_LOAN_FALLBACK) from exc

        self._logger.info(
            "Loan created",
            extra={
                "loan_id": loan.id,
                "user_id": loan.user_id,
                "transport_id": loan.transport_id,
                "origin_station_id": loan.origin_station_id,
            },
        )
        return loan

    @staticmethod
    def validate_request(request: CreateLoanRequest) -> PaymentMethod:
        """Valida la forma de la solicitud y retorna el método de pago tipado."""
        if not request.user_id:
            raise ValidationError("user_id", "El ID de usuario es obligatorio")
        if not request.transport_id:
            raise ValidationError("transport_id", "El ID del vehículo es obligatorio")
        if not request.origin_station_id:
            raise ValidationError("origin_station_id", "El ID de la estación de origen es obligatorio")
        if not request.payment_method:
            raise ValidationError("payment_method", "El método de pago es obligatorio")
        try:
            return PaymentMethod(request.payment_method)
        except ValueError:
            raise ValidationError(
                "payment_method", "Método de pago inválido", code="PAYMENT_METHOD_INVALID"
            )

    async def _load_context(self, request: CreateLoanRequest) -> tuple[User, Transport, Station]:
        transport = await self._transport_repo.find_by_id(request.transport_id)
        if transport is None:
            raise NotFoundError("transport", request.transport_id, "Vehículo no encontrado")

        origin_station = await self._station_repo.find_by_id(request.origin_station_id)
        if origin_station is None:
            raise NotFoundError("station", request.origin_station_id, "Estación de origen no encontrada")

        user = await self._user_repo.find_by_id(request.user_id)
        if user is None:
            raise NotFoundError("user", request.user_id, "Usuario no encontrado")

        return user, transport, origin_station

    def validate_business_rules(self, user: User, transport: Transport, origin_station: Station) -> None:
        self.check_user(user)
        self.check_transport(transport)
        self.check_station(origin_station)
        self.check_location(transport, origin_station)
        self.check_battery(transport)

    @staticmethod
    def check_user(user: User) -> None:
        if not user.can_rent_transport():
            raise BusinessRuleViolation(
                "Tu cuenta no está habilitada para préstamos", code="USER_NOT_ELIGIBLE"
            )

    @staticmethod
    def check_transport(transport: Transport) -> None:
        if not transport.is_available():
            raise BusinessRuleViolation(
                "El vehículo no está disponible para préstamo", code="TRANSPORT_NOT_AVAILABLE"
            )
        if not transport.can_be_rented():
            raise BusinessRuleViolation(
                "El vehículo no puede prestarse en este momento", code="TRANSPORT_NOT_AVAILABLE"
            )

    @staticmethod
    def check_station(origin_station: Station) -> None:
        if not origin_station.is_active():
            raise BusinessRuleViolation(
                "La estación de origen no está activa", code="STATION_NOT_ACTIVE"
            )
        if not origin_station.can_provide_transport():
            raise BusinessRuleViolation(
                "La estación de origen no puede entregar vehículos en este momento",
                code="STATION_EMPTY",
            )

    @staticmethod
    def check_location(transport: Transport, origin_station: Station) -> None:
        if transport.current_station_id != origin_station.id:
            raise BusinessRuleViolation(
                "El vehículo no se encuentra en la estación de origen indicada",
                code="TRANSPORT_NOT_AT_STATION",
            )

    @staticmethod
    def check_battery(transport: Transport) -> None:
        if transport.battery_percentage <= MIN_RENTABLE_BATTERY:
            raise BusinessRuleViolation(
                "La batería del vehículo es demasiado baja para prestarlo",
                code="INSUFFICIENT_BATTERY",
            )
