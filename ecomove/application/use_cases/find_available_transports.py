import logging
import math
from enum import Enum

from ecomove.application.dtos.transport_dto import (
    FindAvailableTransportsRequest,
    FindAvailableTransportsResponse,
    TransportWithDistance,
)
from ecomove.application.error_mapping import FIND_TRANSPORTS_ERRORS, FIND_TRANSPORTS_FALLBACK, translate
from ecomove.application.interfaces.pagination import FindNearbyOptions
from ecomove.application.interfaces.station_repo import StationRepository
from ecomove.application.interfaces.transport_repo import TransportRepository
from ecomove.domain.constants import DEFAULT_SEARCH_RADIUS_KM
from ecomove.domain.entities.transport import Transport, TransportType
from ecomove.domain.errors import DomainError, RepositoryError, ValidationError
from ecomove.domain.value_objects.coordinate import Coordinate


class MissingDistancePolicy(str, Enum):
    """
    Posición, al ordenar por distancia, de los vehículos cuya estación no se
    pudo cargar.

    FIRST los trata como distancia 0 (comportamiento histórico); LAST los
    deja al final.
    """

    FIRST = "first"
    LAST = "last"


class FindAvailableTransportsUseCase:
    """
    Busca vehículos disponibles por estación, por cercanía o en toda la red.

    Un fallo al cargar la estación de un vehículo no aborta la búsqueda: ese
    vehículo se devuelve sin estación ni distancia.
    """

    def __init__(
        self,
        transport_repo: TransportRepository,
        station_repo: StationRepository,
        default_radius_km: float = DEFAULT_SEARCH_RADIUS_KM,
        missing_distance_policy: MissingDistancePolicy = MissingDistancePolicy.FIRST,
    ) -> None:
        self._transport_repo = transport_repo
        self._station_repo = station_repo
        self._default_radius_km = default_radius_km
        self._missing_distance_policy = missing_distance_policy
        self._logger = logging.getLogger(__name__)

    async def execute(self, request: FindAvailableTransportsRequest) -> FindAvailableTransportsResponse:
        transport_type = self.validate_request(request)
        search_radius = request.radius_km

        try:
            if request.station_id is not None:
                transports = await self._find_at_station(request.station_id)
            elif request.user_location is not None:
                search_radius = request.radius_km or self._default_radius_km
                transports = await self._find_near(request.user_location, search_radius, request.max_results)
            else:
                transports = await self._transport_repo.find_available()
        except RepositoryError as exc:
            raise translate(exc, FIND_TRANSPORTS_ERRORS, FIND_TRANSPORTS_FALLBACK) from exc

        if transport_type is not None:
            transports = [t for t in transports if t.type == transport_type]

        results = [await self._enrich(t, request.user_location) for t in transports]

        if request.user_location is not None:
            results.sort(key=self._sort_key)

        total_found = len(results)
        if request.max_results:
            results = results[: request.max_results]

        self._logger.info(
            "Transport search finished",
            extra={
                "station_id": request.station_id,
                "has_location": request.user_location is not None,
                "transport_type": transport_type.value if transport_type else None,
                "total_found": total_found,
                "returned": len(results),
            },
        )
        return FindAvailableTransportsResponse(
            transports=results,
            total_found=total_found,
            search_center=request.user_location,
            search_radius=search_radius,
        )

    @staticmethod
    def validate_request(request: FindAvailableTransportsRequest) -> TransportType | None:
        if request.radius_km is not None and request.radius_km <= 0:
            raise ValidationError("radius_km", "El radio de búsqueda debe ser mayor que 0")
        if request.max_results is not None and request.max_results <= 0:
            raise ValidationError("max_results", "El número máximo de resultados debe ser mayor que 0")
        if request.transport_type is None:
            return None
        try:
            return TransportType(request.transport_type)
        except ValueError:
            raise ValidationError("transport_type", "Tipo de vehículo inválido")

    async def _find_at_station(self, station_id: int) -> list[Transport]:
        transports = await self._transport_repo.find_by_station(station_id)
        return [t for t in transports if t.current_station_id == station_id and t.is_available()]

    async def _find_near(self, center: Coordinate, radius_km: float, limit: int | None) -> list[Transport]:
        transports = await self._transport_repo.find_nearby(
            FindNearbyOptions(center=center, radius_km=radius_km, limit=limit)
        )
        return [t for t in transports if t.is_available()]

    async def _enrich(self, transport: Transport, user_location: Coordinate | None) -> TransportWithDistance:
        item = TransportWithDistance(transport=transport)
        if transport.current_station_id is None:
            return item

        try:
            station = await self._station_repo.find_by_id(transport.current_station_id)
        except DomainError as exc:
            self._logger.warning(
                "Station lookup failed, returning transport without station info",
                extra={
                    "transport_id": transport.id,
                    "station_id": transport.current_station_id,
                    "error_code": exc.code,
                },
            )
            return item

        if station is not None:
            item.station = station
            if user_location is not None:
                item.distance_km = station.distance_to_coordinate(user_location)
        return item

    def _sort_key(self, item: TransportWithDistance) -> float:
        if item.distance_km is not None:
            return item.distance_km
        return 0.0 if self._missing_distance_policy == MissingDistancePolicy.FIRST else math.inf
