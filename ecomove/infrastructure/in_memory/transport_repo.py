"""Implementación in-memory del repositorio de vehículos."""

from ecomove.application.interfaces.clock import Clock, SystemClock
from ecomove.application.interfaces.pagination import FindNearbyOptions, PaginatedResponse, QueryOptions
from ecomove.application.interfaces.transport_repo import TransportRepository
from ecomove.domain.entities.transport import Transport, TransportStatus
from ecomove.domain.errors import InvalidTransitionError, RepositoryError
from ecomove.infrastructure.in_memory.store import InMemoryStore


class InMemoryTransportRepository(TransportRepository):
    def __init__(self, store: InMemoryStore, clock: Clock | None = None) -> None:
        self._store = store
        self._clock = clock or SystemClock()

    async def find_by_id(self, transport_id: int) -> Transport | None:
        return self._store.transports.get(transport_id)

    async def find_all(self, options: QueryOptions | None = None) -> PaginatedResponse[Transport]:
        return PaginatedResponse.paginate(self._sorted(), options)

    async def find_available(self, station_id: int | None = None) -> list[Transport]:
        return [
            t
            for t in self._sorted()
            if t.is_available() and (station_id is None or t.current_station_id == station_id)
        ]

    async def find_by_station(self, station_id: int) -> list[Transport]:
        return [t for t in self._sorted() if t.current_station_id == station_id]

    async def update_status(self, transport_id: int, status: TransportStatus) -> Transport:
        transport = self._store.transports.get(transport_id)
        if transport is None:
            raise RepositoryError("TRANSPORT_NOT_FOUND", status_code=404)
        try:
            updated = transport.update_status(status, now=self._clock.now())
        except InvalidTransitionError as exc:
            raise RepositoryError("INVALID_STATUS_TRANSITION", exc.message, status_code=409) from exc
        return self._store.add_transport(updated)

    async def find_nearby(self, options: FindNearbyOptions) -> list[Transport]:
        """Vehículos ubicados en estaciones dentro del radio, del más cercano al más lejano."""
        distances: dict[int, float] = {}
        for station in self._store.stations.values():
            if station.is_within_radius(options.center, options.radius_km):
                distances[station.id] = station.distance_to_coordinate(options.center)

        nearby = [t for t in self._sorted() if t.current_station_id in distances]
        nearby.sort(key=lambda t: distances[t.current_station_id])
        return nearby[: options.limit] if options.limit else nearby

    def _sorted(self) -> list[Transport]:
        return sorted(self._store.transports.values(), key=lambda t: t.id)
