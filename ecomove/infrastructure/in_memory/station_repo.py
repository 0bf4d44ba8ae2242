"""Implementación in-memory del repositorio de estaciones."""

from ecomove.application.interfaces.pagination import FindNearbyOptions, PaginatedResponse, QueryOptions
from ecomove.application.interfaces.station_repo import StationRepository
from ecomove.domain.entities.station import Station
from ecomove.domain.errors import RepositoryError, ValidationError
from ecomove.infrastructure.in_memory.store import InMemoryStore


class InMemoryStationRepository(StationRepository):
    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(self, station_id: int) -> Station | None:
        return self._store.stations.get(station_id)

    async def find_all(self, options: QueryOptions | None = None) -> PaginatedResponse[Station]:
        stations = sorted(self._store.stations.values(), key=lambda s: s.id)
        return PaginatedResponse.paginate(stations, options)

    async def find_nearby(self, options: FindNearbyOptions) -> list[Station]:
        nearby = [
            s for s in self._store.stations.values() if s.is_within_radius(options.center, options.radius_km)
        ]
        nearby.sort(key=lambda s: s.distance_to_coordinate(options.center))
        return nearby[: options.limit] if options.limit else nearby

    async def find_with_available_transports(self) -> list[Station]:
        return [s for s in self._sorted() if s.can_provide_transport()]

    async def find_with_available_space(self) -> list[Station]:
        return [s for s in self._sorted() if s.can_accept_transport()]

    async def update_transport_count(self, station_id: int, count: int) -> Station:
        station = self._store.stations.get(station_id)
        if station is None:
            raise RepositoryError("STATION_NOT_FOUND", status_code=404)
        try:
            updated = station.with_transport_count(count)
        except ValidationError as exc:
            raise RepositoryError("STATION_CAPACITY_EXCEEDED", exc.message, status_code=409) from exc
        return self._store.add_station(updated)

    def _sorted(self) -> list[Station]:
        return sorted(self._store.stations.values(), key=lambda s: s.id)
