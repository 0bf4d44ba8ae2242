from ecomove.application.interfaces.pagination import FindNearbyOptions, PaginatedResponse, QueryOptions
from ecomove.application.interfaces.station_repo import StationRepository
from ecomove.domain.entities.station import Station
from ecomove.domain.errors import RepositoryError
from ecomove.infrastructure.http import endpoints
from ecomove.infrastructure.http.api_client import ApiClient
from ecomove.infrastructure.repositories.payload import is_not_found, parse_entity, parse_list, parse_page


class HttpStationRepository(StationRepository):
    def __init__(self, api_client: ApiClient) -> None:
        self._api = api_client

    async def find_by_id(self, station_id: int) -> Station | None:
        try:
            body = await self._api.get(endpoints.station_by_id(station_id))
        except RepositoryError as exc:
            if is_not_found(exc):
                return None
            raise
        return parse_entity(body, Station.from_api)

    async def find_all(self, options: QueryOptions | None = None) -> PaginatedResponse[Station]:
        body = await self._api.get(endpoints.STATIONS, (options or QueryOptions()).to_params())
        return parse_page(body, Station.from_api)

    async def find_nearby(self, options: FindNearbyOptions) -> list[Station]:
        params = {
            "latitude": str(options.center.latitude),
            "longitude": str(options.center.longitude),
            "radius": str(options.radius_km),
        }
        if options.limit:
            params["limit"] = str(options.limit)
        body = await self._api.get(endpoints.STATIONS_NEARBY, params)
        return parse_list(body, Station.from_api)

    async def find_with_available_transports(self) -> list[Station]:
        body = await self._api.get(endpoints.STATIONS_WITH_TRANSPORTS)
        return parse_list(body, Station.from_api)

    async def find_with_available_space(self) -> list[Station]:
        body = await self._api.get(endpoints.STATIONS_WITH_SPACE)
        return parse_list(body, Station.from_api)

    async def update_transport_count(self, station_id: int, count: int) -> Station:
        body = await self._api.patch(endpoints.station_by_id(station_id), {"currentTransports": count})
        return parse_entity(body, Station.from_api)
