from ecomove.application.interfaces.pagination import FindNearbyOptions, PaginatedResponse, QueryOptions
from ecomove.application.interfaces.transport_repo import TransportRepository
from ecomove.domain.entities.transport import Transport, TransportStatus
from ecomove.domain.errors import RepositoryError
from ecomove.infrastructure.http import endpoints
from ecomove.infrastructure.http.api_client import ApiClient
from ecomove.infrastructure.repositories.payload import is_not_found, parse_entity, parse_list, parse_page


class HttpTransportRepository(TransportRepository):
    def __init__(self, api_client: ApiClient) -> None:
        self._api = api_client

    async def find_by_id(self, transport_id: int) -> Transport | None:
        try:
            body = await self._api.get(endpoints.transport_by_id(transport_id))
        except RepositoryError as exc:
            if is_not_found(exc):
                return None
            raise
        return parse_entity(body, Transport.from_api)

    async def find_all(self, options: QueryOptions | None = None) -> PaginatedResponse[Transport]:
        body = await self._api.get(endpoints.TRANSPORTS, (options or QueryOptions()).to_params())
        return parse_page(body, Transport.from_api)

    async def find_available(self, station_id: int | None = None) -> list[Transport]:
        params = {"stationId": str(station_id)} if station_id is not None else None
        body = await self._api.get(endpoints.TRANSPORTS_AVAILABLE, params)
        return parse_list(body, Transport.from_api)

    async def find_by_station(self, station_id: int) -> list[Transport]:
        body = await self._api.get(endpoints.station_transports(station_id))
        return parse_list(body, Transport.from_api)

    async def update_status(self, transport_id: int, status: TransportStatus) -> Transport:
        body = await self._api.patch(endpoints.transport_by_id(transport_id), {"status": status.value})
        return parse_entity(body, Transport.from_api)

    async def find_nearby(self, options: FindNearbyOptions) -> list[Transport]:
        params = {
            "latitude": str(options.center.latitude),
            "longitude": str(options.center.longitude),
            "radius": str(options.radius_km),
        }
        if options.limit:
            params["limit"] = str(options.limit)
        body = await self._api.get(endpoints.TRANSPORTS_NEARBY, params)
        return parse_list(body, Transport.from_api)
