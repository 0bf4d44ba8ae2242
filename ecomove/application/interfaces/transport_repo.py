from ecomove.application.interfaces.pagination import FindNearbyOptions, PaginatedResponse, QueryOptions
from ecomove.domain.entities.transport import Transport, TransportStatus


class TransportRepository:
    async def find_by_id(self, transport_id: int) -> Transport | None:
        raise NotImplementedError

    async def find_all(self, options: QueryOptions | None = None) -> PaginatedResponse[Transport]:
        raise NotImplementedError

    async def find_available(self, station_id: int | None = None) -> list[Transport]:
        raise NotImplementedError

    async def find_by_station(self, station_id: int) -> list[Transport]:
        raise NotImplementedError

    async def update_status(self, transport_id: int, status: TransportStatus) -> Transport:
        raise NotImplementedError

    async def find_nearby(self, options: FindNearbyOptions) -> list[Transport]:
        raise NotImplementedError
