from ecomove.application.interfaces.pagination import FindNearbyOptions, PaginatedResponse, QueryOptions
from ecomove.domain.entities.station import Station


class StationRepository:
    async def find_by_id(self, station_id: int) -> Station | None:
        raise NotImplementedError

    async def find_all(self, options: QueryOptions | None = None) -> PaginatedResponse[Station]:
        raise NotImplementedError

    async def find_nearby(self, options: FindNearbyOptions) -> list[Station]:
        raise NotImplementedError

    async def find_with_available_transports(self) -> list[Station]:
        raise NotImplementedError

    async def find_with_available_space(self) -> list[Station]:
        raise NotImplementedError

    async def update_transport_count(self, station_id: int, count: int) -> Station:
        raise NotImplementedError
