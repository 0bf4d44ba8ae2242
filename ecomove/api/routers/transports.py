from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ecomove.api.dependencies import get_use_cases
from ecomove.application.dtos.transport_dto import FindAvailableTransportsRequest
from ecomove.domain.value_objects.coordinate import Coordinate

router = APIRouter()


@router.get("/transports/available")
async def find_available_transports(
    use_cases: Annotated[dict, Depends(get_use_cases)],
    latitude: float | None = Query(default=None),
    longitude: float | None = Query(default=None),
    station_id: int | None = Query(default=None, alias="stationId"),
    transport_type: str | None = Query(default=None, alias="type"),
    radius_km: float | None = Query(default=None, alias="radiusKm"),
    max_results: int | None = Query(default=None, alias="maxResults"),
) -> dict:
    """
    Busca vehículos disponibles.

    - `stationId`: solo los vehículos parqueados en esa estación.
    - `latitude` + `longitude`: por cercanía, ordenados por distancia.
    - Sin ninguno: toda la red.
    """
    if (latitude is None) != (longitude is None):
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="latitude y longitude deben enviarse juntas",
        )
    user_location = Coordinate.create(latitude, longitude) if latitude is not None else None

    response = await use_cases["find_available_transports"].execute(
        FindAvailableTransportsRequest(
            user_location=user_location,
            station_id=station_id,
            transport_type=transport_type,
            radius_km=radius_km,
            max_results=max_results,
        )
    )
    return response.to_json()
