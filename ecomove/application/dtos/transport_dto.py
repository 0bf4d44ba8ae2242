"""DTOs para la búsqueda de vehículos disponibles."""

from dataclasses import dataclass, field
from typing import Any

from ecomove.domain.entities.station import Station
from ecomove.domain.entities.transport import Transport, TransportType
from ecomove.domain.value_objects.coordinate import Coordinate


@dataclass
class FindAvailableTransportsRequest:
    """
    Criterios de búsqueda.

    station_id y user_location son intenciones excluyentes; si llegan ambas,
    gana la estación.
    """

    user_location: Coordinate | None = None
    station_id: int | None = None
    transport_type: TransportType | str | None = None
    radius_km: float | None = None
    max_results: int | None = None


@dataclass
class TransportWithDistance:
    """Vehículo enriquecido con su estación y la distancia al usuario, si se conocen."""

    transport: Transport
    station: Station | None = None
    distance_km: float | None = None

    def to_json(self) -> dict[str, Any]:
        return {
            **self.transport.to_json(),
            "station": self.station.to_json() if self.station else None,
            "distanceKm": self.distance_km,
        }


@dataclass
class FindAvailableTransportsResponse:
    transports: list[TransportWithDistance] = field(default_factory=list)
    total_found: int = 0
    search_center: Coordinate | None = None
    search_radius: float | None = None

    def to_json(self) -> dict[str, Any]:
        return {
            "transports": [item.to_json() for item in self.transports],
            "totalFound": self.total_found,
            "searchCenter": (
                {"latitude": self.search_center.latitude, "longitude": self.search_center.longitude}
                if self.search_center
                else None
            ),
            "searchRadius": self.search_radius,
        }
