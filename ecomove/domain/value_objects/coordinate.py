"""Value Object Coordinate - punto geográfico (latitud, longitud)."""

import math
from dataclasses import dataclass

from ecomove.domain.constants import COORDINATE_TOLERANCE, EARTH_RADIUS_KM
from ecomove.domain.errors import ValidationError


@dataclass(frozen=True)
class Coordinate:
    """
    Value Object inmutable que representa una coordenada WGS84 en grados.

    Attributes:
        latitude: Latitud en [-90, 90].
        longitude: Longitud en [-180, 180].
    """

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        if not -90 <= self.latitude <= 90:
            raise ValidationError("latitude", "Latitud inválida: debe estar entre -90 y 90")
        if not -180 <= self.longitude <= 180:
            raise ValidationError("longitude", "Longitud inválida: debe estar entre -180 y 180")

    @property
    def lat_lng(self) -> tuple[float, float]:
        return (self.latitude, self.longitude)

    def distance_to(self, other: "Coordinate") -> float:
        """Distancia de círculo máximo (haversine) en kilómetros."""
        lat1, lat2 = math.radians(self.latitude), math.radians(other.latitude)
        d_lat = lat2 - lat1
        d_lng = math.radians(other.longitude - self.longitude)

        a = math.sin(d_lat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(d_lng / 2) ** 2
        c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
        return EARTH_RADIUS_KM * c

    def is_within_radius(self, center: "Coordinate", radius_km: float) -> bool:
        return self.distance_to(center) <= radius_km

    def approx_equals(self, other: "Coordinate", tolerance: float = COORDINATE_TOLERANCE) -> bool:
        return (
            abs(self.latitude - other.latitude) < tolerance
            and abs(self.longitude - other.longitude) < tolerance
        )

    def __str__(self) -> str:
        return f"{self.latitude},{self.longitude}"

    @classmethod
    def create(cls, latitude: float, longitude: float) -> "Coordinate":
        return cls(latitude=latitude, longitude=longitude)

    @classmethod
    def from_lat_lng(cls, lat_lng: tuple[float, float]) -> "Coordinate":
        return cls(latitude=lat_lng[0], longitude=lat_lng[1])
