"""Entidad Station - estación física con capacidad finita."""

from dataclasses import dataclass, replace
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from ecomove.domain.entities.serialization import format_datetime, parse_datetime
from ecomove.domain.entities.state_transition import StateTransition
from ecomove.domain.errors import InvalidTransitionError, ValidationError
from ecomove.domain.value_objects.coordinate import Coordinate


class StationStatus(str, Enum):
    """Estados posibles de una estación."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    MAINTENANCE = "maintenance"


@dataclass(frozen=True)
class CreateStationData:
    name: str
    address: str
    latitude: float
    longitude: float
    max_capacity: int


@dataclass(frozen=True)
class Station:
    """
    Estación de préstamo y devolución.

    Invariante: 0 <= current_transports <= max_capacity.
    """

    id: int
    name: str
    address: str
    coordinate: Coordinate
    max_capacity: int
    status: StationStatus = StationStatus.ACTIVE
    current_transports: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        if self.max_capacity <= 0:
            raise ValidationError("max_capacity", f"max_capacity debe ser positivo: {self.max_capacity}")
        if not 0 <= self.current_transports <= self.max_capacity:
            raise ValidationError(
                "current_transports",
                f"current_transports debe estar entre 0 y {self.max_capacity}: {self.current_transports}",
            )

    # === Propiedades calculadas ===

    @property
    def available_spaces(self) -> int:
        return self.max_capacity - self.current_transports

    @property
    def occupancy_percentage(self) -> float:
        return self.current_transports / self.max_capacity * 100

    @property
    def latitude(self) -> float:
        return self.coordinate.latitude

    @property
    def longitude(self) -> float:
        return self.coordinate.longitude

    # === Predicados de negocio ===

    def is_active(self) -> bool:
        return self.status == StationStatus.ACTIVE

    def is_full(self) -> bool:
        return self.current_transports >= self.max_capacity

    def is_empty(self) -> bool:
        return self.current_transports == 0

    def has_available_space(self) -> bool:
        return not self.is_full()

    def has_available_transports(self) -> bool:
        return self.current_transports > 0

    def can_accept_transport(self) -> bool:
        return self.is_active() and self.has_available_space()

    def can_provide_transport(self) -> bool:
        return self.is_active() and self.has_available_transports()

    # === Geografía ===

    def distance_to(self, other: "Station") -> float:
        return self.coordinate.distance_to(other.coordinate)

    def distance_to_coordinate(self, coordinate: Coordinate) -> float:
        return self.coordinate.distance_to(coordinate)

    def is_within_radius(self, center: Coordinate, radius_km: float) -> bool:
        return self.coordinate.is_within_radius(center, radius_km)

    # === Transiciones ===

    def activate(self, now: datetime | None = None) -> StateTransition[StationStatus]:
        if self.is_active():
            raise InvalidTransitionError(
                "station", self.status.value, StationStatus.ACTIVE.value, "La estación ya está activa"
            )
        return StateTransition(
            changes={"updated_at": now or datetime.now(timezone.utc)},
            status=StationStatus.ACTIVE,
        )

    def deactivate(self, now: datetime | None = None) -> StateTransition[StationStatus]:
        if not self.is_active():
            raise InvalidTransitionError(
                "station", self.status.value, StationStatus.INACTIVE.value, "La estación no está activa"
            )
        return StateTransition(
            changes={"updated_at": now or datetime.now(timezone.utc)},
            status=StationStatus.INACTIVE,
        )

    def apply(self, transition: StateTransition[StationStatus]) -> "Station":
        return transition.apply_to(self)

    def with_transport_count(self, count: int) -> "Station":
        """Copia con otro conteo de vehículos; valida la capacidad."""
        return replace(self, current_transports=count)

    # === Factories ===

    @classmethod
    def open(cls, station_id: int, data: CreateStationData, now: datetime | None = None) -> "Station":
        now = now or datetime.now(timezone.utc)
        return cls(
            id=station_id,
            name=data.name.strip(),
            address=data.address.strip(),
            coordinate=Coordinate.create(data.latitude, data.longitude),
            max_capacity=data.max_capacity,
            status=StationStatus.ACTIVE,
            current_transports=0,
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Station":
        return cls(
            id=data["id"],
            name=data["name"],
            address=data["address"],
            coordinate=Coordinate.create(data["latitude"], data["longitude"]),
            max_capacity=data["maxCapacity"],
            status=StationStatus(data.get("status", StationStatus.ACTIVE.value)),
            current_transports=data.get("currentTransports") or 0,
            created_at=parse_datetime(data.get("createdAt")),
            updated_at=parse_datetime(data.get("updatedAt")),
        )

    def to_json(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "address": self.address,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "maxCapacity": self.max_capacity,
            "currentTransports": self.current_transports,
            "status": self.status.value,
            "availableSpaces": self.available_spaces,
            "occupancyPercentage": self.occupancy_percentage,
            "createdAt": format_datetime(self.created_at),
            "updatedAt": format_datetime(self.updated_at),
        }
