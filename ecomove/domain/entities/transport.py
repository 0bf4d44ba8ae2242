"""Entidad Transport - vehículo rentable (bicicleta o scooter eléctrico)."""

from dataclasses import dataclass, replace
from datetime import datetime, timezone
from enum import Enum
from typing import Any, ClassVar, Mapping

from ecomove.domain.constants import DEFAULT_CURRENCY
from ecomove.domain.entities.serialization import format_datetime, parse_datetime
from ecomove.domain.errors import InvalidTransitionError, ValidationError
from ecomove.domain.pricing import rental_cost
from ecomove.domain.value_objects.battery_level import BatteryLevel, BatteryStatus
from ecomove.domain.value_objects.money import Money


class TransportType(str, Enum):
    """Tipos de vehículo."""

    BICYCLE = "bicycle"
    ELECTRIC_SCOOTER = "electric_scooter"


class TransportStatus(str, Enum):
    """Estados operativos de un vehículo."""

    AVAILABLE = "available"
    IN_USE = "in_use"
    MAINTENANCE = "maintenance"


StatusTable = Mapping[TransportStatus, frozenset[TransportStatus]]

STATUS_TRANSITIONS: StatusTable = {
    TransportStatus.AVAILABLE: frozenset({TransportStatus.IN_USE, TransportStatus.MAINTENANCE}),
    TransportStatus.IN_USE: frozenset({TransportStatus.AVAILABLE, TransportStatus.MAINTENANCE}),
    TransportStatus.MAINTENANCE: frozenset({TransportStatus.AVAILABLE}),
}


@dataclass(frozen=True)
class BicycleSpec:
    """Datos propios de una bicicleta."""

    kind: ClassVar[TransportType] = TransportType.BICYCLE
    transitions: ClassVar[StatusTable] = STATUS_TRANSITIONS
    label: ClassVar[str] = "Bicicleta"

    gear_count: int = 1
    brake_type: str = "rim"

    def __post_init__(self) -> None:
        if self.gear_count < 1:
            raise ValidationError("gear_count", f"gear_count debe ser al menos 1: {self.gear_count}")

    def specifications(self) -> dict[str, Any]:
        return {"gears": self.gear_count, "brakes": self.brake_type}

    def to_json(self) -> dict[str, Any]:
        return {"gearCount": self.gear_count, "brakeType": self.brake_type}

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> "BicycleSpec":
        return cls(
            gear_count=data.get("gearCount") or 1,
            brake_type=data.get("brakeType") or "rim",
        )


@dataclass(frozen=True)
class ElectricScooterSpec:
    """Datos propios de un scooter eléctrico (velocidad en km/h, autonomía en km)."""

    kind: ClassVar[TransportType] = TransportType.ELECTRIC_SCOOTER
    transitions: ClassVar[StatusTable] = STATUS_TRANSITIONS
    label: ClassVar[str] = "Scooter Eléctrico"

    max_speed: int = 25
    range_km: int = 30

    def __post_init__(self) -> None:
        if self.max_speed <= 0:
            raise ValidationError("max_speed", f"max_speed debe ser positivo: {self.max_speed}")
        if self.range_km <= 0:
            raise ValidationError("range_km", f"range_km debe ser positivo: {self.range_km}")

    def specifications(self) -> dict[str, Any]:
        return {"maxSpeed": f"{self.max_speed} km/h", "range": f"{self.range_km} km"}

    def to_json(self) -> dict[str, Any]:
        return {"maxSpeed": self.max_speed, "range": self.range_km}

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> "ElectricScooterSpec":
        return cls(
            max_speed=data.get("maxSpeed") or 25,
            range_km=data.get("range") or 30,
        )


TransportVariant = BicycleSpec | ElectricScooterSpec

VARIANTS: dict[TransportType, type[BicycleSpec] | type[ElectricScooterSpec]] = {
    TransportType.BICYCLE: BicycleSpec,
    TransportType.ELECTRIC_SCOOTER: ElectricScooterSpec,
}


@dataclass(frozen=True)
class Transport:
    """
    Vehículo rentable.

    Las diferencias entre bicicleta y scooter viven en `variant`, seleccionado
    por su `kind`: tabla de transiciones, especificaciones y campos propios.
    `current_station_id` es None mientras el vehículo está en uso fuera de una
    estación.
    """

    id: int
    model: str
    status: TransportStatus
    current_station_id: int | None
    hourly_rate: Money
    battery_level: BatteryLevel
    variant: TransportVariant
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def type(self) -> TransportType:
        return self.variant.kind

    @property
    def battery_percentage(self) -> float:
        return self.battery_level.percentage

    @property
    def battery_status(self) -> BatteryStatus:
        return self.battery_level.status

    # === Máquina de estados ===

    def is_valid_status_transition(self, new_status: TransportStatus) -> bool:
        return new_status in self.variant.transitions.get(self.status, frozenset())

    def update_status(self, new_status: TransportStatus, now: datetime | None = None) -> "Transport":
        """
        Único punto de cambio de estado.

        Raises:
            InvalidTransitionError: Si la transición no está en la tabla del tipo.
        """
        if not self.is_valid_status_transition(new_status):
            raise InvalidTransitionError("transport", self.status.value, new_status.value)
        return replace(self, status=new_status, updated_at=now or datetime.now(timezone.utc))

    # === Predicados de negocio ===

    def is_available(self) -> bool:
        return self.status == TransportStatus.AVAILABLE and self.battery_level.can_be_rented()

    def can_be_rented(self) -> bool:
        return self.is_available()

    def needs_maintenance(self) -> bool:
        """Informativo: no dispara ninguna transición."""
        return self.status == TransportStatus.MAINTENANCE or self.battery_level.is_critical()

    def needs_charging(self) -> bool:
        """Solo los scooters se cargan; batería baja o crítica."""
        if self.type != TransportType.ELECTRIC_SCOOTER:
            return False
        return self.battery_level.is_low() or self.battery_level.is_critical()

    def calculate_cost(self, duration_minutes: int | float) -> Money:
        return rental_cost(duration_minutes, self.hourly_rate)

    def specifications(self) -> dict[str, Any]:
        return {
            "type": self.variant.label,
            "model": self.model,
            **self.variant.specifications(),
            "batteryLevel": self.battery_level.percentage,
        }

    # === Factories ===

    @classmethod
    def bicycle(
        cls,
        id: int,
        model: str,
        hourly_rate: Money,
        current_station_id: int | None,
        gear_count: int = 1,
        brake_type: str = "rim",
        status: TransportStatus = TransportStatus.AVAILABLE,
        battery_level: BatteryLevel | None = None,
    ) -> "Transport":
        return cls(
            id=id,
            model=model,
            status=status,
            current_station_id=current_station_id,
            hourly_rate=hourly_rate,
            battery_level=battery_level or BatteryLevel.full(),
            variant=BicycleSpec(gear_count=gear_count, brake_type=brake_type),
        )

    @classmethod
    def electric_scooter(
        cls,
        id: int,
        model: str,
        hourly_rate: Money,
        current_station_id: int | None,
        battery_level: BatteryLevel,
        max_speed: int = 25,
        range_km: int = 30,
        status: TransportStatus = TransportStatus.AVAILABLE,
    ) -> "Transport":
        return cls(
            id=id,
            model=model,
            status=status,
            current_station_id=current_station_id,
            hourly_rate=hourly_rate,
            battery_level=battery_level,
            variant=ElectricScooterSpec(max_speed=max_speed, range_km=range_km),
        )

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Transport":
        """
        Construye un vehículo desde la respuesta del backend.

        Raises:
            ValidationError: Si el tipo es desconocido o algún valor es inválido.
        """
        try:
            kind = TransportType(data.get("type"))
        except ValueError:
            raise ValidationError("type", f"Tipo de transporte desconocido: {data.get('type')!r}")

        battery = data.get("batteryLevel")
        return cls(
            id=data["id"],
            model=data["model"],
            status=TransportStatus(data["status"]),
            current_station_id=data.get("currentStationId"),
            hourly_rate=Money.create(data["hourlyRate"], data.get("currency", DEFAULT_CURRENCY)),
            battery_level=BatteryLevel.create(100 if battery is None else battery),
            variant=VARIANTS[kind].from_api(data),
            created_at=parse_datetime(data.get("createdAt")),
            updated_at=parse_datetime(data.get("updatedAt")),
        )

    def to_json(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type.value,
            "model": self.model,
            "status": self.status.value,
            "currentStationId": self.current_station_id,
            "hourlyRate": float(self.hourly_rate.amount),
            "currency": self.hourly_rate.currency,
            "batteryLevel": self.battery_level.percentage,
            **self.variant.to_json(),
            "specifications": self.specifications(),
            "createdAt": format_datetime(self.created_at),
            "updatedAt": format_datetime(self.updated_at),
        }
