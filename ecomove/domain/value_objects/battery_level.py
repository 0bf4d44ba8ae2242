"""Value Object BatteryLevel - nivel de batería de un vehículo."""

from dataclasses import dataclass
from enum import Enum

from ecomove.domain.constants import (
    BATTERY_CRITICAL_MAX,
    BATTERY_GOOD_MAX,
    BATTERY_LOW_MAX,
    MIN_RENTABLE_BATTERY,
)
from ecomove.domain.errors import ValidationError


class BatteryStatus(str, Enum):
    """Bandas de batería."""

    CRITICAL = "critical"  # 0-10%
    LOW = "low"  # 11-25%
    GOOD = "good"  # 26-75%
    EXCELLENT = "excellent"  # 76-100%


@dataclass(frozen=True)
class BatteryLevel:
    """Porcentaje de batería en [0, 100]."""

    percentage: int | float

    def __post_init__(self) -> None:
        if not 0 <= self.percentage <= 100:
            raise ValidationError(
                "percentage",
                f"El nivel de batería debe estar entre 0 y 100: {self.percentage}",
            )

    @property
    def status(self) -> BatteryStatus:
        if self.percentage <= BATTERY_CRITICAL_MAX:
            return BatteryStatus.CRITICAL
        if self.percentage <= BATTERY_LOW_MAX:
            return BatteryStatus.LOW
        if self.percentage <= BATTERY_GOOD_MAX:
            return BatteryStatus.GOOD
        return BatteryStatus.EXCELLENT

    def is_critical(self) -> bool:
        return self.status == BatteryStatus.CRITICAL

    def is_low(self) -> bool:
        return self.status == BatteryStatus.LOW

    def is_good(self) -> bool:
        return self.status == BatteryStatus.GOOD

    def is_excellent(self) -> bool:
        return self.status == BatteryStatus.EXCELLENT

    def can_be_rented(self) -> bool:
        return self.percentage > MIN_RENTABLE_BATTERY

    def __str__(self) -> str:
        return f"{self.percentage}% ({self.status.value})"

    @classmethod
    def create(cls, percentage: int | float) -> "BatteryLevel":
        return cls(percentage)

    @classmethod
    def full(cls) -> "BatteryLevel":
        return cls(100)

    @classmethod
    def empty(cls) -> "BatteryLevel":
        return cls(0)
