"""Value Objects del dominio de préstamos."""

from ecomove.domain.value_objects.battery_level import BatteryLevel, BatteryStatus
from ecomove.domain.value_objects.coordinate import Coordinate
from ecomove.domain.value_objects.document_number import DocumentNumber
from ecomove.domain.value_objects.duration import Duration
from ecomove.domain.value_objects.email import Email
from ecomove.domain.value_objects.money import Money
from ecomove.domain.value_objects.phone import Phone

__all__ = [
    "BatteryLevel",
    "BatteryStatus",
    "Coordinate",
    "DocumentNumber",
    "Duration",
    "Email",
    "Money",
    "Phone",
]
