"""Value Object Duration - duración en minutos de un préstamo."""

from dataclasses import dataclass
from datetime import datetime, timedelta
from decimal import Decimal, InvalidOperation

from ecomove.domain.constants import MINUTES_PER_DAY, MINUTES_PER_HOUR
from ecomove.domain.errors import ValidationError


def _to_decimal(field: str, value: int | float | str | Decimal) -> Decimal:
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value))
    except InvalidOperation:
        raise ValidationError(field, f"{field} no es numérico: {value!r}")


@dataclass(frozen=True)
class Duration:
    """
    Value Object inmutable que representa una duración no negativa.

    Attributes:
        minutes: Cantidad decimal de minutos (>= 0).
    """

    minutes: Decimal

    def __post_init__(self) -> None:
        object.__setattr__(self, "minutes", _to_decimal("minutes", self.minutes))

        if not self.minutes.is_finite():
            raise ValidationError("minutes", f"La duración no es finita: {self.minutes}")

        if self.minutes < 0:
            raise ValidationError("minutes", f"La duración no puede ser negativa: {self.minutes}")

    @property
    def hours(self) -> Decimal:
        return self.minutes / MINUTES_PER_HOUR

    @property
    def days(self) -> Decimal:
        return self.minutes / MINUTES_PER_DAY

    def add(self, other: "Duration") -> "Duration":
        return Duration(self.minutes + other.minutes)

    def subtract(self, other: "Duration") -> "Duration":
        result = self.minutes - other.minutes
        if result < 0:
            raise ValidationError("minutes", "La duración resultante no puede ser negativa")
        return Duration(result)

    def multiply(self, factor: int | float | Decimal) -> "Duration":
        factor = _to_decimal("factor", factor)
        if not factor.is_finite() or factor < 0:
            raise ValidationError("factor", f"factor debe ser finito y no negativo: {factor}")
        return Duration(self.minutes * factor)

    def is_greater_than(self, other: "Duration") -> bool:
        return self.minutes > other.minutes

    def is_less_than(self, other: "Duration") -> bool:
        return self.minutes < other.minutes

    def format(self) -> str:
        """Ejemplos: '45 min', '1 h 5 min', '2 d 3 h'."""
        total = int(self.minutes)
        if total < MINUTES_PER_HOUR:
            return f"{total} min"
        if total < MINUTES_PER_DAY:
            hours, minutes = divmod(total, MINUTES_PER_HOUR)
            return f"{hours} h {minutes} min" if minutes else f"{hours} h"
        days, rest = divmod(total, MINUTES_PER_DAY)
        hours = rest // MINUTES_PER_HOUR
        return f"{days} d {hours} h" if hours else f"{days} d"

    def __str__(self) -> str:
        return self.format()

    @classmethod
    def create(cls, minutes: int | float | str | Decimal) -> "Duration":
        return cls(minutes)

    @classmethod
    def from_hours(cls, hours: int | float | str | Decimal) -> "Duration":
        return cls(_to_decimal("hours", hours) * MINUTES_PER_HOUR)

    @classmethod
    def from_days(cls, days: int | float | str | Decimal) -> "Duration":
        return cls(_to_decimal("days", days) * MINUTES_PER_DAY)

    @classmethod
    def between(cls, start: datetime, end: datetime) -> "Duration":
        """
        Minutos completos transcurridos entre dos instantes.

        Si `end` es anterior a `start` la duración se recorta a cero en lugar de fallar.
        """
        minutes = (end - start) // timedelta(minutes=1)
        return cls(max(0, minutes))
