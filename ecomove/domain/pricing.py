"""Regla de facturación por hora iniciada."""

import math

from ecomove.domain.constants import MINUTES_PER_HOUR
from ecomove.domain.value_objects.money import Money


def billable_hours(duration_minutes: int | float) -> int:
    """
    Horas a cobrar para una duración dada.

    Regla de negocio: cualquier fracción de hora cuenta como hora completa.
    Ejemplo: 65 minutos = 2 horas.
    """
    return math.ceil(duration_minutes / MINUTES_PER_HOUR)


def rental_cost(duration_minutes: int | float, hourly_rate: Money) -> Money:
    """Costo de un préstamo: tarifa por hora multiplicada por las horas iniciadas."""
    return hourly_rate.multiply(billable_hours(duration_minutes))
