"""Interface Clock - Puerto para abstracción de tiempo."""

from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone


class Clock(ABC):
    """
    Fuente de la hora actual para casos de uso y entidades.

    Los casos de uso nunca llaman a datetime.now() directamente: reciben un
    Clock para que los cálculos de duración y costo sean deterministas en tests.
    """

    @abstractmethod
    def now(self) -> datetime:
        """Retorna la fecha/hora actual (timezone-aware UTC)."""
        raise NotImplementedError


class SystemClock(Clock):
    """Reloj del sistema."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FakeClock(Clock):
    """Reloj fijo para testing; avanza solo cuando se le indica."""

    def __init__(self, fixed_time: datetime | None = None):
        self._fixed_time = fixed_time or datetime.now(timezone.utc)

    def now(self) -> datetime:
        return self._fixed_time

    def set_time(self, new_time: datetime) -> None:
        self._fixed_time = new_time

    def advance(self, minutes: int = 0, hours: int = 0, seconds: int = 0) -> None:
        self._fixed_time = self._fixed_time + timedelta(hours=hours, minutes=minutes, seconds=seconds)
