"""Conversión de fechas entre el formato del backend (ISO 8601) y datetime."""

from datetime import datetime, timezone
from typing import Any


def ensure_utc(value: datetime) -> datetime:
    """Las fechas sin zona horaria se interpretan como UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def parse_datetime(value: Any) -> datetime | None:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return ensure_utc(value)
    return ensure_utc(datetime.fromisoformat(str(value)))


def format_datetime(value: datetime | None) -> str | None:
    return value.isoformat() if value else None
