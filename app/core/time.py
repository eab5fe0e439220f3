"""
Utilidades de fecha/hora en UTC para timestamps de documentos.
"""
from __future__ import annotations

from datetime import datetime, timezone


def now_utc() -> datetime:
    """Hora actual en UTC truncada a milisegundos (precisión de BSON date)."""
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=(now.microsecond // 1000) * 1000)


def as_utc(dt: datetime) -> datetime:
    # Mongo devuelve fechas naive (UTC) salvo que el cliente sea tz_aware
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def iso_utc(dt: datetime) -> str:
    """ISO-8601 con milisegundos y sufijo Z, p. ej. 2018-01-01T10:00:00.000Z"""
    d = as_utc(dt)
    return d.strftime("%Y-%m-%dT%H:%M:%S.") + f"{d.microsecond // 1000:03d}Z"


def parse_iso(value: str) -> datetime:
    """Parsea ISO-8601 (acepta sufijo Z) a datetime aware en UTC."""
    return as_utc(datetime.fromisoformat(value.replace("Z", "+00:00")))
