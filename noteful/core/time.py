"""
Helpers de fecha/hora en UTC para timestamps persistidos.
"""
from __future__ import annotations

from datetime import datetime, timezone


def now_utc() -> datetime:
    """Hora actual UTC truncada a milisegundos (precisión de BSON)."""
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=(now.microsecond // 1000) * 1000)


def iso_utc(dt: datetime | None) -> str | None:
    """ISO-8601 con sufijo Z; Mongo devuelve datetimes naive en UTC."""
    if dt is None:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
