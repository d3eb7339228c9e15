"""Validación y conversión de identificadores de almacenamiento (ObjectId, 24 hex)."""
import re
from typing import Any

from bson import ObjectId

_OBJECT_ID_RE = re.compile(r"[0-9a-fA-F]{24}")


def is_valid_id(candidate: Any) -> bool:
    """True solo si `candidate` es un str de exactamente 24 caracteres hexadecimales."""
    return isinstance(candidate, str) and _OBJECT_ID_RE.fullmatch(candidate) is not None


def to_object_id(value: str) -> ObjectId:
    """Convierte un id ya validado; lanza ValueError si no tiene formato válido."""
    if not is_valid_id(value):
        raise ValueError(f"Invalid id: {value!r}")
    return ObjectId(value)


def id_str(value: Any) -> str | None:
    """Serializa un ObjectId (o None) para la respuesta."""
    return None if value is None else str(value)
