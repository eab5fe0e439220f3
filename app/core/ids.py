"""
Validación y conversión de identificadores (ObjectId) recibidos por la API.

Un id es válido si son 24 caracteres hex o exactamente 12 bytes, igual que
las reglas de construcción de ObjectId en Mongo.
"""
from typing import Any, Optional

from bson import ObjectId
from bson.errors import InvalidId as BsonInvalidId

from app.core.exceptions import InvalidId


def to_object_id(value: Any) -> Optional[ObjectId]:
    """Convierte `value` a ObjectId o devuelve None si no es un id válido."""
    if isinstance(value, ObjectId):
        return value
    if not isinstance(value, str):
        return None
    if ObjectId.is_valid(value):
        return ObjectId(value)
    raw = value.encode("utf-8")
    if len(raw) == 12:
        try:
            return ObjectId(raw)
        except BsonInvalidId:
            return None
    return None


def parse_object_id(value: Any, field: str = "id") -> ObjectId:
    """Como `to_object_id` pero lanza InvalidId con el nombre del campo."""
    oid = to_object_id(value)
    if oid is None:
        raise InvalidId(f"The `{field}` is not valid")
    return oid
