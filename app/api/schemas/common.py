"""
Conversión de documentos Mongo a la forma expuesta por la API.

- `_id` pasa a `id` (string hex).
- ObjectId (también dentro de listas) pasa a string.
- Fechas a ISO-8601 UTC.
- Nunca expone `password`.
"""
from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict

from bson import ObjectId

from app.core.time import iso_utc

HIDDEN_FIELDS = {"_id", "password"}


def _plain(value: Any) -> Any:
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, datetime):
        return iso_utc(value)
    if isinstance(value, list):
        return [_plain(v) for v in value]
    return value


def serialize_doc(doc: Dict[str, Any]) -> Dict[str, Any]:
    out: Dict[str, Any] = {"id": str(doc["_id"])}
    for key, value in doc.items():
        if key in HIDDEN_FIELDS:
            continue
        out[key] = _plain(value)
    return out


class NamedIn(BaseModel):
    """Entrada de folder/tag: sólo `name` (la presencia se valida en el servicio)."""
    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None


class NamedOut(BaseModel):
    id: str
    name: str
    userId: str
    createdAt: str
    updatedAt: str

    @classmethod
    def from_doc(cls, doc: Dict[str, Any]):
        return cls(**serialize_doc(doc))
