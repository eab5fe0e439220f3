"""
Esquemas Pydantic para `note`.

La entrada es permisiva (todos los campos opcionales y sin tipo): presencia,
tipos y referencias a folder/tags se validan en el servicio para responder
400 con un mensaje concreto.
"""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.api.schemas.common import serialize_doc


class NoteIn(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: Optional[Any] = None
    content: Optional[Any] = None
    folderId: Optional[Any] = None
    tags: Optional[Any] = None


class NoteOut(BaseModel):
    id: str
    title: str
    content: Optional[str] = None
    folderId: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    userId: str
    createdAt: str
    updatedAt: str

    @classmethod
    def from_doc(cls, doc: Dict[str, Any]) -> "NoteOut":
        data = serialize_doc(doc)
        data.setdefault("tags", [])
        return cls(**data)
