"""
Esquemas Pydantic para `user` y autenticación.

El registro acepta cualquier tipo en los campos: el tipo y los tamaños los
valida `user_service.validate_registration` para responder con `location`.
"""
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict

from app.api.schemas.common import serialize_doc


class UserRegisterIn(BaseModel):
    model_config = ConfigDict(extra="ignore")

    username: Any = None
    password: Any = None
    fullname: Any = None


class UserOut(BaseModel):
    id: str
    username: str
    fullname: Optional[str] = None

    @classmethod
    def from_doc(cls, doc: Dict[str, Any]) -> "UserOut":
        data = serialize_doc(doc)
        return cls(id=data["id"], username=data["username"], fullname=data.get("fullname"))


class LoginIn(BaseModel):
    username: str
    password: str


class AuthTokenOut(BaseModel):
    authToken: str
