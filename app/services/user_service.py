"""
Registro de usuarios: validación de campos y alta con contraseña hasheada.
"""
from typing import Any, Dict

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError

from app.core.exceptions import ValidationError
from app.core.time import now_utc
from app.infrastructure.security.passwords import hash_password
from app.repositories import user_repo

REQUIRED_FIELDS = ("username", "password")
STRING_FIELDS = ("username", "password", "fullname")
TRIMMED_FIELDS = ("username", "password")
SIZED_FIELDS = {
    "username": {"min": 1},
    "password": {"min": 8, "max": 72},
}

DUPLICATE_USERNAME = "The username already exists"


def validate_registration(fields: Dict[str, Any]) -> None:
    """Lanza ValidationError (con `location`) en el primer campo inválido."""
    for field in REQUIRED_FIELDS:
        if field not in fields or fields[field] is None:
            raise ValidationError("Missing field", location=field)

    for field in STRING_FIELDS:
        if field in fields and fields[field] is not None and not isinstance(fields[field], str):
            raise ValidationError("Incorrect field type: expected string", location=field)

    for field in TRIMMED_FIELDS:
        if fields[field].strip() != fields[field]:
            raise ValidationError("Cannot start or end with whitespace", location=field)

    for field, size in SIZED_FIELDS.items():
        value = fields[field]
        if "min" in size and len(value) < size["min"]:
            raise ValidationError(f"Must be at least {size['min']} characters long", location=field)
        if "max" in size and len(value) > size["max"]:
            raise ValidationError(f"Must be at most {size['max']} characters long", location=field)


async def register_user(db: AsyncIOMotorDatabase, fields: Dict[str, Any]) -> Dict[str, Any]:
    validate_registration(fields)
    username = fields["username"]
    if await user_repo.find_user_by_username(db, username):
        raise ValidationError(DUPLICATE_USERNAME, location="username")

    now = now_utc()
    doc: Dict[str, Any] = {
        "username": username,
        "password": hash_password(fields["password"]),
        "createdAt": now,
        "updatedAt": now,
    }
    fullname = (fields.get("fullname") or "").strip()
    if fullname:
        doc["fullname"] = fullname
    try:
        return await user_repo.insert_user(db, doc)
    except DuplicateKeyError:
        # carrera entre dos registros con el mismo username
        raise ValidationError(DUPLICATE_USERNAME, location="username")
