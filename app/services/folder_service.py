"""Service layer for folders."""
import logging
from typing import Dict, Any, List

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError

from app.core.exceptions import NotFound, ValidationError
from app.core.ids import parse_object_id, to_object_id
from app.core.time import now_utc
from app.repositories import folder_repo, note_repo

_log = logging.getLogger("noteful.folders")

DUPLICATE_NAME = "Folder name already exists"


def _require_name(fields: Dict[str, Any]) -> str:
    name = fields.get("name")
    if not name:
        raise ValidationError("Missing `name` in request body", location="name")
    return name


async def list_folders(db: AsyncIOMotorDatabase, user_id: ObjectId) -> List[Dict[str, Any]]:
    return await folder_repo.list_folders(db, user_id)


async def get_folder(db: AsyncIOMotorDatabase, user_id: ObjectId, folder_id: str) -> Dict[str, Any]:
    doc = await folder_repo.get_folder(db, user_id, parse_object_id(folder_id))
    if doc is None:
        raise NotFound()
    return doc


async def create_folder(db: AsyncIOMotorDatabase, user_id: ObjectId, fields: Dict[str, Any]) -> Dict[str, Any]:
    name = _require_name(fields)
    now = now_utc()
    try:
        return await folder_repo.insert_folder(
            db, {"name": name, "userId": user_id, "createdAt": now, "updatedAt": now}
        )
    except DuplicateKeyError:
        raise ValidationError(DUPLICATE_NAME, location="name")


async def update_folder(
    db: AsyncIOMotorDatabase, user_id: ObjectId, folder_id: str, fields: Dict[str, Any]
) -> Dict[str, Any]:
    oid = parse_object_id(folder_id)
    name = _require_name(fields)
    try:
        doc = await folder_repo.update_folder(db, user_id, oid, {"name": name, "updatedAt": now_utc()})
    except DuplicateKeyError:
        raise ValidationError(DUPLICATE_NAME, location="name")
    if doc is None:
        raise NotFound()
    return doc


async def delete_folder(db: AsyncIOMotorDatabase, user_id: ObjectId, folder_id: str) -> None:
    """Borra la carpeta y la desvincula de las notas del usuario."""
    oid = to_object_id(folder_id)
    if oid is None:
        return
    if await folder_repo.delete_folder(db, user_id, oid):
        detached = await note_repo.detach_folder(db, user_id, oid, now_utc())
        _log.debug("folder=%s deleted, %s notes detached", oid, detached)
