"""Service layer for tags."""
import logging
from typing import Dict, Any, List

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError

from app.core.exceptions import NotFound, ValidationError
from app.core.ids import parse_object_id, to_object_id
from app.core.time import now_utc
from app.repositories import note_repo, tag_repo

_log = logging.getLogger("noteful.tags")

DUPLICATE_NAME = "Tag name already exists"


def _require_name(fields: Dict[str, Any]) -> str:
    name = fields.get("name")
    if not name:
        raise ValidationError("Missing `name` in request body", location="name")
    return name


async def list_tags(db: AsyncIOMotorDatabase, user_id: ObjectId) -> List[Dict[str, Any]]:
    return await tag_repo.list_tags(db, user_id)


async def get_tag(db: AsyncIOMotorDatabase, user_id: ObjectId, tag_id: str) -> Dict[str, Any]:
    doc = await tag_repo.get_tag(db, user_id, parse_object_id(tag_id))
    if doc is None:
        raise NotFound()
    return doc


async def create_tag(db: AsyncIOMotorDatabase, user_id: ObjectId, fields: Dict[str, Any]) -> Dict[str, Any]:
    name = _require_name(fields)
    now = now_utc()
    try:
        return await tag_repo.insert_tag(db, {"name": name, "userId": user_id, "createdAt": now, "updatedAt": now})
    except DuplicateKeyError:
        raise ValidationError(DUPLICATE_NAME, location="name")


async def update_tag(
    db: AsyncIOMotorDatabase, user_id: ObjectId, tag_id: str, fields: Dict[str, Any]
) -> Dict[str, Any]:
    oid = parse_object_id(tag_id)
    name = _require_name(fields)
    try:
        doc = await tag_repo.update_tag(db, user_id, oid, {"name": name, "updatedAt": now_utc()})
    except DuplicateKeyError:
        raise ValidationError(DUPLICATE_NAME, location="name")
    if doc is None:
        raise NotFound()
    return doc


async def delete_tag(db: AsyncIOMotorDatabase, user_id: ObjectId, tag_id: str) -> None:
    """Borra el tag y lo quita de las notas del usuario."""
    oid = to_object_id(tag_id)
    if oid is None:
        return
    if await tag_repo.delete_tag(db, user_id, oid):
        pulled = await note_repo.detach_tag(db, user_id, oid, now_utc())
        _log.debug("tag=%s deleted, pulled from %s notes", oid, pulled)
