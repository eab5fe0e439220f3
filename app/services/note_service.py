"""
Service layer for notes: validation and owner scoping over the note repository.

Every operation receives the caller's user id and never touches notes owned by
someone else.
"""
import re
from typing import Dict, Any, List, Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.core.exceptions import NotFound, ValidationError
from app.core.ids import parse_object_id, to_object_id
from app.core.time import now_utc
from app.repositories import folder_repo, note_repo, tag_repo


STRING_FIELDS = ("title", "content")
NO_FOLDER = (None, "")


def _check_fields(fields: Dict[str, Any]) -> None:
    """`title` obligatorio; `title` y `content` deben ser strings."""
    if not fields.get("title"):
        raise ValidationError("Missing `title` in request body", location="title")
    for field in STRING_FIELDS:
        if fields.get(field) is not None and not isinstance(fields[field], str):
            raise ValidationError("Incorrect field type: expected string", location=field)


async def _resolve_folder(db: AsyncIOMotorDatabase, user_id: ObjectId, value: Any) -> ObjectId:
    """Valida que `folderId` sea un id bien formado de una carpeta del usuario."""
    folder_id = to_object_id(value)
    if folder_id is None or await folder_repo.count_owned(db, user_id, [folder_id]) != 1:
        raise ValidationError("The `folderId` is not valid", location="folderId")
    return folder_id


async def _resolve_tags(db: AsyncIOMotorDatabase, user_id: ObjectId, value: Any) -> List[ObjectId]:
    """Valida la lista de tags: ids bien formados, sin duplicados y propios."""
    if not isinstance(value, list):
        raise ValidationError("The `tags` property must be an array", location="tags")
    tag_ids: List[ObjectId] = []
    for raw in value:
        oid = to_object_id(raw)
        if oid is None:
            raise ValidationError("The `tags` array contains an invalid `id`", location="tags")
        if oid not in tag_ids:
            tag_ids.append(oid)
    if tag_ids and await tag_repo.count_owned(db, user_id, tag_ids) != len(tag_ids):
        raise ValidationError("The `tags` array contains an invalid `id`", location="tags")
    return tag_ids


async def list_notes(
    db: AsyncIOMotorDatabase,
    user_id: ObjectId,
    search_term: Optional[str] = None,
    folder_id: Optional[str] = None,
    tag_id: Optional[str] = None,
) -> List[Dict[str, Any]]:
    """Notas del usuario; `search_term` busca como substring (sin mayúsculas) en el título."""
    filtro: Dict[str, Any] = {"userId": user_id}
    if search_term:
        filtro["title"] = {"$regex": re.escape(search_term), "$options": "i"}
    if folder_id:
        filtro["folderId"] = parse_object_id(folder_id, "folderId")
    if tag_id:
        filtro["tags"] = parse_object_id(tag_id, "tagId")
    return await note_repo.list_notes(db, filtro)


async def get_note(db: AsyncIOMotorDatabase, user_id: ObjectId, note_id: str) -> Dict[str, Any]:
    oid = parse_object_id(note_id)
    doc = await note_repo.get_note(db, user_id, oid)
    if doc is None:
        raise NotFound()
    return doc


async def create_note(db: AsyncIOMotorDatabase, user_id: ObjectId, fields: Dict[str, Any]) -> Dict[str, Any]:
    _check_fields(fields)
    now = now_utc()
    doc: Dict[str, Any] = {"title": fields["title"]}
    if fields.get("content") is not None:
        doc["content"] = fields["content"]
    if fields.get("folderId") not in NO_FOLDER:
        doc["folderId"] = await _resolve_folder(db, user_id, fields["folderId"])
    doc["tags"] = await _resolve_tags(db, user_id, fields["tags"]) if fields.get("tags") is not None else []
    doc.update({"userId": user_id, "createdAt": now, "updatedAt": now})
    return await note_repo.insert_note(db, doc)


async def update_note(
    db: AsyncIOMotorDatabase, user_id: ObjectId, note_id: str, fields: Dict[str, Any]
) -> Dict[str, Any]:
    """Actualiza sólo los campos presentes en `fields`.

    `folderId` vacío o null quita la carpeta de la nota.
    """
    oid = parse_object_id(note_id)
    _check_fields(fields)

    set_fields: Dict[str, Any] = {"title": fields["title"]}
    unset_fields: List[str] = []
    if "content" in fields:
        if fields["content"] is None:
            unset_fields.append("content")
        else:
            set_fields["content"] = fields["content"]
    if "folderId" in fields:
        if fields["folderId"] not in NO_FOLDER:
            set_fields["folderId"] = await _resolve_folder(db, user_id, fields["folderId"])
        else:
            unset_fields.append("folderId")
    if "tags" in fields:
        set_fields["tags"] = await _resolve_tags(db, user_id, fields["tags"] if fields["tags"] is not None else [])
    set_fields["updatedAt"] = now_utc()

    doc = await note_repo.update_note(db, user_id, oid, set_fields, unset_fields)
    if doc is None:
        raise NotFound()
    return doc


async def delete_note(db: AsyncIOMotorDatabase, user_id: ObjectId, note_id: str) -> None:
    """Idempotente: un id inexistente (o mal formado) no es error."""
    oid = to_object_id(note_id)
    if oid is None:
        return
    await note_repo.delete_note(db, user_id, oid)
