"""Repo de la colección `note` (siempre filtrado por dueño)."""
from typing import Dict, Any, List, Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument

COLLECTION = "note"


async def list_notes(db: AsyncIOMotorDatabase, filtro: Dict[str, Any]) -> List[Dict[str, Any]]:
    """Lista notas según el filtro dado, en el orden natural de la colección."""
    return await db[COLLECTION].find(filtro).to_list(length=None)


async def get_note(db: AsyncIOMotorDatabase, user_id: ObjectId, note_id: ObjectId) -> Optional[Dict[str, Any]]:
    return await db[COLLECTION].find_one({"_id": note_id, "userId": user_id})


async def insert_note(db: AsyncIOMotorDatabase, doc: Dict[str, Any]) -> Dict[str, Any]:
    """Inserta la nota y devuelve el documento con `_id`."""
    data = dict(doc)
    res = await db[COLLECTION].insert_one(data)
    data["_id"] = res.inserted_id
    return data


async def update_note(
    db: AsyncIOMotorDatabase,
    user_id: ObjectId,
    note_id: ObjectId,
    set_fields: Dict[str, Any],
    unset_fields: Optional[List[str]] = None,
) -> Optional[Dict[str, Any]]:
    """Actualiza campos de una nota propia; devuelve el documento nuevo o None."""
    update: Dict[str, Any] = {"$set": set_fields}
    if unset_fields:
        update["$unset"] = {f: "" for f in unset_fields}
    return await db[COLLECTION].find_one_and_update(
        {"_id": note_id, "userId": user_id},
        update,
        return_document=ReturnDocument.AFTER,
    )


async def delete_note(db: AsyncIOMotorDatabase, user_id: ObjectId, note_id: ObjectId) -> int:
    res = await db[COLLECTION].delete_one({"_id": note_id, "userId": user_id})
    return res.deleted_count


async def detach_folder(db: AsyncIOMotorDatabase, user_id: ObjectId, folder_id: ObjectId, now) -> int:
    """Quita `folderId` de las notas del usuario que apuntaban a la carpeta."""
    res = await db[COLLECTION].update_many(
        {"userId": user_id, "folderId": folder_id},
        {"$unset": {"folderId": ""}, "$set": {"updatedAt": now}},
    )
    return res.modified_count


async def detach_tag(db: AsyncIOMotorDatabase, user_id: ObjectId, tag_id: ObjectId, now) -> int:
    """Elimina el tag de la lista `tags` de las notas del usuario."""
    res = await db[COLLECTION].update_many(
        {"userId": user_id, "tags": tag_id},
        {"$pull": {"tags": tag_id}, "$set": {"updatedAt": now}},
    )
    return res.modified_count
