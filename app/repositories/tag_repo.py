"""Repo de la colección `tag`."""
from typing import Dict, Any, Iterable, List, Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument

COLLECTION = "tag"


async def list_tags(db: AsyncIOMotorDatabase, user_id: ObjectId) -> List[Dict[str, Any]]:
    return await db[COLLECTION].find({"userId": user_id}, sort=[("name", 1)]).to_list(length=None)


async def get_tag(db: AsyncIOMotorDatabase, user_id: ObjectId, tag_id: ObjectId) -> Optional[Dict[str, Any]]:
    return await db[COLLECTION].find_one({"_id": tag_id, "userId": user_id})


async def count_owned(db: AsyncIOMotorDatabase, user_id: ObjectId, tag_ids: Iterable[ObjectId]) -> int:
    """Cuántos de `tag_ids` pertenecen al usuario (para validar referencias)."""
    ids = list(tag_ids)
    return await db[COLLECTION].count_documents({"_id": {"$in": ids}, "userId": user_id})


async def insert_tag(db: AsyncIOMotorDatabase, doc: Dict[str, Any]) -> Dict[str, Any]:
    data = dict(doc)
    res = await db[COLLECTION].insert_one(data)
    data["_id"] = res.inserted_id
    return data


async def update_tag(
    db: AsyncIOMotorDatabase, user_id: ObjectId, tag_id: ObjectId, set_fields: Dict[str, Any]
) -> Optional[Dict[str, Any]]:
    return await db[COLLECTION].find_one_and_update(
        {"_id": tag_id, "userId": user_id},
        {"$set": set_fields},
        return_document=ReturnDocument.AFTER,
    )


async def delete_tag(db: AsyncIOMotorDatabase, user_id: ObjectId, tag_id: ObjectId) -> int:
    res = await db[COLLECTION].delete_one({"_id": tag_id, "userId": user_id})
    return res.deleted_count
