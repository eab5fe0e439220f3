"""Repo de la colección `folder`."""
from typing import Dict, Any, Iterable, List, Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument

COLLECTION = "folder"


async def list_folders(db: AsyncIOMotorDatabase, user_id: ObjectId) -> List[Dict[str, Any]]:
    """Carpetas del usuario ordenadas por nombre."""
    return await db[COLLECTION].find({"userId": user_id}, sort=[("name", 1)]).to_list(length=None)


async def get_folder(db: AsyncIOMotorDatabase, user_id: ObjectId, folder_id: ObjectId) -> Optional[Dict[str, Any]]:
    return await db[COLLECTION].find_one({"_id": folder_id, "userId": user_id})


async def count_owned(db: AsyncIOMotorDatabase, user_id: ObjectId, folder_ids: Iterable[ObjectId]) -> int:
    ids = list(folder_ids)
    return await db[COLLECTION].count_documents({"_id": {"$in": ids}, "userId": user_id})


async def insert_folder(db: AsyncIOMotorDatabase, doc: Dict[str, Any]) -> Dict[str, Any]:
    data = dict(doc)
    res = await db[COLLECTION].insert_one(data)
    data["_id"] = res.inserted_id
    return data


async def update_folder(
    db: AsyncIOMotorDatabase, user_id: ObjectId, folder_id: ObjectId, set_fields: Dict[str, Any]
) -> Optional[Dict[str, Any]]:
    return await db[COLLECTION].find_one_and_update(
        {"_id": folder_id, "userId": user_id},
        {"$set": set_fields},
        return_document=ReturnDocument.AFTER,
    )


async def delete_folder(db: AsyncIOMotorDatabase, user_id: ObjectId, folder_id: ObjectId) -> int:
    res = await db[COLLECTION].delete_one({"_id": folder_id, "userId": user_id})
    return res.deleted_count
