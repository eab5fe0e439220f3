"""Repo de la colección `user`."""
from typing import Dict, Any, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

COLLECTION = "user"


async def find_user_by_username(db: AsyncIOMotorDatabase, username: str) -> Optional[Dict[str, Any]]:
    return await db[COLLECTION].find_one({"username": username})


async def insert_user(db: AsyncIOMotorDatabase, doc: Dict[str, Any]) -> Dict[str, Any]:
    """Inserta usuario; lanza DuplicateKeyError si el username ya existe (índice único)."""
    data = dict(doc)
    res = await db[COLLECTION].insert_one(data)
    data["_id"] = res.inserted_id
    return data
