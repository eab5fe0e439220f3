"""
Bootstrap de la base Mongo: define y aplica validadores (JSON Schema) e índices.
Se ejecuta al inicio de la app para asegurar colecciones mínimas y consistencia.
No tumba la app si algo falla; deja warnings en casos no críticos.
"""
from __future__ import annotations

from typing import Any, Dict, List
import logging

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from app.repositories import folder_repo, note_repo, tag_repo, user_repo

_log = logging.getLogger("noteful.mongo.bootstrap")


_TIMESTAMPS = {
    "createdAt": {"bsonType": "date"},
    "updatedAt": {"bsonType": "date"},
}

VALIDATORS: Dict[str, Dict[str, Any]] = {
    user_repo.COLLECTION: {
        "bsonType": "object",
        "required": ["username", "password", "createdAt", "updatedAt"],
        "properties": {
            "username": {"bsonType": "string", "minLength": 1},
            "fullname": {"bsonType": "string"},
            "password": {"bsonType": "string"},
            **_TIMESTAMPS,
        },
        "additionalProperties": True,
    },
    note_repo.COLLECTION: {
        "bsonType": "object",
        "required": ["title", "userId", "tags", "createdAt", "updatedAt"],
        "properties": {
            "title": {"bsonType": "string", "minLength": 1},
            "content": {"bsonType": "string"},
            "folderId": {"bsonType": "objectId"},
            "tags": {"bsonType": "array", "items": {"bsonType": "objectId"}},
            "userId": {"bsonType": "objectId"},
            **_TIMESTAMPS,
        },
        "additionalProperties": True,
    },
    folder_repo.COLLECTION: {
        "bsonType": "object",
        "required": ["name", "userId", "createdAt", "updatedAt"],
        "properties": {
            "name": {"bsonType": "string", "minLength": 1},
            "userId": {"bsonType": "objectId"},
            **_TIMESTAMPS,
        },
        "additionalProperties": True,
    },
    tag_repo.COLLECTION: {
        "bsonType": "object",
        "required": ["name", "userId", "createdAt", "updatedAt"],
        "properties": {
            "name": {"bsonType": "string", "minLength": 1},
            "userId": {"bsonType": "objectId"},
            **_TIMESTAMPS,
        },
        "additionalProperties": True,
    },
}

INDEXES: Dict[str, List[Dict[str, Any]]] = {
    user_repo.COLLECTION: [
        {"keys": [("username", 1)], "unique": True, "name": "uniq_username"},
    ],
    note_repo.COLLECTION: [
        {"keys": [("userId", 1)], "name": "ix_user"},
        {"keys": [("userId", 1), ("folderId", 1)], "name": "ix_user_folder"},
        {"keys": [("userId", 1), ("tags", 1)], "name": "ix_user_tags"},
    ],
    folder_repo.COLLECTION: [
        {"keys": [("userId", 1), ("name", 1)], "unique": True, "name": "uniq_user_folder_name"},
    ],
    tag_repo.COLLECTION: [
        {"keys": [("userId", 1), ("name", 1)], "unique": True, "name": "uniq_user_tag_name"},
    ],
}


async def _collmod_or_create(db: AsyncIOMotorDatabase, name: str, validator: Dict[str, Any]) -> None:
    try:
        # Intenta aplicar validator con collMod
        await db.command({
            "collMod": name,
            "validator": {"$jsonSchema": validator},
            "validationLevel": "moderate",
        })
    except PyMongoError:
        # Si collMod falla (la colección no existe), intenta crearla con validator
        try:
            if name not in await db.list_collection_names():
                await db.create_collection(name, validator={"$jsonSchema": validator})
        except PyMongoError as e:
            # No aborta el arranque; solo deja sin validator estricto.
            _log.warning("No se pudo aplicar validator en '%s': %s", name, e)


async def _ensure_indexes(db: AsyncIOMotorDatabase, name: str, indexes: List[Dict[str, Any]]) -> None:
    coll = db[name]
    for ix in indexes:
        opts = dict(ix)
        keys = opts.pop("keys")
        try:
            await coll.create_index(keys, **opts)
        except PyMongoError as e:
            # Ignora fallas de índice (e.g., ya existe o datos no únicos previos)
            _log.warning("No se pudo crear índice en '%s' (%s): %s", name, keys, e)


async def ensure_indexes(db: AsyncIOMotorDatabase) -> None:
    """Índices (únicos por usuario para folder/tag y username global)."""
    for name, indexes in INDEXES.items():
        await _ensure_indexes(db, name, indexes)


async def ensure_collections(db: AsyncIOMotorDatabase) -> None:
    """
    Garantiza colecciones, validadores e índices mínimos.
    """
    for name, validator in VALIDATORS.items():
        await _collmod_or_create(db, name, validator)
    await ensure_indexes(db)
