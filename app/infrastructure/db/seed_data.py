"""
Datos semilla (users, folders, tags, notes) en JSON y carga a Mongo.

Los JSON guardan ids como hex y fechas ISO; aquí se convierten a ObjectId y
datetime, y las contraseñas de usuarios se hashean antes de insertar.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.core.time import parse_iso
from app.infrastructure.security.passwords import hash_password
from app.repositories import folder_repo, note_repo, tag_repo, user_repo

_log = logging.getLogger("noteful.mongo.seed")

SEED_DIR = Path(__file__).resolve().parent / "seed"

# archivo -> colección, en orden de inserción
SEED_FILES = (
    ("users.json", user_repo.COLLECTION),
    ("folders.json", folder_repo.COLLECTION),
    ("tags.json", tag_repo.COLLECTION),
    ("notes.json", note_repo.COLLECTION),
)

_ID_FIELDS = ("_id", "userId", "folderId")
_DATE_FIELDS = ("createdAt", "updatedAt")


def _convert(doc: Dict[str, Any]) -> Dict[str, Any]:
    out = dict(doc)
    for f in _ID_FIELDS:
        if out.get(f):
            out[f] = ObjectId(out[f])
    if "tags" in out:
        out["tags"] = [ObjectId(t) for t in out["tags"]]
    for f in _DATE_FIELDS:
        if isinstance(out.get(f), str):
            out[f] = parse_iso(out[f])
    return out


def load_seed(name: str, seed_dir: Path = SEED_DIR) -> List[Dict[str, Any]]:
    """Lee un archivo semilla y devuelve documentos listos para insertar."""
    with open(seed_dir / name, encoding="utf-8") as fh:
        return [_convert(d) for d in json.load(fh)]


async def seed_database(db: AsyncIOMotorDatabase, seed_dir: Path = SEED_DIR) -> Dict[str, int]:
    """Inserta todas las semillas; devuelve cuántos documentos por colección."""
    counts: Dict[str, int] = {}
    for filename, collection in SEED_FILES:
        docs = load_seed(filename, seed_dir)
        if collection == user_repo.COLLECTION:
            for d in docs:
                d["password"] = hash_password(d["password"])
        if docs:
            await db[collection].insert_many(docs)
        counts[collection] = len(docs)
        _log.info("seed %s: %s documentos", collection, len(docs))
    return counts


async def drop_seeded(db: AsyncIOMotorDatabase) -> None:
    for _, collection in SEED_FILES:
        await db.drop_collection(collection)
