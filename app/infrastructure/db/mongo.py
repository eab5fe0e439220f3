"""Cliente MongoDB asíncrono (Motor).

Un único cliente por proceso: se crea en el startup de FastAPI y se cierra en
el shutdown. Repositorios y servicios reciben la DB por parámetro (ver
`app.api.deps.get_db`), no la importan de aquí.
"""
from __future__ import annotations

import certifi
import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from app.core.config import settings

_log = logging.getLogger("noteful.mongo")

_client: Optional[AsyncIOMotorClient] = None
_db: Optional[AsyncIOMotorDatabase] = None


def _build_client() -> AsyncIOMotorClient:
    uri = settings.mongo_uri
    kwargs = dict(serverSelectionTimeoutMS=settings.mongo_server_selection_timeout_ms, tz_aware=True)
    if uri.startswith("mongodb+srv://"):
        # SRV ya implica TLS; proveemos CA bundle para robustez
        kwargs["tlsCAFile"] = certifi.where()
    elif settings.mongo_tls:
        kwargs["tls"] = True
        kwargs["tlsCAFile"] = certifi.where()
        if settings.mongo_tls_insecure:
            kwargs["tlsAllowInvalidCertificates"] = True
        if settings.mongo_tls_allow_invalid_hostnames:
            kwargs["tlsAllowInvalidHostnames"] = True
    return AsyncIOMotorClient(uri, **kwargs)


async def init_mongo() -> bool:
    """
    Inicializa el cliente y valida conexión (ping).
    Llamar una sola vez en el startup de FastAPI. No tumba la app si Mongo
    no responde: deja el cliente creado y devuelve False.
    """
    global _client, _db
    _client = _client or _build_client()
    _db = _client[settings.mongo_db]
    try:
        await _client.admin.command("ping")
        _log.info("Mongo conectado (db=%s)", settings.mongo_db)
        return True
    except PyMongoError as e:
        _log.warning("Mongo no accesible: %s", e)
        return False


def close_mongo() -> None:
    global _client, _db
    if _client is not None:
        _client.close()
        _log.info("Mongo desconectado")
    _client = None
    _db = None


def get_db() -> AsyncIOMotorDatabase:
    """
    Devuelve la referencia a la base de datos.
    Úsalo en la capa de dependencias, no directamente en routers.
    """
    if _db is None:
        raise RuntimeError("Mongo no inicializado. Intenta más tarde.")
    return _db


def db_ready() -> bool:
    return _db is not None
